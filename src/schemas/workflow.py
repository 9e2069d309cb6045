from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.hubspot import OptionOut
from src.utils.constants import SelectionMode


def unwrap_field(raw: Any) -> Any:
    """Return the plain value of a workflow input field.

    HubSpot sends input fields either as bare values (action execution),
    as ``{"value": ...}`` (options fetch) or as ``{"fieldValue": {"value": ...}}``.
    """
    if isinstance(raw, dict):
        if "fieldValue" in raw:
            return unwrap_field(raw["fieldValue"])
        return raw.get("value")
    return raw


class WorkflowOrigin(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    portal_id: Optional[Union[int, str]] = Field(default=None, alias="portalId")

    @property
    def hub_id(self) -> Optional[str]:
        if self.portal_id is None or self.portal_id == "":
            return None
        return str(self.portal_id)


class WorkflowObject(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    object_type: Optional[str] = Field(default=None, alias="objectType")
    object_id: Optional[Union[int, str]] = Field(default=None, alias="objectId")


class WorkflowCallback(BaseModel):
    """Request body HubSpot posts to the options and action URLs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    origin: WorkflowOrigin = Field(default_factory=WorkflowOrigin)
    object_type_id: Optional[str] = Field(default=None, alias="objectTypeId")
    record: Optional[WorkflowObject] = Field(default=None, alias="object")
    input_fields: dict[str, Any] = Field(default_factory=dict, alias="inputFields")
    fields: dict[str, Any] = Field(default_factory=dict)

    def raw_value(self, name: str) -> Any:
        """Unwrapped field value, with empty strings kept as they were sent."""
        raw = self.input_fields.get(name)
        if raw is None:
            raw = self.fields.get(name)
        return unwrap_field(raw)

    def input_value(self, name: str) -> Optional[str]:
        value = self.raw_value(name)
        if value is None or value == "":
            return None
        return str(value)


class PropertyCriterion(BaseModel):
    property_name: str
    property_value: str


class AssociationLabelCriterion(BaseModel):
    association_type_id: str


class AssociationRequest(BaseModel):
    hub_id: str
    from_object_type: str
    from_object_id: str
    to_object_type: str
    criterion: Union[PropertyCriterion, AssociationLabelCriterion]

    @property
    def selection_mode(self) -> SelectionMode:
        if isinstance(self.criterion, PropertyCriterion):
            return SelectionMode.PROPERTY
        return SelectionMode.ASSOCIATION_LABEL


class AssociationType(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type_id: int = Field(alias="typeId")
    category: Optional[str] = None
    label: Optional[str] = None


class AssociatedRecordEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    to_object_id: str = Field(alias="toObjectId")
    association_types: List[AssociationType] = Field(default_factory=list, alias="associationTypes")

    @field_validator("to_object_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Union[int, str]) -> str:
        return str(value)

    @property
    def type_ids(self) -> set[str]:
        return {str(t.type_id) for t in self.association_types}


class DisassociationResult(BaseModel):
    success: bool
    message: str
    targets: int = 0
    deleted: int = 0


class OptionsResponse(BaseModel):
    options: List[OptionOut] = Field(default_factory=list)


class SuccessOptionsResponse(OptionsResponse):
    success: bool = True


class WorkflowActionUpdateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    definition_id: str = Field(alias="definitionId")
