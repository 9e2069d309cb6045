import logging

from src.schemas import (
    AssociatedRecordEdge,
    AssociationLabelCriterion,
    AssociationRequest,
    DisassociationResult,
    PropertyCriterion,
    WorkflowCallback,
)
from src.services.hubspot import HubspotService
from src.utils.constants import SelectionMode
from src.utils.exceptions import InputValidationError, RemoteAPIError
from src.utils.utils import normalize_object_type


class DisassociationService:
    """Removes associations between a workflow record and records of another type.

    The criterion only decides which target records are affected. Once a
    target is selected every association type observed between the source
    and target types is removed, so the two records end up fully unlinked.
    """

    def __init__(self, db):
        self.hubspot_service = HubspotService(db)

    def build_request(self, callback: WorkflowCallback) -> AssociationRequest:
        """Turn a workflow action callback into an AssociationRequest.

        Raises:
            InputValidationError: when a required field is missing or the
                selection mode is unknown.
        """
        record = callback.record
        hub_id = callback.origin.hub_id
        from_object_type = normalize_object_type(record.object_type if record else None)
        from_object_id = (
            str(record.object_id) if record and record.object_id is not None else None
        )
        to_object_type = callback.input_value("objectInput")
        selection = callback.input_value("selectionInput")
        option = callback.input_value("optionsInput")

        missing = [
            name
            for name, value in (
                ("origin.portalId", hub_id),
                ("object.objectType", from_object_type),
                ("object.objectId", from_object_id),
                ("inputFields.objectInput", to_object_type),
                ("inputFields.selectionInput", selection),
                ("inputFields.optionsInput", option),
            )
            if not value
        ]
        if missing:
            raise InputValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            mode = SelectionMode(selection)
        except ValueError:
            raise InputValidationError(f"Unsupported selectionInput: {selection}")

        if mode is SelectionMode.PROPERTY:
            # an empty optionValue matches records whose property is blank
            expected = callback.raw_value("optionValue")
            if expected is None:
                raise InputValidationError("Missing required fields: inputFields.optionValue")
            criterion = PropertyCriterion(property_name=option, property_value=str(expected))
        else:
            criterion = AssociationLabelCriterion(association_type_id=option)

        return AssociationRequest(
            hub_id=hub_id,
            from_object_type=from_object_type,
            from_object_id=from_object_id,
            to_object_type=to_object_type,
            criterion=criterion,
        )

    def disassociate(self, request: AssociationRequest) -> DisassociationResult:
        edges = self.hubspot_service.list_associated_records(
            request.hub_id,
            request.from_object_type,
            request.from_object_id,
            request.to_object_type,
        )
        if not edges:
            logging.info(
                "No %s associated with %s %s; nothing to remove",
                request.to_object_type,
                request.from_object_type,
                request.from_object_id,
            )
            return DisassociationResult(success=True, message="No associated records found")

        type_ids = sorted(set().union(*(edge.type_ids for edge in edges)), key=int)
        targets = self._select_targets(request, edges)

        deleted = 0
        for to_object_id in targets:
            if isinstance(request.criterion, PropertyCriterion) and not self._property_matches(
                request, request.criterion, to_object_id
            ):
                continue
            deleted += self._delete_associations(request, to_object_id, type_ids)

        logging.info(
            "Disassociation for %s %s -> %s by %s: %d targets, %d associations removed",
            request.from_object_type,
            request.from_object_id,
            request.to_object_type,
            request.selection_mode.value,
            len(targets),
            deleted,
        )
        return DisassociationResult(
            success=True,
            message=f"Disassociation completed: {deleted} associations removed",
            targets=len(targets),
            deleted=deleted,
        )

    def _select_targets(
        self, request: AssociationRequest, edges: list[AssociatedRecordEdge]
    ) -> list[str]:
        criterion = request.criterion
        if isinstance(criterion, AssociationLabelCriterion):
            return [
                edge.to_object_id
                for edge in edges
                if criterion.association_type_id in edge.type_ids
            ]
        if isinstance(criterion, PropertyCriterion):
            return [edge.to_object_id for edge in edges]
        raise InputValidationError(f"Unsupported criterion: {type(criterion).__name__}")

    def _property_matches(
        self, request: AssociationRequest, criterion: PropertyCriterion, to_object_id: str
    ) -> bool:
        try:
            properties = self.hubspot_service.get_record_detail(
                request.hub_id,
                request.to_object_type,
                to_object_id,
                [criterion.property_name],
            )
        except RemoteAPIError as exc:
            logging.warning(
                "Skipping %s %s: could not read record (%s)",
                request.to_object_type,
                to_object_id,
                exc.message,
            )
            return False

        actual = properties.get(criterion.property_name)
        return actual is not None and str(actual) == criterion.property_value

    def _delete_associations(
        self, request: AssociationRequest, to_object_id: str, type_ids: list[str]
    ) -> int:
        deleted = 0
        for type_id in type_ids:
            try:
                self.hubspot_service.delete_association(
                    request.hub_id,
                    request.from_object_type,
                    request.from_object_id,
                    request.to_object_type,
                    to_object_id,
                    type_id,
                )
                deleted += 1
            except RemoteAPIError as exc:
                # already removed, or a label that never linked this pair
                logging.warning(
                    "Failed to remove association type %s between %s %s and %s %s: %s",
                    type_id,
                    request.from_object_type,
                    request.from_object_id,
                    request.to_object_type,
                    to_object_id,
                    exc.message,
                )
        return deleted
