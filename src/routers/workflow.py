from fastapi import APIRouter, Depends

from src.schemas import (
    OptionsResponse,
    SuccessOptionsResponse,
    WorkflowActionUpdateIn,
    WorkflowCallback,
)
from src.services import DisassociationService, HubspotService, WorkflowActionService
from src.utils.constants import SelectionMode
from src.utils.dependencies import get_service
from src.utils.exceptions import InputValidationError

router = APIRouter(prefix="/hubspot", tags=["workflow"])

HubspotDep = Depends(get_service(HubspotService))
DisassociationDep = Depends(get_service(DisassociationService))
WorkflowActionDep = Depends(get_service(WorkflowActionService))


def _hub_id(body: WorkflowCallback) -> str:
    hub_id = body.origin.hub_id
    if not hub_id:
        raise InputValidationError("Missing required fields: origin.portalId")
    return hub_id


@router.post("/fetchObjects", response_model=SuccessOptionsResponse)
def fetch_objects(body: WorkflowCallback, service: HubspotService = HubspotDep):
    return SuccessOptionsResponse(options=service.list_object_types(_hub_id(body)))


@router.post("/fetchProps", response_model=OptionsResponse)
def fetch_props(body: WorkflowCallback, service: HubspotService = HubspotDep):
    options = service.list_properties(_hub_id(body), body.input_value("objectInput"))
    return OptionsResponse(options=options)


@router.post("/fetchOptions", response_model=OptionsResponse)
def fetch_options(body: WorkflowCallback, service: HubspotService = HubspotDep):
    """Options for ``optionsInput``: properties or association labels, per ``selectionInput``."""
    hub_id = _hub_id(body)
    to_object_type = body.input_value("objectInput")
    try:
        mode = SelectionMode(body.input_value("selectionInput"))
    except ValueError:
        # the user has not picked a mode yet
        return OptionsResponse()

    if mode is SelectionMode.PROPERTY:
        options = service.list_properties(hub_id, to_object_type)
    else:
        options = service.list_association_labels(hub_id, body.object_type_id, to_object_type)
    return OptionsResponse(options=options)


# the misspelt path is the URL registered in HubSpot
@router.post("/fethcAssociationLabels", response_model=SuccessOptionsResponse)
def fetch_association_labels(body: WorkflowCallback, service: HubspotService = HubspotDep):
    options = service.list_association_labels(
        _hub_id(body), body.object_type_id, body.input_value("objectInput")
    )
    return SuccessOptionsResponse(options=options)


@router.post("/disassociate")
def disassociate(body: WorkflowCallback, service: DisassociationService = DisassociationDep):
    request = service.build_request(body)
    result = service.disassociate(request)
    return {"success": result.success, "message": result.message}


@router.post("/createCustomWorkflowAction", response_model=dict)
def create_custom_workflow_action(service: WorkflowActionService = WorkflowActionDep):
    return service.create_action()


@router.patch("/updateCustomWorkflowAction", response_model=dict)
def update_custom_workflow_action(
    body: WorkflowActionUpdateIn,
    service: WorkflowActionService = WorkflowActionDep,
):
    return service.update_action(body.definition_id)
