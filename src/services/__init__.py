from .hubspot import HubspotService
from .disassociation import DisassociationService
from .workflow_action import WorkflowActionService

__all__ = [
    "HubspotService",
    "DisassociationService",
    "WorkflowActionService",
]
