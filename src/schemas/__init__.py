from .hubspot import (
    HubspotCredentialCreate,
    HubspotCredentialUpdate,
    HubspotTokenResponse,
    HubspotAccessTokenInfo,
    OptionOut,
)
from .workflow import (
    WorkflowOrigin,
    WorkflowObject,
    WorkflowCallback,
    PropertyCriterion,
    AssociationLabelCriterion,
    AssociationRequest,
    AssociationType,
    AssociatedRecordEdge,
    DisassociationResult,
    OptionsResponse,
    SuccessOptionsResponse,
    WorkflowActionUpdateIn,
)

__all__ = [
    "HubspotCredentialCreate",
    "HubspotCredentialUpdate",
    "HubspotTokenResponse",
    "HubspotAccessTokenInfo",
    "OptionOut",
    "WorkflowOrigin",
    "WorkflowObject",
    "WorkflowCallback",
    "PropertyCriterion",
    "AssociationLabelCriterion",
    "AssociationRequest",
    "AssociationType",
    "AssociatedRecordEdge",
    "DisassociationResult",
    "OptionsResponse",
    "SuccessOptionsResponse",
    "WorkflowActionUpdateIn",
]
