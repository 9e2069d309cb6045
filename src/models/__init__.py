from .hubspot_credential import HubspotCredential

__all__ = [
    "HubspotCredential",
]
