from .hubspot import HubspotCredentialRepository

__all__ = [
    "HubspotCredentialRepository",
]
