from .hubspot import router as hubspot_router
from .workflow import router as workflow_router

__all__ = [
    "hubspot_router",
    "workflow_router",
]
