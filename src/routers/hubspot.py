import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from src.utils.dependencies import get_service
from src.services import HubspotService

router = APIRouter(prefix="/hubspot", tags=["hubspot"])

HubspotDep = Depends(get_service(HubspotService))


@router.get("/oauth/callback")
def oauth_callback(code: Optional[str] = None, service: HubspotService = HubspotDep):
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing authorization code",
        )
    try:
        hub_id = service.exchange_code(code)
    except Exception:
        logging.exception("Error exchanging authorization code")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error during OAuth process",
        )
    return RedirectResponse(service.get_settings_url(hub_id))
