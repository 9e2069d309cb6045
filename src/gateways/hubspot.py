from typing import Any, Dict, Optional

import httpx

from src.config.config import get_env
from src.utils.constants import HubspotConst
from src.utils.decorators import try_except_decorator


class HubspotGateway:
    def __init__(self) -> None:
        self.client_id = get_env("HUBSPOT_CLIENT_ID", required=True)
        self.client_secret = get_env("HUBSPOT_CLIENT_SECRET", required=True)
        self.redirect_uri = get_env("HUBSPOT_REDIRECT_URI", required=True)
        self.developer_api_key = get_env("HUBSPOT_DEVELOPER_API_KEY")
        self.app_id = get_env("HUBSPOT_APP_ID")

    # OAuth
    @try_except_decorator
    def request_tokens(self, code: str) -> Dict[str, Any]:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        response = httpx.post(HubspotConst.EXCHANGE_URL, data=data, timeout=HubspotConst.HTTP_TIMEOUT)
        response.raise_for_status()
        return response.json()

    @try_except_decorator
    def request_refresh(self, refresh_token: str) -> Dict[str, Any]:
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": refresh_token,
        }
        r = httpx.post(HubspotConst.EXCHANGE_URL, data=data, timeout=HubspotConst.HTTP_TIMEOUT)
        r.raise_for_status()
        return r.json()

    @try_except_decorator
    def get_access_token_info(self, access_token: str) -> Dict[str, Any]:
        response = httpx.get(
            f"{HubspotConst.ACCESS_DETAILS_URL}/{access_token}",
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()

    # CRM endpoints
    def _headers(self, access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    @try_except_decorator
    def list_schemas(self, access_token: str) -> list[dict]:
        r = httpx.get(
            HubspotConst.SCHEMAS_URL,
            headers=self._headers(access_token),
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json().get("results", [])

    @try_except_decorator
    def list_properties(self, access_token: str, object_type: str) -> list[dict]:
        r = httpx.get(
            f"{HubspotConst.PROPERTIES_URL}/{object_type}",
            headers=self._headers(access_token),
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json().get("results", [])

    @try_except_decorator
    def list_association_labels(
        self, access_token: str, from_object_type: str, to_object_type: str
    ) -> list[dict]:
        r = httpx.get(
            f"{HubspotConst.BASE_CRM_V4_URL}/associations/{from_object_type}/{to_object_type}/labels",
            headers=self._headers(access_token),
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json().get("results", [])

    @try_except_decorator
    def list_associations(
        self,
        access_token: str,
        from_object_type: str,
        from_object_id: str,
        to_object_type: str,
        limit: int = HubspotConst.ASSOCIATION_PAGE_SIZE,
        after: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Fetch one page of association edges; the caller follows ``paging.next.after``."""
        params = {"limit": limit}
        if after:
            params["after"] = after
        r = httpx.get(
            f"{HubspotConst.BASE_CRM_V4_URL}/objects/{from_object_type}/{from_object_id}"
            f"/associations/{to_object_type}",
            headers=self._headers(access_token),
            params=params,
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json()

    @try_except_decorator
    def get_object(
        self,
        access_token: str,
        object_type: str,
        object_id: str,
        properties: list[str],
    ) -> Dict[str, Any]:
        r = httpx.get(
            f"{HubspotConst.BASE_CRM_URL}/{object_type}/{object_id}",
            headers=self._headers(access_token),
            params={"properties": ",".join(properties), "archived": "false"},
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json()

    @try_except_decorator
    def delete_association(
        self,
        access_token: str,
        from_object_type: str,
        from_object_id: str,
        to_object_type: str,
        to_object_id: str,
        association_type_id: str,
    ) -> None:
        r = httpx.delete(
            f"{HubspotConst.BASE_CRM_URL}/{from_object_type}/{from_object_id}"
            f"/associations/{to_object_type}/{to_object_id}/{association_type_id}",
            headers=self._headers(access_token),
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        if r.status_code not in (200, 204):
            r.raise_for_status()

    # Workflow action definitions (developer API key, not OAuth)
    def _developer_params(self) -> Dict[str, str]:
        if not self.developer_api_key or not self.app_id:
            raise ValueError("HUBSPOT_DEVELOPER_API_KEY and HUBSPOT_APP_ID must be set")
        return {"hapikey": self.developer_api_key}

    @try_except_decorator
    def create_workflow_action(self, definition: Dict[str, Any]) -> Dict[str, Any]:
        params = self._developer_params()
        r = httpx.post(
            f"{HubspotConst.ACTIONS_URL}/{self.app_id}",
            params=params,
            json=definition,
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json()

    @try_except_decorator
    def update_workflow_action(self, definition_id: str, definition: Dict[str, Any]) -> Dict[str, Any]:
        params = self._developer_params()
        r = httpx.patch(
            f"{HubspotConst.ACTIONS_URL}/{self.app_id}/{definition_id}",
            params=params,
            json=definition,
            timeout=HubspotConst.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        return r.json()
