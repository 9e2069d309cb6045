from typing import Any, Optional

from fastapi import status


class IntegrationError(Exception):
    """Base error rendered as ``{"success": false, "message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class InputValidationError(IntegrationError):
    """A workflow callback is missing a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class AccountNotFoundError(IntegrationError):
    """No credential is stored for the hub."""

    def __init__(self, hub_id: str):
        self.hub_id = hub_id
        super().__init__(f"No HubSpot credential found for hubId {hub_id}")


class RemoteAPIError(IntegrationError):
    """HubSpot answered with a non-2xx status, or could not be reached."""

    def __init__(self, message: str, upstream_status: int, body: Any = None):
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(message)

    def to_response(self) -> dict[str, Any]:
        payload = super().to_response()
        payload["details"] = {"status": self.upstream_status, "body": self.body}
        return payload


class PersistenceError(IntegrationError):
    """Reading or writing the credential store failed."""
