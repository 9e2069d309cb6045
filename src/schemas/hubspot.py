from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator


class HubspotCredentialBase(BaseModel):
    hub_id: str
    user_id: Optional[str] = None
    app_id: Optional[str] = None
    user: Optional[str] = None
    access_token: str
    refresh_token: str
    expire_time: datetime


class HubspotCredentialCreate(HubspotCredentialBase):
    pass


class HubspotCredentialUpdate(HubspotCredentialBase):
    hub_id: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expire_time: Optional[datetime] = None


class HubspotTokenResponse(BaseModel):
    """Body of ``POST /oauth/v1/token`` for both grant types."""

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class HubspotAccessTokenInfo(BaseModel):
    """Body of ``GET /oauth/v1/access-tokens/{token}``."""

    hub_id: str
    user: Optional[str] = None
    user_id: Optional[str] = None
    app_id: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("hub_id", "user_id", "app_id", mode="before")
    @classmethod
    def _stringify(cls, value: Union[int, str, None]) -> Optional[str]:
        return None if value is None else str(value)


class OptionOut(BaseModel):
    value: str
    label: str
