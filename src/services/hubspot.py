from datetime import datetime, timedelta
import logging
import threading
import weakref
from typing import Any, Dict, Optional

from src.gateways.hubspot import HubspotGateway
from src.models import HubspotCredential
from src.repositories.hubspot import HubspotCredentialRepository
from src.schemas import (
    AssociatedRecordEdge,
    HubspotAccessTokenInfo,
    HubspotCredentialCreate,
    HubspotCredentialUpdate,
    HubspotTokenResponse,
    OptionOut,
)
from src.utils.constants import HubspotConst
from src.utils.exceptions import AccountNotFoundError, InputValidationError
from src.utils.utils import as_utc, utc_now

# a hub's lock lives only while some request holds a reference to it
_refresh_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_refresh_locks_guard = threading.Lock()


def _refresh_lock(hub_id: str) -> threading.Lock:
    with _refresh_locks_guard:
        lock = _refresh_locks.get(hub_id)
        if lock is None:
            lock = threading.Lock()
            _refresh_locks[hub_id] = lock
        return lock


class HubspotService:
    def __init__(self, db):
        self.credential_repo = HubspotCredentialRepository(db)
        self.gateway = HubspotGateway()

    # OAuth
    def exchange_code(self, code: str) -> str:
        """Trade an authorization code for tokens and store them. Returns the hub id."""
        tokens = HubspotTokenResponse.model_validate(self.gateway.request_tokens(code))
        account = HubspotAccessTokenInfo.model_validate(
            self.gateway.get_access_token_info(tokens.access_token)
        )

        self.credential_repo.upsert(
            HubspotCredentialCreate(
                hub_id=account.hub_id,
                user_id=account.user_id,
                app_id=account.app_id,
                user=account.user,
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expire_time=self._expire_time(tokens.expires_in),
            )
        )
        logging.info("Stored HubSpot credential for hubId %s", account.hub_id)
        return account.hub_id

    def get_settings_url(self, hub_id: str) -> str:
        return HubspotConst.SETTINGS_URL.format(hub_id=hub_id)

    def ensure_valid_access_token(self, hub_id: str) -> str:
        """Return a usable access token for the hub, refreshing it when expired.

        Refreshes for one hub are serialised. The row is re-read under the
        lock so a request that waited reuses the token the first one stored.
        """
        if not hub_id:
            raise InputValidationError("hubId is required")
        hub_id = str(hub_id)

        record = self._get_credential(hub_id)
        if not self._is_expired(record):
            logging.debug("Access token is valid for hubId %s", hub_id)
            return record.access_token

        with _refresh_lock(hub_id):
            record = self.credential_repo.reload(record)
            if not self._is_expired(record):
                logging.info("Access token for hubId %s was refreshed concurrently", hub_id)
                return record.access_token
            return self._refresh(record)

    def _get_credential(self, hub_id: str) -> HubspotCredential:
        record = self.credential_repo.get_by_hub_id(hub_id)
        if not record:
            raise AccountNotFoundError(hub_id)
        return record

    def _is_expired(self, record: HubspotCredential) -> bool:
        return as_utc(record.expire_time) <= utc_now()

    def _expire_time(self, expires_in: int) -> datetime:
        return utc_now() + timedelta(seconds=expires_in)

    def _refresh(self, record: HubspotCredential) -> str:
        logging.info("Access token expired for hubId %s. Refreshing token...", record.hub_id)
        tokens = HubspotTokenResponse.model_validate(
            self.gateway.request_refresh(record.refresh_token)
        )
        self.credential_repo.update(
            record,
            HubspotCredentialUpdate(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expire_time=self._expire_time(tokens.expires_in),
            ),
        )
        logging.info("Access token refreshed for hubId %s", record.hub_id)
        return tokens.access_token

    # CRM lookups
    def list_object_types(self, hub_id: str) -> list[OptionOut]:
        access_token = self.ensure_valid_access_token(hub_id)
        options = [
            OptionOut(value=value, label=label)
            for value, label in HubspotConst.STANDARD_OBJECTS
        ]
        for schema in self.gateway.list_schemas(access_token):
            labels = schema.get("labels") or {}
            options.append(
                OptionOut(
                    value=schema.get("objectTypeId") or schema["name"],
                    label=labels.get("singular") or schema.get("name"),
                )
            )
        return options

    def list_properties(self, hub_id: str, object_type: Optional[str]) -> list[OptionOut]:
        if not object_type:
            return []
        access_token = self.ensure_valid_access_token(hub_id)
        return [
            OptionOut(value=prop["name"], label=prop.get("label") or prop["name"])
            for prop in self.gateway.list_properties(access_token, object_type)
        ]

    def list_association_labels(
        self, hub_id: str, from_object_type: Optional[str], to_object_type: Optional[str]
    ) -> list[OptionOut]:
        if not to_object_type:
            return []
        if not from_object_type:
            raise InputValidationError("objectTypeId is required")
        access_token = self.ensure_valid_access_token(hub_id)
        return [
            OptionOut(
                value=str(label["typeId"]),
                label=label.get("label") or HubspotConst.UNLABELED_ASSOCIATION,
            )
            for label in self.gateway.list_association_labels(
                access_token, from_object_type, to_object_type
            )
        ]

    def list_associated_records(
        self, hub_id: str, from_object_type: str, from_object_id: str, to_object_type: str
    ) -> list[AssociatedRecordEdge]:
        """Every association edge from one record to an object type, across all pages."""
        edges: list[AssociatedRecordEdge] = []
        after = None
        while True:
            access_token = self.ensure_valid_access_token(hub_id)
            payload = self.gateway.list_associations(
                access_token,
                from_object_type,
                from_object_id,
                to_object_type,
                limit=HubspotConst.ASSOCIATION_PAGE_SIZE,
                after=after,
            )
            edges.extend(
                AssociatedRecordEdge.model_validate(item)
                for item in payload.get("results", [])
            )
            after = payload.get("paging", {}).get("next", {}).get("after")
            if not after:
                break
        return edges

    def get_record_detail(
        self, hub_id: str, object_type: str, object_id: str, properties: list[str]
    ) -> Dict[str, Any]:
        access_token = self.ensure_valid_access_token(hub_id)
        record = self.gateway.get_object(access_token, object_type, object_id, properties)
        return record.get("properties") or {}

    def delete_association(
        self,
        hub_id: str,
        from_object_type: str,
        from_object_id: str,
        to_object_type: str,
        to_object_id: str,
        association_type_id: str,
    ) -> None:
        access_token = self.ensure_valid_access_token(hub_id)
        self.gateway.delete_association(
            access_token,
            from_object_type,
            from_object_id,
            to_object_type,
            to_object_id,
            association_type_id,
        )
