import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models import HubspotCredential
from src.schemas import HubspotCredentialCreate, HubspotCredentialUpdate
from src.utils.exceptions import PersistenceError


class HubspotCredentialRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_hub_id(self, hub_id: str) -> Optional[HubspotCredential]:
        try:
            return (
                self.db.query(HubspotCredential)
                .filter(HubspotCredential.hub_id == str(hub_id))
                .first()
            )
        except SQLAlchemyError as exc:
            logging.exception("Failed to read credential for hub %s", hub_id)
            raise PersistenceError(f"Failed to read credential for hubId {hub_id}") from exc

    def reload(self, credential: HubspotCredential) -> HubspotCredential:
        """Re-read a row so changes committed by other sessions are visible.

        The open read transaction is ended first, otherwise a REPEATABLE READ
        snapshot keeps returning the values seen before the other commit.
        """
        try:
            self.db.rollback()
            self.db.refresh(credential)
            return credential
        except SQLAlchemyError as exc:
            logging.exception("Failed to reload credential for hub %s", credential.hub_id)
            raise PersistenceError(f"Failed to read credential for hubId {credential.hub_id}") from exc

    def create(self, credential_in: HubspotCredentialCreate) -> HubspotCredential:
        credential = HubspotCredential(
            **credential_in.model_dump(exclude_none=True)
        )
        self.db.add(credential)
        self._commit(credential.hub_id)
        self.db.refresh(credential)
        return credential

    def update(self, db_credential: HubspotCredential, credential_in: HubspotCredentialUpdate) -> HubspotCredential:
        update_data = credential_in.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(db_credential, field, value)
        self.db.add(db_credential)
        self._commit(db_credential.hub_id)
        self.db.refresh(db_credential)
        return db_credential

    def upsert(self, credential_in: HubspotCredentialCreate) -> HubspotCredential:
        """Create or overwrite the credential for ``credential_in.hub_id``.

        A concurrent insert for the same hub loses the unique-key race; the
        row it collided with is then updated instead (last write wins).
        """
        record = self.get_by_hub_id(credential_in.hub_id)
        if record:
            return self.update(record, HubspotCredentialUpdate(**credential_in.model_dump()))
        try:
            return self.create(credential_in)
        except PersistenceError as exc:
            if not isinstance(exc.__cause__, IntegrityError):
                raise
            record = self.get_by_hub_id(credential_in.hub_id)
            if record is None:
                raise
            return self.update(record, HubspotCredentialUpdate(**credential_in.model_dump()))

    def _commit(self, hub_id: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logging.exception("Failed to persist credential for hub %s", hub_id)
            raise PersistenceError(f"Failed to persist credential for hubId {hub_id}") from exc
