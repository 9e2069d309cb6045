from datetime import datetime, timezone

from src.utils.constants import HubspotConst


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    MySQL hands DATETIME columns back without tzinfo even when the column is
    declared ``timezone=True``. Stored values are always UTC, so naive values
    are tagged rather than converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def normalize_object_type(object_type: str | None) -> str | None:
    """Map a workflow callback object type (``CONTACT``) to its API name (``contacts``)."""
    if not object_type:
        return object_type
    return HubspotConst.WORKFLOW_OBJECT_TYPES.get(object_type.upper(), object_type)
