import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: Models are imported in tracker.db.models to register them on Base.metadata
# All models must import Base from this module


def new_id() -> str:
    """Server-generated opaque identifier for every entity."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the storage convention for every datetime column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def enum_values(enum_cls) -> list:
    """Persist enum members by value so the database sees the wire strings."""
    return [member.value for member in enum_cls]
