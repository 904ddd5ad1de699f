"""
Shared pydantic building blocks for entity schemas.
"""
from datetime import datetime, timezone
from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import AfterValidator, BaseModel, model_validator
from pydantic.alias_generators import to_camel


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a stored naive timestamp before it goes on the wire."""
    if value is not None and value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class TrackerModel(BaseModel):
    """camelCase on the wire, snake_case in Python; unknown keys are dropped."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PartialUpdate(TrackerModel):
    """
    Base for PATCH bodies.

    Every field is optional, but a field listed in `non_nullable_fields` may not
    be sent as an explicit null since the backing column is NOT NULL.
    """
    non_nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.non_nullable_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


# Incoming datetimes are stored as naive UTC; outgoing ones are labelled UTC
InputDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]
OutputDatetime = Annotated[datetime, AfterValidator(as_utc)]
