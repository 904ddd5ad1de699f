"""
Normalisation of list filters shared by the store services.
"""
from typing import Optional, Type, TypeVar, Union
import enum

from tracker.core.errors import InvalidFilterError

E = TypeVar("E", bound=enum.Enum)

# Sent by the client to mean "no filter"
ALL = "all"


def coerce_filter(enum_cls: Type[E], value: Optional[Union[str, E]]) -> Optional[E]:
    """
    Turn a raw filter value into an enum member.

    None, an empty string and "all" all mean no filtering. Anything else must
    be a member value of `enum_cls`.

    Raises:
        InvalidFilterError: The value is not in the enumeration
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if value == "" or value == ALL:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidFilterError(f"Unknown {enum_cls.__name__} filter value: {value!r}")
