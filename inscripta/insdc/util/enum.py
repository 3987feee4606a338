"""
Enumeration utilities.
"""
from enum import Enum
from typing import List


class HasMemberMixin(Enum):
    """Adds `has_value()`, `has_name()` and `values()` convenience methods to enumerations."""

    @classmethod
    def has_value(cls, value) -> bool:
        return value in cls._value2member_map_

    @classmethod
    def has_name(cls, name) -> bool:
        return name in cls.__members__

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]
