from dataclasses import dataclass
from enum import Enum
from typing import Optional

from Category import Category
from Unit import Unit


class ErrorKind(Enum):
    REMOTE_UNAVAILABLE = "remote_unavailable"
    NETWORK_UNREACHABLE = "network_unreachable"


@dataclass(frozen=True)
class ConversionRequest:
    category: Category
    from_unit: Unit
    to_unit: Unit
    input_value: float


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of one conversion: either `formatted_value` or `error_kind` is set, never both.
    """
    formatted_value: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


    @classmethod
    def success(cls, formatted_value):
        return cls(formatted_value=formatted_value)


    @classmethod
    def failure(cls, error_kind):
        return cls(error_kind=error_kind)


    @property
    def is_success(self):
        return self.error_kind is None
