from dataclasses import dataclass, replace
from typing import Optional

from Category import Category
from ConversionResult import ErrorKind
from Unit import Unit

INVALID_INPUT_MESSAGE = "Invalid number entered"
REMOTE_UNAVAILABLE_MESSAGE = "Error to fetch data"
NETWORK_UNREACHABLE_MESSAGE = "No network found"


@dataclass(frozen=True)
class SelectionState:
    """
    Immutable snapshot of the converter panel, handed to the presentation layer.

    `error_message` is the panel-wide error that replaces the whole conversion
    view; `validation_message` belongs to the input field only.
    """
    category: Category
    from_unit: Unit
    to_unit: Unit
    input_text: str = ""
    input_value: Optional[float] = None
    input_is_valid: bool = True
    output_text: str = ""
    last_error_kind: Optional[ErrorKind] = None
    connectivity_problem: bool = False


    @classmethod
    def for_category(cls, category, connectivity_problem=False):
        """Default selection for `category`: its first unit to its second."""
        return cls(
            category=category,
            from_unit=category.units[0],
            to_unit=category.units[1],
            connectivity_problem=connectivity_problem,
        )


    def copy_with(self, **changes):
        return replace(self, **changes)


    @property
    def validation_message(self):
        return None if self.input_is_valid else INVALID_INPUT_MESSAGE


    @property
    def error_message(self):
        if not self.category.is_remote_backed:
            return None
        if self.last_error_kind == ErrorKind.REMOTE_UNAVAILABLE:
            return REMOTE_UNAVAILABLE_MESSAGE
        if self.connectivity_problem or self.last_error_kind == ErrorKind.NETWORK_UNREACHABLE:
            return NETWORK_UNREACHABLE_MESSAGE
        return None
