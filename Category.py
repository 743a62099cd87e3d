"""
Measurement categories.

A `Category` is an ordered, immutable collection of `Unit`s sharing one
dimension (length, mass, ...). The first two units are the default "from" and
"to" selections, so every category carries at least two.

Remote-backed categories
------------------------
Exactly one category, named by `API_CATEGORY["name"]`, converts through the
exchange-rate service instead of by ratio. It is recognised by exact string
equality on the name, and `route` gives the service route to call.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from Unit import Unit

API_CATEGORY = {
    "name": "Currency",
    "route": "latest",
}


@dataclass(frozen=True)
class Category:
    name: str
    units: Tuple[Unit, ...]


    def __post_init__(self):
        # Accept any iterable of units but store a tuple.
        object.__setattr__(self, "units", tuple(self.units))
        if len(self.units) < 2:
            raise ValueError(f"Category '{self.name}' needs at least two units, got {len(self.units)}.")


    @property
    def is_remote_backed(self):
        return self.name == API_CATEGORY["name"]


    @property
    def route(self) -> Optional[str]:
        return API_CATEGORY["route"] if self.is_remote_backed else None


    def find_unit(self, unit_name) -> Optional[Unit]:
        """
        Return the unit called `unit_name`, or None when the category has no such unit.
        """
        for unit in self.units:
            if unit.name == unit_name:
                return unit
        return None


    def unit_names(self):
        return [unit.name for unit in self.units]


    def __str__(self):
        return self.name
