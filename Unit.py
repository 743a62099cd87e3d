from dataclasses import dataclass

@dataclass(frozen=True)
class Unit:
    """
    A named unit of measure inside a `Category`.

    `conversion` is how many of this unit make up one of the category's base
    unit, so converting between two units of the same category is
    `value * (to.conversion / from.conversion)`.
    """
    name: str
    conversion: float
    base_unit: bool = False


    def __post_init__(self):
        if not self.name:
            raise ValueError("Unit name must not be empty.")
        if not self.conversion > 0:
            raise ValueError(f"Unit '{self.name}' has a non-positive conversion factor: {self.conversion}")


    def __str__(self):
        return self.name
