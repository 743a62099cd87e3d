"""User events the presentation layer forwards to `UnitConverter.handle`."""

from dataclasses import dataclass

from Category import Category


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class FromUnitChanged:
    unit_name: str


@dataclass(frozen=True)
class ToUnitChanged:
    unit_name: str


@dataclass(frozen=True)
class CategoryChanged:
    category: Category
