"""
Static unit catalog.

This module holds the built-in categories and their unit factors, and loads
alternative catalogs from JSON. Each factor says how many of the unit make
one base unit of its category; the base unit has factor 1.

Base units used per category
----------------------------
- Length: meter
- Area: square meter
- Volume: liter
- Mass: kilogram
- Time: second
- Digital Storage: byte
- Energy: joule

JSON catalog shape
------------------
    {
        "Length": [
            {"name": "Meter", "conversion": 1.0, "base_unit": true},
            {"name": "Feet", "conversion": 3.28084}
        ],
        ...
    }

The currency category is not listed here: its units come from the rate
service through `load_currency_category`.
"""

import json
import os

from dotenv import load_dotenv

from Category import API_CATEGORY, Category
from Unit import Unit

load_dotenv()
UNITS_FILE = os.getenv("UNITS_FILE")

REGULAR_UNITS = {
    "Length": {
        "Meter": 1.0,
        "Centimeter": 100.0,
        "Kilometer": 0.001,
        "Millimeter": 1000.0,
        "Micrometer": 1000000.0,
        "Nanometer": 1000000000.0,
        "Inch": 39.3701,
        "Feet": 3.28084,
        "Yard": 1.09361,
        "Mile": 0.000621371,
        "Nautical Mile": 0.000539957,
    },
    "Area": {
        "Square Meter": 1.0,
        "Square Centimeter": 10000.0,
        "Square Kilometer": 0.000001,
        "Hectare": 0.0001,
        "Acre": 0.000247105,
        "Square Mile": 3.86102e-7,
        "Square Yard": 1.19599,
        "Square Foot": 10.7639,
        "Square Inch": 1550.0,
    },
    "Volume": {
        "Liter": 1.0,
        "Milliliter": 1000.0,
        "Cubic Meter": 0.001,
        "US Gallon": 0.264172,
        "US Quart": 1.05669,
        "US Pint": 2.11338,
        "US Cup": 4.22675,
        "US Fluid Ounce": 33.814,
        "US Tablespoon": 67.628,
        "US Teaspoon": 202.884,
        "Cubic Foot": 0.0353147,
        "Cubic Inch": 61.0237,
    },
    "Mass": {
        "Kilogram": 1.0,
        "Gram": 1000.0,
        "Milligram": 1000000.0,
        "Metric Ton": 0.001,
        "Pound": 2.20462,
        "Ounce": 35.274,
        "Stone": 0.157473,
    },
    "Time": {
        "Second": 1.0,
        "Millisecond": 1000.0,
        "Minute": 0.0166667,
        "Hour": 0.000277778,
        "Day": 0.0000115741,
        "Week": 0.00000165344,
    },
    "Digital Storage": {
        "Byte": 1.0,
        "Bit": 8.0,
        "Kilobyte": 0.001,
        "Megabyte": 0.000001,
        "Gigabyte": 1e-9,
        "Terabyte": 1e-12,
    },
    "Energy": {
        "Joule": 1.0,
        "Kilojoule": 0.001,
        "Gram Calorie": 0.239006,
        "Kilocalorie": 0.000239006,
        "Watt Hour": 0.000277778,
        "Kilowatt Hour": 2.77778e-7,
        "British Thermal Unit": 0.000947817,
        "Electron Volt": 6.242e18,
    },
}


def build_categories(table):
    """
    Turn a `{category: {unit: factor}}` mapping into `Category` objects, keeping order.
    """
    return [
        Category(name, [Unit(unit_name, float(factor), base_unit=factor == 1) for unit_name, factor in units.items()])
        for name, units in table.items()
    ]


def load_categories(path=None):
    """
    Load the regular (ratio-based) categories.

    Parameters
    ----------
    path : str | None
        JSON catalog to read. Falls back to the UNITS_FILE setting, then to
        the built-in `REGULAR_UNITS` table.

    Returns
    -------
    list[Category]

    Raises
    ------
    ValueError
        If the file is not valid JSON or an entry breaks the unit/category rules.
    """
    path = path or UNITS_FILE
    if not path:
        return build_categories(REGULAR_UNITS)

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Unit catalog {path} is not valid JSON: {e}") from e

    categories = []
    for name, entries in data.items():
        try:
            units = [Unit(entry["name"], float(entry["conversion"]), bool(entry.get("base_unit", False))) for entry in entries]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed unit entry in category '{name}': {e}") from e
        categories.append(Category(name, units))
    return categories


def load_currency_category(currency_converter):
    """
    Build the remote-backed currency category from the rate service.

    Returns None when the service cannot list its currencies (or lists fewer
    than two), so callers can simply leave the category out.
    """
    units = currency_converter.get_units()
    if not units or len(units) < 2:
        print("Currency category unavailable: could not load currency list.")
        return None
    return Category(API_CATEGORY["name"], units)


def get_category(categories, name):
    for category in categories:
        if category.name == name:
            return category
    return None


if __name__ == "__main__":
    # Example usage / quick sanity checks
    for category in load_categories():
        print(category, category.unit_names())
