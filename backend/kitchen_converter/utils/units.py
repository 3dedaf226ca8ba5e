"""Cooking unit tables. Internal representation is milliliters (volume) and grams (mass)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnitCategory(str, Enum):
    VOLUME = "Volume"
    MASS = "Mass"


@dataclass(frozen=True)
class UnitDefinition:
    id: str
    display_name: str
    abbreviation: str
    factor_to_base: float  # base units (ml or g) per one of this unit
    category: UnitCategory

    @property
    def label(self) -> str:
        """Picker text, e.g. 'Cup (US) (cup)'."""
        return f"{self.display_name} ({self.abbreviation})"


class UnknownUnitError(KeyError):
    def __init__(self, category: UnitCategory, unit_id: str):
        self.category = category
        self.unit_id = unit_id
        super().__init__(unit_id)

    def __str__(self) -> str:
        valid = ", ".join(u.id for u in UNIT_TABLES[self.category])
        return f"Unknown {self.category.value.lower()} unit '{self.unit_id}'. Valid: {valid}"


def _table(category: UnitCategory, rows: list[tuple[str, str, str, float]]) -> tuple[UnitDefinition, ...]:
    units = tuple(UnitDefinition(uid, name, abbr, factor, category) for uid, name, abbr, factor in rows)

    ids = [u.id for u in units]
    if len(set(ids)) != len(ids):
        raise ValueError(f"{category.value} table has duplicate unit ids")
    if any(u.factor_to_base <= 0 for u in units):
        raise ValueError(f"{category.value} table has a non-positive factor")
    if sum(1 for u in units if u.factor_to_base == 1) != 1:
        raise ValueError(f"{category.value} table must have exactly one base unit")
    return units


VOLUME_UNITS = _table(UnitCategory.VOLUME, [
    ("ml", "Milliliter", "ml", 1.0),
    ("l", "Liter", "L", 1000.0),
    ("tsp", "Teaspoon", "tsp", 4.92892),
    ("tbsp", "Tablespoon", "tbsp", 14.7868),
    ("floz", "Fluid Ounce", "fl oz", 29.5735),
    ("cup", "Cup (US)", "cup", 236.588),
    ("pint", "Pint (US)", "pt", 473.176),
    ("quart", "Quart (US)", "qt", 946.353),
    ("gallon", "Gallon (US)", "gal", 3785.41),
])

MASS_UNITS = _table(UnitCategory.MASS, [
    ("g", "Gram", "g", 1.0),
    ("kg", "Kilogram", "kg", 1000.0),
    ("oz", "Ounce", "oz", 28.3495),
    ("lb", "Pound", "lb", 453.592),
])

UNIT_TABLES: dict[UnitCategory, tuple[UnitDefinition, ...]] = {
    UnitCategory.VOLUME: VOLUME_UNITS,
    UnitCategory.MASS: MASS_UNITS,
}

# (from, to) selected when nothing carries over from the previous category
DEFAULT_UNIT_IDS: dict[UnitCategory, tuple[str, str]] = {
    UnitCategory.VOLUME: ("cup", "ml"),
    UnitCategory.MASS: ("g", "kg"),
}


def units_for(category: UnitCategory) -> tuple[UnitDefinition, ...]:
    return UNIT_TABLES[category]


def find_unit(category: UnitCategory, unit_id: str) -> UnitDefinition | None:
    """Return the unit with this id in the category's table, or None."""
    for unit in UNIT_TABLES[category]:
        if unit.id == unit_id:
            return unit
    return None


def get_unit(category: UnitCategory, unit_id: str) -> UnitDefinition:
    unit = find_unit(category, unit_id)
    if unit is None:
        raise UnknownUnitError(category, unit_id)
    return unit


def base_unit(category: UnitCategory) -> UnitDefinition:
    return next(u for u in UNIT_TABLES[category] if u.factor_to_base == 1)


def default_units(category: UnitCategory) -> tuple[UnitDefinition, UnitDefinition]:
    from_id, to_id = DEFAULT_UNIT_IDS[category]
    return get_unit(category, from_id), get_unit(category, to_id)


def to_base(value: float, unit: UnitDefinition) -> float:
    """Convert a value in the given unit to the category's base unit."""
    return value * unit.factor_to_base


def from_base(value: float, unit: UnitDefinition) -> float:
    """Convert a base-unit value to the given unit."""
    return value / unit.factor_to_base


def parse_category(name: str) -> UnitCategory:
    """Match a category name case-insensitively ('volume', 'Mass')."""
    for category in UnitCategory:
        if category.value.lower() == name.strip().lower():
            return category
    raise ValueError(f"Unknown category '{name}'. Valid: {', '.join(c.value for c in UnitCategory)}")
