"""Two-step unit conversion: source unit -> base unit -> target unit."""

from __future__ import annotations

from kitchen_converter.utils.units import UnitDefinition, from_base, to_base


class CategoryMismatchError(ValueError):
    def __init__(self, from_unit: UnitDefinition, to_unit: UnitDefinition):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"Cannot convert {from_unit.category.value.lower()} unit '{from_unit.id}' "
            f"to {to_unit.category.value.lower()} unit '{to_unit.id}'"
        )


def convert(value: float, from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
    """Convert ``value`` between two units of the same category."""
    if from_unit.category != to_unit.category:
        raise CategoryMismatchError(from_unit, to_unit)
    if from_unit == to_unit:
        return value
    return from_base(to_base(value, from_unit), to_unit)
