"""Converter screen state and the events that drive it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from kitchen_converter.core.engine.parsing import InputStatus
from kitchen_converter.utils.units import UnitCategory, UnitDefinition, default_units


@dataclass(frozen=True)
class ConversionState:
    category: UnitCategory
    from_unit: UnitDefinition
    to_unit: UnitDefinition
    raw_input: str = ""
    status: InputStatus = InputStatus.EMPTY
    error_text: Optional[str] = None  # inline message under the amount field


def initial_state(category: UnitCategory = UnitCategory.VOLUME) -> ConversionState:
    from_unit, to_unit = default_units(category)
    return ConversionState(category=category, from_unit=from_unit, to_unit=to_unit)


@dataclass(frozen=True)
class CategoryChanged:
    category: UnitCategory


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class FromUnitChanged:
    unit_id: str


@dataclass(frozen=True)
class ToUnitChanged:
    unit_id: str


@dataclass(frozen=True)
class SwapRequested:
    pass


Event = Union[CategoryChanged, InputChanged, FromUnitChanged, ToUnitChanged, SwapRequested]
