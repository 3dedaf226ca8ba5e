"""ConversionEngine: unit tables plus parse, validate, convert and format.

Usage:
    engine = ConversionEngine(get_number_format("en_US"))
    cup = engine.get_unit(UnitCategory.VOLUME, "cup")
    ml = engine.base_unit(UnitCategory.VOLUME)
    engine.result_text("2", cup, ml).result_text   # '473.18 ml'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kitchen_converter.core.engine import conversion, formatting, parsing
from kitchen_converter.core.engine.number_format import NumberFormat
from kitchen_converter.core.engine.parsing import (
    ConversionInputError,
    InputStatus,
    NO_INPUT,
    ParsedAmount,
)
from kitchen_converter.core.session.reducer import reduce
from kitchen_converter.core.session.state import ConversionState, Event, SwapRequested
from kitchen_converter.utils import units
from kitchen_converter.utils.units import UnitCategory, UnitDefinition

RESULT_PLACEHOLDER = "—"


@dataclass(frozen=True)
class RenderedView:
    result_text: str
    error_text: Optional[str]
    status: InputStatus
    value: Optional[float] = None  # converted value, when there is one


class ConversionEngine:
    """Stateless façade the presentation layer talks to."""

    def __init__(self, number_format: NumberFormat, placeholder: str = RESULT_PLACEHOLDER):
        self.number_format = number_format
        self.placeholder = placeholder

    # ── Unit tables ──────────────────────────────────────────────────────────

    def units(self, category: UnitCategory) -> tuple[UnitDefinition, ...]:
        return units.units_for(category)

    def get_unit(self, category: UnitCategory, unit_id: str) -> UnitDefinition:
        return units.get_unit(category, unit_id)

    def base_unit(self, category: UnitCategory) -> UnitDefinition:
        return units.base_unit(category)

    # ── Input ────────────────────────────────────────────────────────────────

    def parse_amount(self, text: str) -> ParsedAmount:
        return parsing.parse_amount(text, self.number_format)

    def validate(self, value: float) -> None:
        parsing.validate(value)

    def check_input(self, text: str) -> tuple[InputStatus, ParsedAmount, Optional[ConversionInputError]]:
        return parsing.check_input(text, self.number_format)

    # ── Output ───────────────────────────────────────────────────────────────

    def convert(self, value: float, from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
        return conversion.convert(value, from_unit, to_unit)

    def format_result(self, value: float) -> str:
        return formatting.format_result(value, self.number_format)

    def result_text(self, raw_input: str, from_unit: UnitDefinition, to_unit: UnitDefinition) -> RenderedView:
        """Full input cycle: parse, validate, convert, format and append the unit."""
        status, value, error = self.check_input(raw_input)
        if value is NO_INPUT:
            return RenderedView(self.placeholder, error.message if error else None, status)
        converted = self.convert(value, from_unit, to_unit)
        text = f"{self.format_result(converted)} {to_unit.abbreviation}"
        return RenderedView(text, None, status, converted)

    # ── State ────────────────────────────────────────────────────────────────

    def reduce(self, state: ConversionState, event: Event) -> ConversionState:
        return reduce(state, event, self)

    def swap(self, state: ConversionState) -> ConversionState:
        return reduce(state, SwapRequested(), self)

    def render(self, state: ConversionState) -> RenderedView:
        """Project a state onto the result and error lines under this engine's locale."""
        return self.result_text(state.raw_input, state.from_unit, state.to_unit)
