"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, field_validator, model_validator

from kitchen_converter.config import settings
from kitchen_converter.core.engine.engine import RenderedView
from kitchen_converter.core.engine.parsing import InputStatus
from kitchen_converter.core.session.state import (
    CategoryChanged,
    ConversionState,
    Event,
    FromUnitChanged,
    InputChanged,
    SwapRequested,
    ToUnitChanged,
)
from kitchen_converter.utils.units import (
    DEFAULT_UNIT_IDS,
    UnitCategory,
    UnitDefinition,
    base_unit,
    units_for,
)


def _check_amount_length(v: str) -> str:
    if len(v) > settings.max_input_length:
        raise ValueError(f"Amount text is longer than {settings.max_input_length} characters")
    return v


class UnitOut(BaseModel):
    id: str
    display_name: str
    abbreviation: str
    factor_to_base: float
    label: str

    @classmethod
    def from_unit(cls, unit: UnitDefinition) -> UnitOut:
        return cls(
            id=unit.id,
            display_name=unit.display_name,
            abbreviation=unit.abbreviation,
            factor_to_base=unit.factor_to_base,
            label=unit.label,
        )


class UnitTableOut(BaseModel):
    category: UnitCategory
    base_unit: str
    default_from: str
    default_to: str
    units: list[UnitOut]

    @classmethod
    def for_category(cls, category: UnitCategory) -> UnitTableOut:
        default_from, default_to = DEFAULT_UNIT_IDS[category]
        return cls(
            category=category,
            base_unit=base_unit(category).id,
            default_from=default_from,
            default_to=default_to,
            units=[UnitOut.from_unit(u) for u in units_for(category)],
        )


class ConvertRequest(BaseModel):
    amount: str
    category: UnitCategory
    from_unit: str
    to_unit: str
    locale: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_not_too_long(cls, v: str) -> str:
        return _check_amount_length(v)


class ViewOut(BaseModel):
    result_text: str
    error_text: Optional[str] = None
    status: InputStatus
    value: Optional[float] = None

    @classmethod
    def from_view(cls, view: RenderedView) -> ViewOut:
        return cls(
            result_text=view.result_text,
            error_text=view.error_text,
            status=view.status,
            value=view.value,
        )


class SessionOut(BaseModel):
    category: UnitCategory
    from_unit: UnitOut
    to_unit: UnitOut
    raw_input: str
    view: ViewOut

    @classmethod
    def from_state(cls, state: ConversionState, view: RenderedView) -> SessionOut:
        return cls(
            category=state.category,
            from_unit=UnitOut.from_unit(state.from_unit),
            to_unit=UnitOut.from_unit(state.to_unit),
            raw_input=state.raw_input,
            view=ViewOut.from_view(view),
        )


EventType = Literal[
    "category_changed",
    "input_changed",
    "from_unit_changed",
    "to_unit_changed",
    "swap_requested",
]


class SessionEventRequest(BaseModel):
    type: EventType
    category: Optional[UnitCategory] = None
    text: Optional[str] = None
    unit_id: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_not_too_long(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_amount_length(v)

    @model_validator(mode="after")
    def payload_matches_type(self) -> SessionEventRequest:
        required = {
            "category_changed": "category",
            "input_changed": "text",
            "from_unit_changed": "unit_id",
            "to_unit_changed": "unit_id",
        }.get(self.type)
        if required and getattr(self, required) is None:
            raise ValueError(f"Event '{self.type}' requires '{required}'")
        return self

    def to_event(self) -> Event:
        if self.type == "category_changed":
            return CategoryChanged(self.category)
        if self.type == "input_changed":
            return InputChanged(self.text)
        if self.type == "from_unit_changed":
            return FromUnitChanged(self.unit_id)
        if self.type == "to_unit_changed":
            return ToUnitChanged(self.unit_id)
        return SwapRequested()
