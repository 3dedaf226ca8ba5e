"""Pure reducer for the converter screen: (state, event) -> state'."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from kitchen_converter.core.session.state import (
    CategoryChanged,
    ConversionState,
    Event,
    FromUnitChanged,
    InputChanged,
    SwapRequested,
    ToUnitChanged,
)
from kitchen_converter.utils.units import default_units, find_unit, get_unit

if TYPE_CHECKING:
    from kitchen_converter.core.engine.engine import ConversionEngine

logger = logging.getLogger("kitchen_converter.session")


def _revalidate(state: ConversionState, engine: ConversionEngine) -> ConversionState:
    status, _, error = engine.check_input(state.raw_input)
    return replace(state, status=status, error_text=error.message if error else None)


def _change_category(state: ConversionState, event: CategoryChanged) -> ConversionState:
    if event.category == state.category:
        return state
    default_from, default_to = default_units(event.category)
    return replace(
        state,
        category=event.category,
        from_unit=find_unit(event.category, state.from_unit.id) or default_from,
        to_unit=find_unit(event.category, state.to_unit.id) or default_to,
    )


def reduce(state: ConversionState, event: Event, engine: ConversionEngine) -> ConversionState:
    """Apply one user event. Raises UnknownUnitError for a unit outside the current table."""
    logger.debug("event %r on %s %s->%s", event, state.category.value, state.from_unit.id, state.to_unit.id)

    if isinstance(event, CategoryChanged):
        return _change_category(state, event)
    if isinstance(event, InputChanged):
        return _revalidate(replace(state, raw_input=event.text), engine)
    if isinstance(event, FromUnitChanged):
        return replace(state, from_unit=get_unit(state.category, event.unit_id))
    if isinstance(event, ToUnitChanged):
        return replace(state, to_unit=get_unit(state.category, event.unit_id))
    if isinstance(event, SwapRequested):
        # validation does not depend on units, but the error display is refreshed
        return _revalidate(replace(state, from_unit=state.to_unit, to_unit=state.from_unit), engine)
    raise TypeError(f"Unsupported event: {event!r}")
