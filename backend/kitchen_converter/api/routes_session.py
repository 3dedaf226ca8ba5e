"""Converter screen session endpoints — desktop single-session."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from kitchen_converter.api.deps import engine_for
from kitchen_converter.core.session.state import ConversionState, initial_state
from kitchen_converter.models.schemas import SessionEventRequest, SessionOut
from kitchen_converter.utils.units import UnknownUnitError

router = APIRouter(tags=["session"])

logger = logging.getLogger("kitchen_converter.session")

# Desktop-only: one screen state per process, replaced wholesale on each event.
_state: ConversionState = initial_state()


def get_state() -> ConversionState:
    return _state


def reset_state() -> ConversionState:
    global _state
    _state = initial_state()
    return _state


@router.get("/session", response_model=SessionOut)
async def session_status(locale: Optional[str] = None):
    """Return the current screen state and what it renders to."""
    engine = engine_for(locale)
    return SessionOut.from_state(_state, engine.render(_state))


@router.post("/session/events", response_model=SessionOut)
async def apply_event(req: SessionEventRequest, locale: Optional[str] = None):
    """Apply one user event (input change, unit pick, swap, category switch)."""
    global _state
    engine = engine_for(locale)
    try:
        new_state = engine.reduce(_state, req.to_event())
    except UnknownUnitError as exc:
        logger.warning("rejected %s: %s", req.type, exc)
        raise HTTPException(422, detail=str(exc))
    _state = new_state
    return SessionOut.from_state(_state, engine.render(_state))


@router.post("/session/reset", response_model=SessionOut)
async def reset_session(locale: Optional[str] = None):
    engine = engine_for(locale)
    state = reset_state()
    logger.info("session reset")
    return SessionOut.from_state(state, engine.render(state))
