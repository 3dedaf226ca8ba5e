"""Shared request dependencies."""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException

from kitchen_converter.config import settings
from kitchen_converter.core.engine.engine import ConversionEngine
from kitchen_converter.core.engine.number_format import UnknownLocaleError, get_number_format


def engine_for(locale: Optional[str] = None) -> ConversionEngine:
    """Build an engine for the requested locale, falling back to the configured default."""
    try:
        number_format = get_number_format(locale or settings.default_locale)
    except UnknownLocaleError as exc:
        raise HTTPException(422, detail=str(exc))
    return ConversionEngine(number_format, placeholder=settings.result_placeholder)
