"""Unit table endpoints — data for the From/To pickers."""

from fastapi import APIRouter, HTTPException

from kitchen_converter.config import settings
from kitchen_converter.core.engine.number_format import LOCALES
from kitchen_converter.models.schemas import UnitTableOut
from kitchen_converter.utils.units import UnitCategory, parse_category

router = APIRouter(tags=["units"])


@router.get("/units", response_model=list[UnitTableOut])
async def list_unit_tables():
    """Both unit tables in display order."""
    return [UnitTableOut.for_category(c) for c in UnitCategory]


@router.get("/units/{category}", response_model=UnitTableOut)
async def get_unit_table(category: str):
    try:
        cat = parse_category(category)
    except ValueError as e:
        raise HTTPException(404, detail=str(e))
    return UnitTableOut.for_category(cat)


@router.get("/locales")
async def list_locales():
    return {"default": settings.default_locale, "locales": sorted(LOCALES)}
