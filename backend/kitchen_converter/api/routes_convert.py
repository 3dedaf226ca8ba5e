"""One-shot conversion endpoint — a full input cycle without session state."""

import logging

from fastapi import APIRouter, HTTPException

from kitchen_converter.api.deps import engine_for
from kitchen_converter.models.schemas import ConvertRequest, ViewOut
from kitchen_converter.utils.units import UnknownUnitError

router = APIRouter(tags=["convert"])

logger = logging.getLogger("kitchen_converter.convert")


@router.post("/convert", response_model=ViewOut)
async def convert_amount(req: ConvertRequest):
    """Convert the amount text between two units of the request's category.

    Bad amount text is not an HTTP error: it comes back as ``error_text``
    with the placeholder result, as it would be shown under the input field.
    """
    engine = engine_for(req.locale)
    try:
        from_unit = engine.get_unit(req.category, req.from_unit)
        to_unit = engine.get_unit(req.category, req.to_unit)
        view = engine.result_text(req.amount, from_unit, to_unit)
    except UnknownUnitError as e:
        logger.info("rejected conversion request: %s", e)
        raise HTTPException(422, detail=[{"message": str(e)}])
    return ViewOut.from_view(view)
