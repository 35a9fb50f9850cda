"""
Rabbit counter endpoints.

A single resource exposing the Fibonacci cache.  Every answer is
rendered in the format negotiated from the ``Accept`` header (plain
text, HTML or, by default, XML):

- ``GET ?num=n`` returns the cached value at ``n`` or ``-1`` when it
  has not been computed; without ``num`` it returns every cached value.
- ``POST`` with form field ``nums=[n1, n2, ...]`` computes and caches
  each position in order.  Positions above ``settings.max_position``
  are refused before anything is computed.
- ``DELETE ?num=n`` removes the entry at ``n``.
- ``PUT``, ``HEAD`` and ``OPTIONS`` are refused with 405.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Header, HTTPException, Query, Response, status

from rest_lab_api.app.api.deps import get_fibonacci_service, get_settings
from rest_lab_api.app.core.config import Settings
from rest_lab_api.app.core.negotiation import negotiate, to_text
from rest_lab_api.app.schemas.fibonacci import parse_position, parse_positions
from rest_lab_api.app.services.fibonacci_service import FibonacciService, NegativePositionError

logger = logging.getLogger(__name__)

# Reported to clients in place of a value that has not been computed.
ABSENT = -1
ALLOWED_METHODS = "GET, POST, DELETE"

router = APIRouter()


@router.get("")
async def get_values(
    num: Optional[str] = Query(None, description="Position within the sequence"),
    accept: Optional[str] = Header(None),
    service: FibonacciService = Depends(get_fibonacci_service),
) -> Response:
    """Return one cached value, or all of them when ``num`` is omitted.

    A position that is not an integer is treated as never computed.
    """
    formatter = negotiate(accept)
    if num is None:
        return formatter.response(service.all_entries())
    try:
        value = service.lookup(parse_position(num))
    except ValueError:
        logger.warning("Ignoring non-numeric position %r", num)
        value = None
    return formatter.response(ABSENT if value is None else value)


@router.post("")
async def add_values(
    nums: Optional[str] = Form(None, description="Positions to compute, e.g. [1, 2, 3]"),
    accept: Optional[str] = Header(None),
    service: FibonacciService = Depends(get_fibonacci_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Compute and cache the Fibonacci value at each posted position."""
    if nums is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing form field 'nums'")
    try:
        positions = parse_positions(nums, settings.max_position)
    except ValueError as e:
        logger.warning("Rejected positions %r: %s", nums, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    try:
        values = service.batch_fill(positions)
    except NegativePositionError as e:
        logger.warning("Rejected batch %s: %s", positions, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return negotiate(accept).response(f"{to_text(values)} added.")


@router.delete("")
async def delete_value(
    num: Optional[str] = Query(None, description="Position to remove"),
    accept: Optional[str] = Header(None),
    service: FibonacciService = Depends(get_fibonacci_service),
) -> Response:
    """Remove the cached value at ``num``."""
    try:
        n = parse_position(num)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid 'num': {e}")
    service.remove(n)
    return negotiate(accept).response(f"{n} deleted.")


@router.api_route("", methods=["PUT", "HEAD", "OPTIONS"], include_in_schema=False)
async def method_not_allowed() -> Response:
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ALLOWED_METHODS},
    )
