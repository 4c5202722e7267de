from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.services.clock import SystemClock, get_clock, render_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["time"])


@router.get("/time", response_class=PlainTextResponse)
def current_time(clock: SystemClock = Depends(get_clock)) -> str:
    stamp = render_timestamp(clock.now())
    logger.debug("serving time %s", stamp)
    return stamp + "\n"
