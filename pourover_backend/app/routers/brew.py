# app/routers/brew.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Query

from pourover_backend.app.schemas import (
    AdvancedScheduleRequest, BasicScheduleRequest, RatioOut, RatioRequest,
    Recipe, RescaleRequest, StepSchedule, TemperatureRequest, TimerRequest, TimerState,
)
from pourover_backend.app.services.router_helpers import brew_helpers as H

router = APIRouter(prefix="/brew", tags=["brew"])

@router.post("/ratio", response_model=RatioOut)
def ratio(req: RatioRequest):
    """Derive the other weight from whichever one the user typed."""
    return H.ratio(req)

@router.post("/basic", response_model=StepSchedule)
def basic_schedule(req: BasicScheduleRequest):
    """
    Bloom + N equal pours (+ drawdown). `difference` reports the grams lost or
    gained to per-pour rounding.
    """
    return H.basic(req)

@router.post("/advanced", response_model=StepSchedule)
def advanced_schedule(req: AdvancedScheduleRequest):
    return H.advanced(req)

@router.post("/rescale", response_model=Recipe)
def rescale(req: RescaleRequest):
    return H.rescale(req)

@router.post("/timer", response_model=TimerState)
def timer(req: TimerRequest):
    return H.timer(req)

@router.post("/temperature")
def temperature(req: TemperatureRequest) -> Dict[str, Any]:
    return H.temperature(req)

@router.get("/time/format/{seconds}")
def time_format(seconds: int) -> Dict[str, Any]:
    return H.time_format(seconds)

@router.get("/time/parse")
def time_parse(text: str = Query(..., description="m:ss")) -> Dict[str, Any]:
    return H.time_parse(text)
