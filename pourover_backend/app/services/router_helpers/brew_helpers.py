from __future__ import annotations
from typing import Any, Dict

from fastapi import HTTPException, status

from pourover_backend.app.config import BLOOM_DURATION_S, POUR_DURATION_S
from pourover_backend.app.schemas import (
    AdvancedScheduleRequest, BasicScheduleRequest, RatioOut, RatioRequest,
    Recipe, RescaleRequest, StepSchedule, TemperatureRequest, TimerRequest, TimerState,
)
from pourover_backend.app.services.brew_timer import timer_state
from pourover_backend.app.services.recipe_scheduler import (
    build_advanced_steps, convert_temperature, expand_basic_steps, format_time,
    parse_time, rescale_recipe, resolve_weights,
)


def _bad_request(what: str, e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{what} failed: {e}")


# ----------------------------------------------------------------------
# Ratio: one weight + ratio -> both weights
# ----------------------------------------------------------------------

def ratio(req: RatioRequest) -> RatioOut:
    coffee_g, water_g = resolve_weights(
        req.input_mode, req.ratio, coffee_g=req.coffee_weight, water_g=req.water_weight,
    )
    return RatioOut(coffee_weight=coffee_g, water_weight=water_g, ratio=req.ratio)


# ----------------------------------------------------------------------
# Schedules
# ----------------------------------------------------------------------

def basic(req: BasicScheduleRequest) -> StepSchedule:
    try:
        return expand_basic_steps(
            req.coffee_weight, req.water_weight, req.pours, req.bloom_multiplier,
            bloom_duration_s=BLOOM_DURATION_S if req.bloom_duration is None else req.bloom_duration,
            pour_duration_s=POUR_DURATION_S if req.pour_duration is None else req.pour_duration,
            include_drawdown=req.include_drawdown,
        )
    except ValueError as e:
        raise _bad_request("basic schedule", e)


def advanced(req: AdvancedScheduleRequest) -> StepSchedule:
    return build_advanced_steps(
        req.coffee_weight, req.water_weight, req.steps, include_drawdown=req.include_drawdown,
    )


def rescale(req: RescaleRequest) -> Recipe:
    try:
        return rescale_recipe(req.recipe, water_g=req.water_weight, coffee_g=req.coffee_weight)
    except ValueError as e:
        raise _bad_request("rescale", e)


# ----------------------------------------------------------------------
# Brew-along timer
# ----------------------------------------------------------------------

def timer(req: TimerRequest) -> TimerState:
    return timer_state(req.recipe, req.elapsed_seconds)


def timer_for(recipe: Recipe, elapsed_seconds: int) -> TimerState:
    return timer_state(recipe, elapsed_seconds)


# ----------------------------------------------------------------------
# Small converters
# ----------------------------------------------------------------------

def time_format(seconds: int) -> Dict[str, Any]:
    try:
        return {"seconds": seconds, "text": format_time(seconds)}
    except ValueError as e:
        raise _bad_request("format", e)


def time_parse(text: str) -> Dict[str, Any]:
    try:
        return {"text": text, "seconds": parse_time(text)}
    except ValueError as e:
        raise _bad_request("parse", e)


def temperature(req: TemperatureRequest) -> Dict[str, Any]:
    value = convert_temperature(req.temperature, req.from_unit, req.to_unit)
    return {"temperature": value, "unit": req.to_unit.value}
