from __future__ import annotations
from typing import Optional

from pourover_backend.app.schemas import Step, StepType
from .timefmt import format_time

__all__ = ["make_step", "step_ratio", "instruction_for"]

DRAWDOWN_INSTRUCTION = "Allow remaining water to drain through the coffee bed"


def instruction_for(step_type: StepType, weight_g: int) -> str:
    if step_type == StepType.BLOOM:
        return f"Pour {weight_g}g of water to bloom the coffee grounds"
    if step_type == StepType.POUR:
        return f"Pour {weight_g}g of water in a circular motion"
    return DRAWDOWN_INSTRUCTION


def step_ratio(step_type: StepType, weight_g: float, coffee_g: float, water_g: float) -> float:
    # bloom is expressed against the dose (g water per g coffee), pours as a
    # share of the total water
    if step_type == StepType.DRAWDOWN:
        return 0.0
    base = coffee_g if step_type == StepType.BLOOM else water_g
    return weight_g / base if base else 0.0


def make_step(
    index: int,
    step_type: StepType,
    at_s: int,
    weight_g: int,
    *,
    coffee_g: float,
    water_g: float,
    description: Optional[str] = None,
) -> Step:
    return Step(
        id=f"step-{index}",
        type=step_type,
        target_time=format_time(at_s),
        target_time_in_seconds=at_s,
        target_weight=weight_g,
        target_ratio=step_ratio(step_type, weight_g, coffee_g, water_g),
        instruction=instruction_for(step_type, weight_g),
        description=description or None,
    )
