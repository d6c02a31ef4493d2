from __future__ import annotations
from typing import List

from pourover_backend.app.config import BLOOM_DURATION_S, POUR_DURATION_S
from pourover_backend.app.schemas import Step, StepSchedule, StepType
from .ratio import round_half_up
from .steps import make_step

__all__ = ["bloom_water", "water_per_pour", "expand_basic_steps"]


def bloom_water(coffee_g: float, bloom_multiplier: float) -> int:
    return round_half_up(coffee_g * bloom_multiplier)


def water_per_pour(coffee_g: float, water_g: float, pours: int, bloom_multiplier: float) -> int:
    if pours <= 0:
        return 0
    return round_half_up((water_g - bloom_water(coffee_g, bloom_multiplier)) / pours)


# What it does:
# Basic mode: aggregate parameters -> bloom, N equal pours, optional drawdown.
# Each pour is rounded on its own, so the steps can drift from the target
# water by a few grams; that drift is returned as `difference` and left for
# the caller to show.
def expand_basic_steps(
    coffee_g: float,
    water_g: float,
    pours: int,
    bloom_multiplier: float,
    *,
    bloom_duration_s: int = BLOOM_DURATION_S,
    pour_duration_s: int = POUR_DURATION_S,
    include_drawdown: bool = True,
) -> StepSchedule:
    if pours < 1:
        raise ValueError(f"pours must be >= 1, got {pours}")

    bloom_g = bloom_water(coffee_g, bloom_multiplier)
    if bloom_g > water_g:
        raise ValueError(f"bloom water {bloom_g}g exceeds total water {water_g}g")
    per_pour = water_per_pour(coffee_g, water_g, pours, bloom_multiplier)

    steps: List[Step] = [
        make_step(0, StepType.BLOOM, 0, bloom_g, coffee_g=coffee_g, water_g=water_g),
    ]
    t = bloom_duration_s
    for i in range(1, pours + 1):
        steps.append(make_step(i, StepType.POUR, t, per_pour, coffee_g=coffee_g, water_g=water_g))
        t += pour_duration_s

    if include_drawdown:
        steps.append(make_step(len(steps), StepType.DRAWDOWN, t, 0, coffee_g=coffee_g, water_g=water_g))

    delivered = bloom_g + per_pour * pours
    return StepSchedule(
        steps=steps,
        total_water=water_g,
        step_water=delivered,
        difference=water_g - delivered,
        total_time=t,
    )
