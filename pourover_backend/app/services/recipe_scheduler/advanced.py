from __future__ import annotations
from typing import Any, List, Sequence

from pourover_backend.app.schemas import AdvancedStepIn, Step, StepSchedule, StepType
from .steps import make_step

__all__ = ["build_advanced_steps", "water_difference"]


def _as_step_in(raw: Any) -> AdvancedStepIn:
    if isinstance(raw, AdvancedStepIn):
        return raw
    return AdvancedStepIn.model_validate(raw)


def water_difference(total_water_g: float, steps: Sequence[Any]) -> float:
    """Signed gap between the recipe water and what the entered steps add up to."""
    return total_water_g - sum(_as_step_in(s).water_amount for s in steps)


def build_advanced_steps(
    coffee_g: float,
    water_g: float,
    entered: Sequence[Any],
    *,
    include_drawdown: bool = True,
) -> StepSchedule:
    """
    Advanced mode: the user typed every step. Order is kept exactly as entered;
    each step starts when the previous ones' durations have elapsed.
    """
    steps: List[Step] = []
    t = 0
    delivered = 0
    for i, raw in enumerate(entered):
        s = _as_step_in(raw)
        kind = StepType.BLOOM if s.is_bloom else StepType.POUR
        steps.append(make_step(i, kind, t, s.water_amount,
                               coffee_g=coffee_g, water_g=water_g, description=s.description))
        t += s.duration
        delivered += s.water_amount

    if include_drawdown:
        steps.append(make_step(len(steps), StepType.DRAWDOWN, t, 0, coffee_g=coffee_g, water_g=water_g))

    return StepSchedule(
        steps=steps,
        total_water=water_g,
        step_water=delivered,
        difference=water_g - delivered,
        total_time=t,
    )
