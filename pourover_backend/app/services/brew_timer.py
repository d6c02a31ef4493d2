from __future__ import annotations
from typing import List, Optional

from pourover_backend.app.config import DRAWDOWN_WINDOW_S, POUR_RAMP_S
from pourover_backend.app.schemas import Recipe, Step, StepType, TimerState
from pourover_backend.app.services.recipe_scheduler import format_time, round_half_up

__all__ = ["current_step_index", "upcoming_steps", "timer_state"]

UPCOMING_LIMIT = 4


def current_step_index(steps: List[Step], elapsed_s: int) -> Optional[int]:
    """
    Linear scan: the step whose [start, next start) window holds `elapsed_s`.
    Past the last step's start -> last step; before the first -> first step.
    """
    if not steps:
        return None
    for i in range(len(steps) - 1):
        if steps[i].target_time_in_seconds <= elapsed_s < steps[i + 1].target_time_in_seconds:
            return i
    if elapsed_s >= steps[-1].target_time_in_seconds:
        return len(steps) - 1
    return 0


def upcoming_steps(steps: List[Step], elapsed_s: int, limit: int = UPCOMING_LIMIT) -> List[Step]:
    return [s for s in steps if s.target_time_in_seconds > elapsed_s][:limit]


def _poured_in_step(step: Step, elapsed_s: int, ramp_s: int) -> int:
    # a pour takes `ramp_s` seconds to go in; assume a steady stream
    if step.type == StepType.DRAWDOWN:
        return 0
    into = elapsed_s - step.target_time_in_seconds
    if into >= ramp_s:
        return step.target_weight
    if into > 0:
        return round_half_up(step.target_weight * min(1.0, into / ramp_s))
    return 0


# What it does:
# Everything the brew-along screen shows for one timer tick. Called once per
# second with the elapsed time; holds no state between calls.
def timer_state(
    recipe: Recipe,
    elapsed_s: int,
    *,
    ramp_s: int = POUR_RAMP_S,
    drawdown_window_s: int = DRAWDOWN_WINDOW_S,
) -> TimerState:
    steps = list(recipe.steps)
    idx = current_step_index(steps, elapsed_s)
    if idx is None:
        return TimerState(elapsed_seconds=elapsed_s)

    current = steps[idx]

    if idx == len(steps) - 1 and elapsed_s >= current.target_time_in_seconds:
        next_time: Optional[str] = format_time(current.target_time_in_seconds + drawdown_window_s)
    elif idx + 1 < len(steps):
        next_time = steps[idx + 1].target_time
    else:
        next_time = None

    cumulative = sum(s.target_weight for s in steps[: idx + 1] if s.type != StepType.DRAWDOWN)
    completed = sum(s.target_weight for s in steps[:idx] if s.type != StepType.DRAWDOWN)
    in_step = _poured_in_step(current, elapsed_s, ramp_s)
    poured = completed + in_step

    if current.type == StepType.DRAWDOWN:
        target_amount = recipe.water_weight
        progress = round_half_up(poured / (recipe.water_weight or 1) * 100)
    else:
        target_amount = cumulative
        progress = round_half_up(poured / (cumulative or 1) * 100)

    return TimerState(
        elapsed_seconds=elapsed_s,
        current_step_index=idx,
        current_step=current,
        next_step_time=next_time,
        cumulative_target=cumulative,
        water_poured=poured,
        water_for_current_step=in_step,
        target_amount=target_amount,
        progress_percent=progress,
        upcoming_steps=upcoming_steps(steps, elapsed_s),
    )
