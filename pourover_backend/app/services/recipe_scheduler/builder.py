from __future__ import annotations
import re
import uuid
from typing import List, Optional, Sequence

from pourover_backend.app.config import BLOOM_DURATION_S, POUR_DURATION_S
from pourover_backend.app.schemas import (
    AdvancedStepIn, Recipe, RecipeFormIn, RecipeMode, Step, StepSchedule, StepType,
)
from .advanced import build_advanced_steps
from .basic import expand_basic_steps
from .ratio import resolve_weights
from .timefmt import format_time, parse_time

__all__ = [
    "new_recipe_id",
    "schedule_for_form",
    "create_custom_recipe",
    "steps_to_form_values",
    "recipe_to_form",
    "strip_total_from_instructions",
]

_TOTAL_SUFFIX = re.compile(r"\s*\(total: \d+g\)")


def new_recipe_id() -> str:
    return f"custom-{uuid.uuid4().hex[:12]}"


def schedule_for_form(form: RecipeFormIn) -> StepSchedule:
    coffee_g, water_g = resolve_weights(
        form.input_mode, form.ratio,
        coffee_g=form.coffee_weight, water_g=form.water_weight,
    )
    if form.mode == RecipeMode.ADVANCED and form.advanced_steps:
        return build_advanced_steps(
            coffee_g, water_g, form.advanced_steps, include_drawdown=form.include_drawdown,
        )
    return expand_basic_steps(
        coffee_g, water_g, form.pours, form.bloom_multiplier,
        include_drawdown=form.include_drawdown,
    )


# What it does:
# Validated form -> stored Recipe. Basic mode expands pours/bloom multiplier,
# advanced mode takes the entered steps as they are.
def create_custom_recipe(form: RecipeFormIn, *, recipe_id: Optional[str] = None) -> Recipe:
    coffee_g, water_g = resolve_weights(
        form.input_mode, form.ratio,
        coffee_g=form.coffee_weight, water_g=form.water_weight,
    )
    schedule = schedule_for_form(form)
    # advanced mode with no rows falls back to the basic expansion above
    if form.mode == RecipeMode.ADVANCED and form.advanced_steps:
        mode = RecipeMode.ADVANCED
    else:
        mode = RecipeMode.BASIC

    return Recipe(
        id=recipe_id or form.id or new_recipe_id(),
        name=form.name,
        coffee_weight=coffee_g,
        water_weight=water_g,
        ratio=form.ratio,
        pours=form.pours,
        bloom_multiplier=form.bloom_multiplier,
        total_brew_time=parse_time(form.total_brew_time),
        water_temperature=form.water_temperature,
        temperature_unit=form.temperature_unit,
        input_mode=form.input_mode,
        mode=mode,
        description=form.description,
        steps=schedule.steps,
    )


def steps_to_form_values(steps: Sequence[Step]) -> List[AdvancedStepIn]:
    """
    Stored steps -> editable advanced rows. Drawdown is dropped (it comes back
    through include_drawdown) but its start still closes the last pour.
    A step lasts until the next one starts; with nothing after it the default
    bloom/pour duration applies.
    """
    active = [s for s in steps if s.type != StepType.DRAWDOWN]
    drawdown_at = next(
        (s.target_time_in_seconds for s in steps if s.type == StepType.DRAWDOWN), None
    )
    rows: List[AdvancedStepIn] = []
    for i, s in enumerate(active):
        if i + 1 < len(active):
            duration = active[i + 1].target_time_in_seconds - s.target_time_in_seconds
        elif drawdown_at is not None:
            duration = drawdown_at - s.target_time_in_seconds
        else:
            duration = BLOOM_DURATION_S if s.type == StepType.BLOOM else POUR_DURATION_S
        rows.append(AdvancedStepIn(
            water_amount=max(1, s.target_weight),
            duration=max(1, duration),
            is_bloom=s.type == StepType.BLOOM,
            description=s.description,
        ))
    return rows


def recipe_to_form(recipe: Recipe) -> RecipeFormIn:
    """Prefill for the edit page."""
    return RecipeFormIn(
        id=recipe.id,
        name=recipe.name,
        coffee_weight=recipe.coffee_weight,
        water_weight=recipe.water_weight,
        ratio=recipe.ratio,
        pours=recipe.pours or 1,
        bloom_multiplier=recipe.bloom_multiplier or 1,
        total_brew_time=format_time(recipe.total_brew_time),
        input_mode=recipe.input_mode,
        mode=recipe.mode,
        advanced_steps=steps_to_form_values(recipe.steps),
        water_temperature=recipe.water_temperature if recipe.water_temperature is not None else 95,
        temperature_unit=recipe.temperature_unit,
        include_drawdown=any(s.type == StepType.DRAWDOWN for s in recipe.steps),
        description=recipe.description,
    )


def strip_total_from_instructions(recipe: Recipe) -> Recipe:
    """Old pour instructions carried a running "(total: Ng)" suffix; drop it."""
    changed = False
    steps: List[Step] = []
    for s in recipe.steps:
        if s.type == StepType.POUR and "(total:" in s.instruction:
            s = s.model_copy(update={"instruction": _TOTAL_SUFFIX.sub("", s.instruction)})
            changed = True
        steps.append(s)
    return recipe.model_copy(update={"steps": steps}) if changed else recipe
