from __future__ import annotations
import math
from typing import List, Optional

from pourover_backend.app.schemas import Recipe, Step, StepType
from .ratio import resolve_coffee, resolve_water, round_half_up
from .steps import instruction_for, step_ratio

__all__ = ["split_proportionally", "rescale_recipe"]


def split_proportionally(weights: List[int], target: int) -> List[int]:
    """
    Scale integer weights so they sum to `target` exactly (largest remainder).
    Leftover grams go to the largest fractional parts, earliest step first on ties.
    """
    current = sum(weights)
    if current <= 0:
        raise ValueError("cannot rescale steps that carry no water")
    exact = [w * target / current for w in weights]
    out = [int(math.floor(x)) for x in exact]
    leftover = target - sum(out)
    order = sorted(range(len(weights)), key=lambda i: (-(exact[i] - out[i]), i))
    for i in order[:leftover]:
        out[i] += 1
    return out


# What it does:
# The user dials in a different water (or coffee) amount at brew time. Every
# pouring step keeps its share of the water; times, types, order and count
# stay as they were. Returns a new Recipe, the input is never touched.
def rescale_recipe(
    recipe: Recipe,
    *,
    water_g: Optional[float] = None,
    coffee_g: Optional[float] = None,
) -> Recipe:
    if (water_g is None) == (coffee_g is None):
        raise ValueError("pass exactly one of water_g or coffee_g")

    if water_g is not None and water_g == recipe.water_weight:
        return recipe

    # whole grams from here on, so the stored water always equals the step sum
    target = round_half_up(water_g) if water_g is not None else resolve_water(coffee_g, recipe.ratio)
    new_coffee = coffee_g if coffee_g is not None else resolve_coffee(target, recipe.ratio)
    pouring = [i for i, s in enumerate(recipe.steps) if s.type != StepType.DRAWDOWN]
    current = sum(recipe.steps[i].target_weight for i in pouring)

    if target in (current, recipe.water_weight):
        # steps already fit the target; only the headline numbers move
        return recipe.model_copy(update={"water_weight": target, "coffee_weight": new_coffee})

    scaled = split_proportionally([recipe.steps[i].target_weight for i in pouring], target)
    new_weights = dict(zip(pouring, scaled))

    steps: List[Step] = []
    for i, s in enumerate(recipe.steps):
        if i not in new_weights:
            steps.append(s)
            continue
        w = new_weights[i]
        steps.append(s.model_copy(update={
            "target_weight": w,
            "target_ratio": step_ratio(s.type, w, new_coffee, target),
            "instruction": instruction_for(s.type, w),
        }))

    return recipe.model_copy(update={
        "water_weight": target,
        "coffee_weight": new_coffee,
        "steps": steps,
    })
