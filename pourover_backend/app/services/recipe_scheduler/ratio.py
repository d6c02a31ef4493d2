from __future__ import annotations
import math
from typing import Optional, Tuple

from pourover_backend.app.config import DEFAULT_COFFEE_G, DEFAULT_WATER_G
from pourover_backend.app.schemas import InputMode

__all__ = ["round_half_up", "resolve_water", "resolve_coffee", "resolve_weights"]


def round_half_up(x: float) -> int:
    # .5 always goes up (2.5 -> 3); python's round() would give 2
    return int(math.floor(x + 0.5))


def resolve_water(coffee_g: float, ratio: float) -> int:
    """water = coffee × ratio, as whole grams."""
    return round_half_up(coffee_g * ratio)


def resolve_coffee(water_g: float, ratio: float) -> int:
    """coffee = round(water / ratio)."""
    return round_half_up(water_g / ratio)


# What it does:
# The form shows one weight as an input and derives the other from the ratio.
# Returns (coffee_g, water_g). An empty driving field falls back to the
# 20 g / 320 g defaults the brew form starts with.
def resolve_weights(
    input_mode: InputMode,
    ratio: float,
    *,
    coffee_g: Optional[float] = None,
    water_g: Optional[float] = None,
) -> Tuple[float, float]:
    if input_mode == InputMode.WATER:
        water = water_g or DEFAULT_WATER_G
        return resolve_coffee(water, ratio), water

    coffee = coffee_g or DEFAULT_COFFEE_G
    return coffee, resolve_water(coffee, ratio)
