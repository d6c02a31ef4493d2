# pourover_backend/app/services/recipe_scheduler/__init__.py
"""
Pure recipe math: no I/O, no shared state. Safe to call on every keystroke.
"""
from .ratio import round_half_up, resolve_water, resolve_coffee, resolve_weights
from .timefmt import format_time, parse_time
from .units import convert_temperature
from .basic import bloom_water, water_per_pour, expand_basic_steps
from .advanced import build_advanced_steps, water_difference
from .rescale import rescale_recipe
from .builder import (
    create_custom_recipe,
    schedule_for_form,
    steps_to_form_values,
    recipe_to_form,
    strip_total_from_instructions,
)

__all__ = [
    "round_half_up", "resolve_water", "resolve_coffee", "resolve_weights",
    "format_time", "parse_time",
    "convert_temperature",
    "bloom_water", "water_per_pour", "expand_basic_steps",
    "build_advanced_steps", "water_difference",
    "rescale_recipe",
    "create_custom_recipe", "schedule_for_form", "steps_to_form_values",
    "recipe_to_form", "strip_total_from_instructions",
]
