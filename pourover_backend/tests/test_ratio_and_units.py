# tests/test_ratio_and_units.py
# Purpose:
# Ratio resolution and temperature conversion: whole grams, half-up rounding.
import pytest

from pourover_backend.app.schemas import InputMode, TemperatureUnit
from pourover_backend.app.services.recipe_scheduler import (
    convert_temperature, resolve_coffee, resolve_water, resolve_weights, round_half_up,
)

def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_half_up(123.6) == 124

def test_water_from_coffee():
    assert resolve_water(20, 16) == 320
    assert resolve_water(15, 15.5) == 233   # 232.5 rounds up

def test_coffee_from_water():
    assert resolve_coffee(320, 16) == 20
    assert resolve_coffee(700, 17) == 41
    assert resolve_coffee(24, 16) == 2      # 1.5 rounds up

@pytest.mark.parametrize("ratio", [10, 15, 16, 17.5, 20])
def test_water_over_coffee_is_the_ratio(ratio):
    for coffee in range(1, 101):
        water = resolve_water(coffee, ratio)
        assert isinstance(water, int) and water > 0
        # at most half a gram of rounding, so water / coffee stays within 0.5 / coffee of the ratio
        assert abs(water - coffee * ratio) <= 0.5

def test_resolve_weights_per_input_mode():
    assert resolve_weights(InputMode.COFFEE, 16, coffee_g=18) == (18, 288)
    assert resolve_weights(InputMode.WATER, 16, water_g=250) == (16, 250)

def test_resolve_weights_empty_field_uses_form_defaults():
    assert resolve_weights(InputMode.COFFEE, 16) == (20, 320)
    assert resolve_weights(InputMode.WATER, 16) == (20, 320)

def test_temperature_conversion():
    assert convert_temperature(95, TemperatureUnit.C, TemperatureUnit.F) == 203
    assert convert_temperature(203, TemperatureUnit.F, TemperatureUnit.C) == 95
    assert convert_temperature(201, "F", "C") == 94
    assert convert_temperature(92.5, TemperatureUnit.C, TemperatureUnit.C) == 92.5
