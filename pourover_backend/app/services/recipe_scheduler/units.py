from __future__ import annotations

from pourover_backend.app.schemas import TemperatureUnit
from .ratio import round_half_up

__all__ = ["convert_temperature"]


def convert_temperature(temp: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    """C <-> F, rounded to whole degrees. Same unit returns the input untouched."""
    if TemperatureUnit(from_unit) == TemperatureUnit(to_unit):
        return temp
    if TemperatureUnit(from_unit) == TemperatureUnit.C:
        return round_half_up(temp * 9 / 5 + 32)
    return round_half_up((temp - 32) * 5 / 9)
