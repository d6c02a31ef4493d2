# schemas.py  (recipes, steps, brew-along timer, users)

from __future__ import annotations
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, conint, confloat, constr, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


# ===================== Enums =====================

class StepType(str, Enum):
    BLOOM = "bloom"
    POUR = "pour"
    DRAWDOWN = "drawdown"

class RecipeMode(str, Enum):
    BASIC = "basic"          # pours + bloom multiplier
    ADVANCED = "advanced"    # explicit per-step amounts

class InputMode(str, Enum):
    COFFEE = "coffee"        # coffee weight drives water
    WATER = "water"          # water weight drives coffee

class TemperatureUnit(str, Enum):
    C = "C"
    F = "F"


# ===================== Base =====================

class CamelModel(BaseModel):
    # The web client stores recipes with camelCase keys (coffeeWeight,
    # targetTimeInSeconds, ...); python side stays snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===================== Recipe & Steps =====================

class Step(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str                                   # "step-<index>"
    type: StepType
    target_time: str                          # "m:ss"
    target_time_in_seconds: conint(ge=0)
    target_weight: conint(ge=0)               # grams delivered by this step; 0 for drawdown
    target_ratio: float = 0.0
    instruction: str
    description: Optional[str] = None

class Recipe(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coffee_weight: confloat(ge=0)
    water_weight: confloat(ge=0)
    ratio: confloat(gt=0)                     # water : coffee
    pours: conint(ge=0) = 0
    bloom_multiplier: confloat(ge=0) = 0
    total_brew_time: conint(ge=0) = 0         # seconds
    water_temperature: Optional[float] = None
    temperature_unit: TemperatureUnit = TemperatureUnit.C
    input_mode: InputMode = InputMode.COFFEE
    mode: RecipeMode = RecipeMode.BASIC
    description: Optional[str] = None
    steps: List[Step] = Field(default_factory=list)

class StepSchedule(CamelModel):
    """
    Output of the step expanders. `difference` is the signed water mismatch
    (total water minus what the steps deliver); it is shown, never raised.
    """
    steps: List[Step] = Field(default_factory=list)
    total_water: float
    step_water: int
    difference: float
    total_time: int                           # seconds until drawdown starts


# ===================== Form input (validation lives here, not in the scheduler) =====================

class AdvancedStepIn(CamelModel):
    water_amount: conint(ge=1)
    duration: conint(ge=1)
    is_bloom: bool = False
    description: Optional[str] = None

class RecipeFormIn(CamelModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: constr(min_length=3) = "My Custom Recipe"
    coffee_weight: Optional[confloat(ge=10, le=100)] = None
    water_weight: Optional[confloat(ge=150, le=2000)] = None
    ratio: confloat(ge=10, le=20) = 16
    pours: conint(ge=1, le=10) = 4
    bloom_multiplier: confloat(ge=1, le=5) = 3
    total_brew_time: constr(min_length=3) = "2:30"     # "m:ss"
    input_mode: InputMode = InputMode.COFFEE
    mode: RecipeMode = RecipeMode.BASIC
    advanced_steps: Optional[List[AdvancedStepIn]] = None
    water_temperature: confloat(ge=0, le=212) = 95
    temperature_unit: TemperatureUnit = TemperatureUnit.C
    include_drawdown: bool = True
    description: Optional[str] = None

    @model_validator(mode="after")
    def _check_temperature(self) -> "RecipeFormIn":
        if self.temperature_unit == TemperatureUnit.C and self.water_temperature > 100:
            raise ValueError("Water temperature must be less than 100°C or 212°F.")
        return self


# ===================== Brew calculation API =====================

class RatioRequest(CamelModel):
    input_mode: InputMode = InputMode.COFFEE
    coffee_weight: Optional[confloat(gt=0)] = None
    water_weight: Optional[confloat(gt=0)] = None
    ratio: confloat(gt=0) = 16

class RatioOut(CamelModel):
    coffee_weight: float
    water_weight: float
    ratio: float

class BasicScheduleRequest(CamelModel):
    coffee_weight: confloat(gt=0)
    water_weight: confloat(gt=0)
    pours: conint(ge=1)
    bloom_multiplier: confloat(ge=1)
    total_brew_time: Optional[conint(ge=0)] = None
    bloom_duration: Optional[conint(ge=0)] = None
    pour_duration: Optional[conint(ge=0)] = None
    include_drawdown: bool = True

class AdvancedScheduleRequest(CamelModel):
    coffee_weight: confloat(gt=0)
    water_weight: confloat(gt=0)
    steps: List[AdvancedStepIn] = Field(default_factory=list)
    include_drawdown: bool = True

class RescaleTarget(CamelModel):
    water_weight: Optional[confloat(gt=0)] = None
    coffee_weight: Optional[confloat(gt=0)] = None

    @model_validator(mode="after")
    def _exactly_one_target(self) -> "RescaleTarget":
        if (self.water_weight is None) == (self.coffee_weight is None):
            raise ValueError("provide exactly one of waterWeight or coffeeWeight")
        return self

class RescaleRequest(RescaleTarget):
    recipe: Recipe

class TemperatureRequest(CamelModel):
    temperature: float
    from_unit: TemperatureUnit
    to_unit: TemperatureUnit


# ===================== Brew-along timer =====================

class TimerRequest(CamelModel):
    recipe: Recipe
    elapsed_seconds: conint(ge=0) = 0

class TimerState(CamelModel):
    elapsed_seconds: int
    current_step_index: Optional[int] = None
    current_step: Optional[Step] = None
    next_step_time: Optional[str] = None
    cumulative_target: int = 0
    water_poured: int = 0
    water_for_current_step: int = 0
    target_amount: float = 0
    progress_percent: int = 0
    upcoming_steps: List[Step] = Field(default_factory=list)


# ===================== Users =====================

class UserIn(BaseModel):
    name: constr(min_length=1, max_length=100)
    email: constr(min_length=3, max_length=254)

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
