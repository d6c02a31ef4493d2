from __future__ import annotations
import os
import tempfile
from pathlib import Path

# Data tree + sqlite file must be redirected before the app's config is imported.
_TMP = Path(tempfile.mkdtemp(prefix="pourover-tests-"))
os.environ["DATA_DIR"] = str(_TMP / "data")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'pourover-test.sqlite3'}"

import pytest
from fastapi.testclient import TestClient

from pourover_backend.app.main import app
from pourover_backend.app.schemas import AdvancedStepIn, RecipeFormIn, RecipeMode
from pourover_backend.app.services.recipe_scheduler import create_custom_recipe


@pytest.fixture(scope="session")
def client():
    # context manager runs the lifespan (tables, presets)
    with TestClient(app) as c:
        yield c

# --- Each test gets its own custom recipes file ---
@pytest.fixture(autouse=True)
def recipes_file(tmp_path, monkeypatch):
    path = tmp_path / "recipes" / "custom_recipes.json"
    monkeypatch.setenv("POUROVER_RECIPES_PATH", str(path))
    return path

# --- Recipes used across scheduler / timer tests ---
@pytest.fixture
def basic_form():
    # 20 g : 1:16, bloom ×3, four pours -> 60 + 4×65 = 320
    return RecipeFormIn(
        name="Test Basic",
        coffee_weight=20,
        ratio=16,
        pours=4,
        bloom_multiplier=3,
        total_brew_time="2:30",
    )

@pytest.fixture
def basic_recipe(basic_form):
    return create_custom_recipe(basic_form, recipe_id="test-basic")

@pytest.fixture
def advanced_rows():
    return [
        AdvancedStepIn(water_amount=60, duration=45, is_bloom=True),
        AdvancedStepIn(water_amount=70, duration=30),
        AdvancedStepIn(water_amount=70, duration=30),
        AdvancedStepIn(water_amount=70, duration=30),
    ]

@pytest.fixture
def advanced_recipe(advanced_rows):
    form = RecipeFormIn(
        name="Test Advanced",
        coffee_weight=20,
        ratio=16,
        mode=RecipeMode.ADVANCED,
        advanced_steps=advanced_rows,
    )
    return create_custom_recipe(form, recipe_id="test-advanced")

@pytest.fixture
def drifting_recipe():
    # 700 g water at 1:17 -> 41 g coffee, bloom 82, 618/5 rounds to 124 -> 702 g in the steps
    form = RecipeFormIn(
        name="Drifting",
        input_mode="water",
        water_weight=700,
        ratio=17,
        pours=5,
        bloom_multiplier=2,
    )
    return create_custom_recipe(form, recipe_id="test-drift")
