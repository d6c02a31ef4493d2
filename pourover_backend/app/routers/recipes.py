# app/routers/recipes.py
from __future__ import annotations
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Query

from pourover_backend.app.schemas import Recipe, RecipeFormIn, RescaleRequest, RescaleTarget, TimerState
from pourover_backend.app.services.router_helpers import brew_helpers as B
from pourover_backend.app.services.router_helpers import recipe_helpers as H

router = APIRouter(prefix="/recipes", tags=["recipes"])

# --- collections ---
@router.get("", response_model=List[Recipe])
def list_custom():
    return H.list_custom()

@router.post("", response_model=Recipe)
def create_recipe(form: RecipeFormIn):
    """Build a recipe from the brew form and store it."""
    return H.create_from_form(form)

@router.delete("")
def delete_all() -> Dict[str, Any]:
    return H.delete_all()

@router.get("/presets", response_model=List[Recipe])
def list_presets():
    return H.list_presets()

@router.get("/export")
def export_recipes() -> Dict[str, Any]:
    return H.export_all()

@router.post("/import")
def import_recipes(payload: Any = Body(...)) -> Dict[str, Any]:
    """Accepts a browser customRecipes array or {items: [...]}."""
    return H.import_any(payload)

# --- single recipe (custom or preset) ---
@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str):
    return H.find_recipe(recipe_id)

@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(recipe_id: str, form: RecipeFormIn):
    return H.update_from_form(recipe_id, form)

@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str) -> Dict[str, Any]:
    return H.delete_one(recipe_id)

@router.get("/{recipe_id}/form", response_model=RecipeFormIn)
def edit_form(recipe_id: str):
    """Stored recipe as form values (edit page prefill)."""
    return H.form_for(recipe_id)

@router.post("/{recipe_id}/rescale", response_model=Recipe)
def rescale(recipe_id: str, target: RescaleTarget):
    """Scaled copy for this brew; the stored recipe is left alone."""
    recipe = H.find_recipe(recipe_id)
    req = RescaleRequest(recipe=recipe, water_weight=target.water_weight, coffee_weight=target.coffee_weight)
    return B.rescale(req)

@router.get("/{recipe_id}/timer", response_model=TimerState)
def timer(recipe_id: str, elapsed: int = Query(0, ge=0)):
    return B.timer_for(H.find_recipe(recipe_id), elapsed)
