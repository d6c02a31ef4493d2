from __future__ import annotations
import logging
from typing import Any, Dict, List

from fastapi import HTTPException, status

from pourover_backend.app.recipes import presets_loader
from pourover_backend.app.schemas import Recipe, RecipeFormIn
from pourover_backend.app.services import data_stores as store
from pourover_backend.app.services.recipe_scheduler import create_custom_recipe, recipe_to_form

logger = logging.getLogger("uvicorn.error")

# disk errors, or a recipes file we refuse to write over
_STORE_FAILURES = (OSError, store.CorruptStoreError)


def _not_found(recipe_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"recipe not found: {recipe_id}")


def _store_failed(what: str, e: Exception) -> HTTPException:
    logger.exception("recipe store: %s failed", what)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"{what} failed: {e}")


# ----------------------------------------------------------------------
# Lookup (custom recipes shadow presets with the same id)
# ----------------------------------------------------------------------

def find_recipe(recipe_id: str) -> Recipe:
    try:
        return store.get_recipe(recipe_id)
    except KeyError:
        pass
    except _STORE_FAILURES as e:
        raise _store_failed("read recipe", e)
    try:
        return presets_loader.get_preset(recipe_id)
    except KeyError:
        raise _not_found(recipe_id)


def list_presets() -> List[Recipe]:
    return presets_loader.list_presets()


def list_custom() -> List[Recipe]:
    try:
        return store.list_recipes()
    except _STORE_FAILURES as e:
        raise _store_failed("list recipes", e)


def form_for(recipe_id: str) -> RecipeFormIn:
    recipe = find_recipe(recipe_id)
    try:
        return recipe_to_form(recipe)
    except ValueError as e:
        # stored values outside today's form bounds
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"recipe cannot be edited: {e}")


# ----------------------------------------------------------------------
# Writes
# ----------------------------------------------------------------------

def _build(form: RecipeFormIn, recipe_id: str | None = None) -> Recipe:
    try:
        return create_custom_recipe(form, recipe_id=recipe_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"invalid recipe: {e}")


def create_from_form(form: RecipeFormIn) -> Recipe:
    recipe = _build(form)
    try:
        return store.create_recipe(recipe)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except _STORE_FAILURES as e:
        raise _store_failed("create recipe", e)


def update_from_form(recipe_id: str, form: RecipeFormIn) -> Recipe:
    recipe = _build(form, recipe_id=recipe_id)
    try:
        return store.update_recipe(recipe_id, recipe)
    except KeyError:
        raise _not_found(recipe_id)
    except _STORE_FAILURES as e:
        raise _store_failed("update recipe", e)


def delete_one(recipe_id: str) -> Dict[str, Any]:
    try:
        removed = store.delete_recipe(recipe_id)
    except _STORE_FAILURES as e:
        raise _store_failed("delete recipe", e)
    if not removed:
        raise _not_found(recipe_id)
    return {"ok": True, "deleted": recipe_id}


def delete_all() -> Dict[str, Any]:
    try:
        return {"ok": True, "deleted": store.delete_all_recipes()}
    except _STORE_FAILURES as e:
        raise _store_failed("delete recipes", e)


def import_any(payload: Any) -> Dict[str, Any]:
    try:
        return store.import_recipes(payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"import failed: {e}")
    except _STORE_FAILURES as e:
        raise _store_failed("import recipes", e)


def export_all() -> Dict[str, Any]:
    try:
        return store.export_recipes()
    except _STORE_FAILURES as e:
        raise _store_failed("export recipes", e)
