from __future__ import annotations

import json
import os
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from pourover_backend.app.config.paths import get_data_dir
from pourover_backend.app.schemas import Recipe
from pourover_backend.app.services.recipe_scheduler import strip_total_from_instructions
from pourover_backend.app.utils.log import get_logger
from .io_utils import read_json, write_json

log = get_logger("pourover.recipes_store")

_IO_LOCK = RLock()
DOC_VERSION = 1
INSTRUCTIONS_MIGRATION = "instructions_v1"


class CorruptStoreError(RuntimeError):
    """The recipes file exists but is not a recipes document. It is never overwritten."""


def recipes_path() -> Path:
    """
    Resolved per call so tests (and a running dev server) can repoint the store
    with POUROVER_RECIPES_PATH or DATA_DIR.
    """
    override = (os.getenv("POUROVER_RECIPES_PATH") or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    base = (os.getenv("DATA_DIR") or "").strip()
    root = Path(base).expanduser().resolve() if base else get_data_dir()
    return root / "recipes" / "custom_recipes.json"

def _dump(recipe: Recipe) -> Dict[str, Any]:
    return recipe.model_dump(mode="json", by_alias=True)

def _parse_items(items: Any) -> Tuple[List[Recipe], List[Any]]:
    """Split raw records into valid recipes and the records that failed validation."""
    valid: List[Recipe] = []
    invalid: List[Any] = []
    if not isinstance(items, list):
        return valid, invalid
    for raw in items:
        try:
            valid.append(Recipe.model_validate(raw))
        except ValidationError as e:
            rid = raw.get("id") if isinstance(raw, dict) else None
            log.warning("Skip bad recipe record %s: %s", rid, e.error_count())
            invalid.append(raw)
    return valid, invalid

def _empty_doc() -> Dict[str, Any]:
    return {"version": DOC_VERSION, "migrations": {}, "recipes": [], "invalid": []}

def _load(*, for_write: bool = False) -> Dict[str, Any]:
    """
    Accepts the canonical document or a bare list (a browser customRecipes
    export). Runs the instruction migration once and persists the result.

    Records that fail validation ride along in "invalid" and are written back
    untouched. A file that is not JSON, or not shaped like a recipes document,
    reads as empty and is never written over: writers get CorruptStoreError.
    Read errors (OSError) propagate.
    """
    with _IO_LOCK:
        path = recipes_path()
        try:
            raw = read_json(path, default={})
        except json.JSONDecodeError as e:
            log.warning("Recipes file %s is not valid JSON: %s", path, e)
            raw = None
        if isinstance(raw, list):
            raw = {"items": raw}
        if not isinstance(raw, dict) or (raw and not isinstance(raw.get("items"), list)):
            if for_write:
                raise CorruptStoreError(f"recipes file is unreadable, not overwriting it: {path}")
            log.warning("Serving no custom recipes until %s is repaired", path)
            return _empty_doc()

        recipes, invalid = _parse_items(raw.get("items"))
        migrations = dict(raw.get("migrations") or {})
        doc = {"version": DOC_VERSION, "migrations": migrations, "recipes": recipes, "invalid": invalid}

        if not migrations.get(INSTRUCTIONS_MIGRATION):
            doc["recipes"] = [strip_total_from_instructions(r) for r in recipes]
            migrations[INSTRUCTIONS_MIGRATION] = True
            if path.exists():
                log.info("Ran recipe instruction migration on %s", path)
                _save(doc)

        return doc

def _save(doc: Dict[str, Any]) -> None:
    with _IO_LOCK:
        recipes = doc.get("recipes") or []
        ids = {r.id for r in recipes}
        # an invalid record is dropped only once a valid recipe takes over its id
        kept = [
            raw for raw in doc.get("invalid") or []
            if not (isinstance(raw, dict) and raw.get("id") in ids)
        ]
        write_json(recipes_path(), {
            "version": DOC_VERSION,
            "migrations": doc.get("migrations") or {},
            "items": [_dump(r) for r in recipes] + kept,
        })

def _index_of(recipes: List[Recipe], recipe_id: str) -> Optional[int]:
    for i, r in enumerate(recipes):
        if r.id == recipe_id:
            return i
    return None

def list_recipes() -> List[Recipe]:
    return list(_load()["recipes"])

def get_recipe(recipe_id: str) -> Recipe:
    for r in _load()["recipes"]:
        if r.id == recipe_id:
            return r
    raise KeyError(f"recipe not found: {recipe_id}")

def create_recipe(recipe: Recipe) -> Recipe:
    with _IO_LOCK:
        doc = _load(for_write=True)
        if _index_of(doc["recipes"], recipe.id) is not None:
            raise ValueError(f"recipe id already exists: {recipe.id}")
        doc["recipes"].append(recipe)
        _save(doc)
    return recipe

def update_recipe(recipe_id: str, recipe: Recipe) -> Recipe:
    """Replace a stored recipe in place; position in the list is kept."""
    with _IO_LOCK:
        doc = _load(for_write=True)
        i = _index_of(doc["recipes"], recipe_id)
        if i is None:
            raise KeyError(f"recipe not found: {recipe_id}")
        if recipe.id != recipe_id:
            recipe = recipe.model_copy(update={"id": recipe_id})
        doc["recipes"][i] = recipe
        _save(doc)
    return recipe

def delete_recipe(recipe_id: str) -> bool:
    """Returns True if removed, False if not found."""
    with _IO_LOCK:
        doc = _load(for_write=True)
        i = _index_of(doc["recipes"], recipe_id)
        if i is None:
            return False
        del doc["recipes"][i]
        _save(doc)
    return True

def delete_all_recipes() -> int:
    """Clears the store, records that failed validation included. Returns how many were removed."""
    with _IO_LOCK:
        doc = _load(for_write=True)
        n = len(doc["recipes"]) + len(doc["invalid"])
        doc["recipes"] = []
        doc["invalid"] = []
        _save(doc)
    return n

def import_recipes(payload: Any) -> Dict[str, Any]:
    """
    Bulk import of a browser export: {"items": [...]}, {"recipes": [...]} or a
    bare list. Existing ids are replaced, new ids appended.
    """
    if isinstance(payload, dict):
        payload = payload.get("items") if "items" in payload else payload.get("recipes")
    if not isinstance(payload, list):
        raise ValueError("payload must be a list of recipes or {items: [...]}")

    valid, rejected = _parse_items(payload)
    incoming = [strip_total_from_instructions(r) for r in valid]
    added = updated = 0
    with _IO_LOCK:
        doc = _load(for_write=True)
        for r in incoming:
            i = _index_of(doc["recipes"], r.id)
            if i is None:
                doc["recipes"].append(r)
                added += 1
            else:
                doc["recipes"][i] = r
                updated += 1
        _save(doc)
    return {"ok": True, "added": added, "updated": updated, "skipped": len(rejected)}

def export_recipes() -> Dict[str, Any]:
    recipes = list_recipes()
    return {"version": DOC_VERSION, "count": len(recipes), "items": [_dump(r) for r in recipes]}
