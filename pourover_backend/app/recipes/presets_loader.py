# pourover_backend/app/recipes/presets_loader.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from pourover_backend.app.config.paths import resolve_presets_file
from pourover_backend.app.schemas import Recipe, RecipeFormIn
from pourover_backend.app.services.recipe_scheduler import create_custom_recipe
from pourover_backend.app.utils.log import get_logger

log = get_logger("pourover.presets_loader")

PRESETS_FILE = "default_recipes.yaml"

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _load_yaml_from(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)

def _entries(doc: Any) -> List[Dict[str, Any]]:
    if isinstance(doc, dict):
        doc = doc.get("recipes")
    if not isinstance(doc, list):
        return []
    return [e for e in doc if isinstance(e, dict)]

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
@lru_cache(maxsize=1)
def load_presets(name: str = PRESETS_FILE) -> tuple[Recipe, ...]:
    """
    Read preset brew forms and expand them into full recipes.
    A missing file yields no presets; a bad entry is logged and skipped.
    """
    path = resolve_presets_file(name)
    if not path.exists():
        log.warning("Presets file not found: %s", path)
        return ()

    try:
        doc = _load_yaml_from(path)
    except yaml.YAMLError as e:
        log.error("Could not parse presets %s: %s", path, e)
        return ()

    out: List[Recipe] = []
    for entry in _entries(doc):
        try:
            form = RecipeFormIn.model_validate(entry)
            out.append(create_custom_recipe(form, recipe_id=entry.get("id")))
        except (ValidationError, ValueError) as e:
            log.warning("Skip bad preset %s: %s", entry.get("id") or entry.get("name"), e)
    log.info("Loaded %d preset recipes from %s", len(out), path.name)
    return tuple(out)

def list_presets() -> List[Recipe]:
    return list(load_presets())

def get_preset(recipe_id: str) -> Recipe:
    for r in load_presets():
        if r.id == recipe_id:
            return r
    raise KeyError(f"preset not found: {recipe_id}")
