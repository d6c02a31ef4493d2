# pourover_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

    from pourover_backend.app.services.data_stores import (
        read_json, atomic_write, write_json,
        list_recipes, get_recipe, create_recipe, update_recipe, delete_recipe,
    )
"""

from __future__ import annotations

# ---- Low-level IO helpers ----
from .io_utils import read_json, atomic_write, write_json  # noqa: F401

# ---- Custom recipes store ----
from .recipes import (  # noqa: F401
    CorruptStoreError,
    recipes_path,
    list_recipes,
    get_recipe,
    create_recipe,
    update_recipe,
    delete_recipe,
    delete_all_recipes,
    import_recipes,
    export_recipes,
)

__all__ = [
    # io_utils
    "read_json", "atomic_write", "write_json",
    # recipes
    "CorruptStoreError", "recipes_path", "list_recipes", "get_recipe", "create_recipe", "update_recipe",
    "delete_recipe", "delete_all_recipes", "import_recipes", "export_recipes",
]
