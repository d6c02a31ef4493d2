"""
Central path resolution for the pour-over backend.

Env overrides:
    DATA_DIR
    POUROVER_PRESETS_DIR

Defaults:
    <repo_root>/data
    <repo_root>/pourover_backend/app/recipes/presets
"""
from __future__ import annotations

import os
from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "pourover_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = REPO_ROOT / "pourover_backend" / "app"

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_data = REPO_ROOT / "data"
_default_presets = APP_ROOT / "recipes" / "presets"

DATA_DIR: Path = (_env_path("DATA_DIR") or _default_data).resolve()
PRESETS_DIR: Path = (_env_path("POUROVER_PRESETS_DIR") or _default_presets).resolve()

DATA_DIR.mkdir(parents=True, exist_ok=True)

def get_data_dir() -> Path: return DATA_DIR
def get_presets_dir() -> Path: return PRESETS_DIR

def resolve_presets_file(name: str) -> Path:
    """Return absolute path under the presets dir for a given filename."""
    return PRESETS_DIR / name

__all__ = [
    "DATA_DIR", "PRESETS_DIR", "REPO_ROOT", "APP_ROOT",
    "get_data_dir", "get_presets_dir", "resolve_presets_file",
]
