# pourover_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# DB, schedule defaults and misc settings live in manifest.py
from .manifest import (
    DB_URL,
    APP_ENV,
    DEBUG_MODE,
    CORS_ORIGINS,
    BLOOM_DURATION_S,
    POUR_DURATION_S,
    DRAWDOWN_WINDOW_S,
    POUR_RAMP_S,
    DEFAULT_COFFEE_G,
    DEFAULT_WATER_G,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    DATA_DIR,
    PRESETS_DIR,
    resolve_presets_file,
)

__all__ = [
    # manifest
    "DB_URL",
    "APP_ENV",
    "DEBUG_MODE",
    "CORS_ORIGINS",
    "BLOOM_DURATION_S",
    "POUR_DURATION_S",
    "DRAWDOWN_WINDOW_S",
    "POUR_RAMP_S",
    "DEFAULT_COFFEE_G",
    "DEFAULT_WATER_G",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "DATA_DIR",
    "PRESETS_DIR",
    "resolve_presets_file",
]
