# pourover_backend/app/config/manifest.py
from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .paths import REPO_ROOT

# ---- DB settings and environment mode ----
_DEFAULT_SQLITE_PATH: Path = (REPO_ROOT / "pourover.sqlite3").resolve()
_env_db_url = os.getenv("DATABASE_URL", "").strip()

# Exported DB_URL (used by db/session.py)
DB_URL: str = _env_db_url or f"sqlite:///{_DEFAULT_SQLITE_PATH}"

APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")

# Vite/Next dev servers by default; comma separated override
CORS_ORIGINS: List[str] = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if o.strip()
]

# ---- Schedule defaults (seconds) ----
BLOOM_DURATION_S: int = int(os.getenv("POUROVER_BLOOM_DURATION_S", "45"))
POUR_DURATION_S: int = int(os.getenv("POUROVER_POUR_DURATION_S", "30"))

# Timer display: expected drawdown length after the last step starts,
# and how long a pour takes to go in.
DRAWDOWN_WINDOW_S: int = int(os.getenv("POUROVER_DRAWDOWN_WINDOW_S", "60"))
POUR_RAMP_S: int = int(os.getenv("POUROVER_POUR_RAMP_S", "10"))

# Fallback weights when the form field driving the ratio is empty
DEFAULT_COFFEE_G: int = 20
DEFAULT_WATER_G: int = 320

__all__ = [
    "DB_URL", "APP_ENV", "DEBUG_MODE", "CORS_ORIGINS",
    "BLOOM_DURATION_S", "POUR_DURATION_S", "DRAWDOWN_WINDOW_S", "POUR_RAMP_S",
    "DEFAULT_COFFEE_G", "DEFAULT_WATER_G",
]
