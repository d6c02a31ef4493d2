# pourover_backend/app/utils/io_guards.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from pourover_backend.app.config.paths import get_presets_dir

def _readonly_roots() -> set[Path]:
    return {get_presets_dir().resolve()}

def _is_under(path: Path, roots: Iterable[Path]) -> bool:
    p = path.resolve()
    for r in roots:
        try:
            p.relative_to(r)
            return True
        except ValueError:
            continue
    return False

def assert_writable(path: Path) -> None:
    """
    Raise an AssertionError if `path` is under the bundled presets dir.
    Call before any write.
    """
    if _is_under(path, _readonly_roots()):
        raise AssertionError(
            f"Attempted write under read-only presets directory: {path} "
            f"(presets={get_presets_dir()})"
        )
