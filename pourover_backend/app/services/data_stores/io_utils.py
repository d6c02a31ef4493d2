# pourover_backend/app/services/data_stores/io_utils.py
from __future__ import annotations

import json, os, tempfile
from pathlib import Path
from typing import Any

from pourover_backend.app.utils.io_guards import assert_writable


def atomic_write(path: Path, text: str) -> None:
    """
    Atomic, guarded text write. Refuses to write under the presets dir.
    """
    assert_writable(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding="utf-8") as tf:
        tf.write(text)
        tmp = Path(tf.name)
    os.replace(tmp, path)

def write_json(path: Path, obj: Any) -> None:
    atomic_write(path, json.dumps(obj, ensure_ascii=False, indent=2))

def read_json(path: Path, default: Any):
    """
    JSON reader. Returns `default` if the file is missing or empty.
    OSError and json.JSONDecodeError go to the caller: a file that exists but
    cannot be read must not look like an empty one.
    """
    if not path.exists():
        return default
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return default
    return json.loads(raw)
