from __future__ import annotations
import re

__all__ = ["format_time", "parse_time"]

_MMSS = re.compile(r"^\s*(\d+)\s*:\s*(\d{2})\s*$")
_SECONDS = re.compile(r"^\s*(\d+)\s*$")


def format_time(seconds: int) -> str:
    """150 -> "2:30". Minutes are not capped at 59."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def parse_time(text: str) -> int:
    """
    "2:30" -> 150. A bare number is taken as seconds ("90" -> 90).
    Raises ValueError for anything else.
    """
    m = _MMSS.match(text or "")
    if m:
        minutes, secs = int(m.group(1)), int(m.group(2))
        if secs >= 60:
            raise ValueError(f"seconds part out of range in {text!r}")
        return minutes * 60 + secs
    m = _SECONDS.match(text or "")
    if m:
        return int(m.group(1))
    raise ValueError(f"expected m:ss, got {text!r}")
