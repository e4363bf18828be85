"""Shared utility functions."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

# Remaining-depth budget used when the user asks for an unbounded scan.
UNBOUNDED_DEPTH = sys.maxsize

_UNBOUNDED_LITERALS = ("0", "max")
_MEGABYTE = 1 << 20
_TWO_PLACES = Decimal("0.01")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def normalize_depth(raw: str | int) -> int:
    """Translate a user-facing depth literal into a recursion budget.

    ``"0"`` and ``"max"`` both mean unbounded. Any other non-negative
    integer literal is returned as is.

    Raises:
        ValueError: If *raw* is neither a sentinel nor a non-negative integer.
    """
    text = str(raw).strip().lower()
    if text in _UNBOUNDED_LITERALS:
        return UNBOUNDED_DEPTH
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"Invalid depth {raw!r}: expected a non-negative integer, '0' or 'max'")
    return int(text)


def display_path(path: str) -> str:
    """Return *path* in a form that can always be encoded as UTF-8.

    Bytes that are not valid UTF-8 (kept by the OS layer as surrogate
    escapes) are shown as \\xNN sequences.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def bytes_to_megabytes(size_bytes: int) -> Decimal:
    """Convert a byte count to megabytes rounded half-up to two places."""
    return (Decimal(size_bytes) / _MEGABYTE).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def estimate_remaining(elapsed: float, completed: int, total: int) -> float:
    """Linear estimate of the seconds left after *completed* of *total* items."""
    if completed <= 0:
        return 0.0
    return elapsed / completed * (total - completed)


def default_output_name(now: datetime | None = None) -> str:
    """Return the default report filename, e.g. ``FolderSizes_20240131_235959.log``."""
    now = now or datetime.now()
    return f"FolderSizes_{now:%Y%m%d_%H%M%S}.log"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
