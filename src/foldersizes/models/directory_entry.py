"""Directory entry dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Directory discovered during enumeration."""

    path: str
    is_system: bool = False
