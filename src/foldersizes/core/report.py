"""Top-K selection and report rendering."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from foldersizes.models.size_record import SizeRecord
from foldersizes.utils import display_path

log = logging.getLogger(__name__)

DEFAULT_FIRST = 10

_PATH_HEADER = "Path"
_SIZE_HEADER = "Size (MB)"


class ReportError(Exception):
    """Raised when the report file cannot be written."""


def select_top(records: list[SizeRecord], first: int = DEFAULT_FIRST) -> list[SizeRecord]:
    """Return the *first* largest records, biggest first.

    Equal sizes are ordered by path so repeated runs print the same table.
    """
    ranked = sorted(records, key=lambda r: (-r.size_bytes, r.path))
    return ranked[: max(first, 0)]


def render_table(records: list[SizeRecord]) -> str:
    """Render records as a two-column, column-aligned text table."""
    paths = [display_path(r.path) for r in records]
    sizes = [f"{r.size_mb:.2f}" for r in records]
    path_width = max([len(_PATH_HEADER)] + [len(p) for p in paths])
    size_width = max([len(_SIZE_HEADER)] + [len(s) for s in sizes])

    lines = [
        f"{_PATH_HEADER:<{path_width}}  {_SIZE_HEADER:>{size_width}}",
        f"{'-' * len(_PATH_HEADER):<{path_width}}  {'-' * len(_SIZE_HEADER):>{size_width}}",
    ]
    for path, size in zip(paths, sizes):
        lines.append(f"{path:<{path_width}}  {size:>{size_width}}")
    return "\n".join(lines) + "\n"


def write_report(path: str | os.PathLike[str], text: str) -> Path:
    """Write *text* to *path* as UTF-8, replacing any existing file.

    Raises:
        ReportError: If the file cannot be written.
    """
    p = Path(path)
    try:
        p.write_text(text, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise ReportError(f"Could not write report to {p}: {exc}") from exc
    log.info("Report written to %s", p)
    return p
