"""Directory size aggregation with progress reporting."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from foldersizes.models.directory_entry import DirectoryEntry
from foldersizes.models.size_record import SizeRecord
from foldersizes.utils import estimate_remaining

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Progress:
    """Snapshot emitted after each directory has been processed.

    ``record`` is None when the directory could not be sized.
    """

    path: str
    completed: int
    total: int
    elapsed: float
    eta: float
    record: SizeRecord | None = None


ProgressCallback = Callable[[Progress], None]


def directory_size(path: str | os.PathLike[str]) -> int:
    """Sum the size of every file below *path*.

    Hidden and system entries are counted. Files or subdirectories that
    cannot be read contribute nothing.

    Raises:
        OSError: If *path* itself cannot be listed.
    """
    total = 0
    with os.scandir(path) as it:
        stack = list(it)

    while stack:
        entry = stack.pop()
        try:
            if entry.is_file(follow_symlinks=False):
                total += entry.stat(follow_symlinks=False).st_size
            elif entry.is_dir(follow_symlinks=False):
                with os.scandir(entry.path) as it:
                    stack.extend(it)
        except OSError:
            log.debug("Cannot access: %s", entry.path)
    return total


def aggregate_sizes(
    entries: Iterable[DirectoryEntry],
    on_progress: ProgressCallback | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> list[SizeRecord]:
    """Compute a SizeRecord for each entry, in input order.

    Entries whose top-level directory cannot be read are skipped with a
    warning rather than recorded as empty.
    """
    entries = list(entries)
    total = len(entries)
    records: list[SizeRecord] = []
    started = clock()

    for completed, entry in enumerate(entries, 1):
        record = None
        try:
            record = SizeRecord(path=entry.path, size_bytes=directory_size(entry.path))
        except OSError as exc:
            log.warning("Cannot compute size of %s: %s", entry.path, exc)
        else:
            records.append(record)

        if on_progress:
            elapsed = clock() - started
            on_progress(
                Progress(
                    path=entry.path,
                    completed=completed,
                    total=total,
                    elapsed=elapsed,
                    eta=estimate_remaining(elapsed, completed, total),
                    record=record,
                )
            )

    log.info("Sized %d of %d directories", len(records), total)
    return records
