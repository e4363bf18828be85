"""Depth-limited directory enumeration."""

from __future__ import annotations

import logging
import os
import stat
from typing import Callable

from foldersizes.models.directory_entry import DirectoryEntry

log = logging.getLogger(__name__)

VisitCallback = Callable[[str], None]  # (directory_path)


def is_system_directory(entry: os.DirEntry) -> bool:
    """Check whether the platform marks *entry* with the system attribute.

    Only filesystems exposing ``st_file_attributes`` (Windows) carry the
    flag; everywhere else no directory is a system directory.
    """
    try:
        attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_SYSTEM)


def enumerate_directories(
    root: str | os.PathLike[str],
    max_depth: int,
    include_system: bool = False,
    on_visit: VisitCallback | None = None,
) -> list[DirectoryEntry]:
    """Collect every directory below *root* within *max_depth* levels.

    Entries are returned in depth-first pre-order. *max_depth* is the
    remaining recursion budget: 0 yields nothing, 1 yields the immediate
    children of *root* only. Hidden directories are always included;
    system directories are pruned unless *include_system* is set.

    A directory that cannot be listed is reported as a warning and its
    subtree is skipped; the rest of the walk is unaffected.
    """
    entries: list[DirectoryEntry] = []
    # (entry, remaining depth below it); the root has no entry of its own
    stack: list[tuple[DirectoryEntry | None, str, int]] = [(None, os.fspath(root), max_depth)]

    while stack:
        entry, path, depth = stack.pop()
        if entry is not None:
            entries.append(entry)
        if depth <= 0:
            continue

        if on_visit:
            on_visit(path)
        log.debug("Listing %s (remaining depth %d)", path, depth)

        try:
            with os.scandir(path) as it:
                children = [
                    e for e in it
                    if e.is_dir(follow_symlinks=False)
                ]
        except OSError as exc:
            log.warning("Cannot list %s: %s", path, exc)
            continue

        pending = []
        for child in sorted(children, key=lambda e: e.name):
            system = is_system_directory(child)
            if system and not include_system:
                log.debug("Skipping system directory: %s", child.path)
                continue
            pending.append((DirectoryEntry(path=child.path, is_system=system), child.path, depth - 1))
        # reversed so the first child is popped next, keeping pre-order
        stack.extend(reversed(pending))
    return entries
