"""Foldersizes data models."""

from foldersizes.models.directory_entry import DirectoryEntry
from foldersizes.models.size_record import SizeRecord

__all__ = [
    "DirectoryEntry",
    "SizeRecord",
]
