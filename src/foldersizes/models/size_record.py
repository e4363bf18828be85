"""Size record dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from foldersizes.utils import bytes_to_megabytes


@dataclass(frozen=True, slots=True)
class SizeRecord:
    """Aggregate size of one directory subtree.

    ``size_bytes`` is the sum of every readable file below ``path``;
    ``size_mb`` is the rounded megabyte value shown in reports.
    """

    path: str
    size_bytes: int

    @property
    def size_mb(self) -> Decimal:
        return bytes_to_megabytes(self.size_bytes)
