"""Cleaning result dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class CleanResult:
    """Result of a deletion batch."""

    deleted: list[Path] = field(default_factory=list)
    freed_bytes: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def deleted_folders(self) -> int:
        return len(self.deleted)
