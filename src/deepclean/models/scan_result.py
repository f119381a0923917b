"""Scan result dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ScanResult:
    """Folders found under a root, in depth-first pre-order.

    Matched folders are never descended into, so nothing listed in
    ``matches`` is an ancestor of another entry.
    """

    root: Path
    matches: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
