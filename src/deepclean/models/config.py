"""Run configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CleanConfig:
    """Options for a single run, fixed once the command line is parsed."""

    dry_run: bool = False
    auto_confirm: bool = False
