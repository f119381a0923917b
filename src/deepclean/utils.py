"""Shared utility functions."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

_UNITS = ("B", "KB", "MB", "GB", "TB")


def dir_size(path: Path | str) -> int:
    """Calculate total size of a directory tree.

    Best effort: files that cannot be stat'ed and directories that cannot
    be listed count as zero. Symlinks are not followed.
    """
    total = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                        elif entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                    except OSError:
                        log.debug("Cannot stat: %s", entry.path)
        except OSError:
            log.debug("Cannot list: %s", current)
    return total


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string (1024-based, up to 2 decimals)."""
    value = float(size_bytes)
    order = 0
    while value >= 1024 and order < len(_UNITS) - 1:
        value /= 1024
        order += 1
    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {_UNITS[order]}"
