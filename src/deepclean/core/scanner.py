"""Depth-first search for bin and obj folders."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Callable

from deepclean.models.scan_result import ScanResult

log = logging.getLogger(__name__)

TARGET_NAMES = frozenset({"bin", "obj"})

ErrorCallback = Callable[[str], None]


def is_target(path: Path) -> bool:
    """Whether *path* is named bin or obj, ignoring case."""
    return path.name.lower() in TARGET_NAMES


def scan(root: Path | str, on_error: ErrorCallback | None = None) -> ScanResult:
    """Find every bin/obj folder below *root*.

    The walk is depth-first pre-order with siblings visited in name order.
    Matched folders are recorded and not descended into. The root itself is
    never matched. Listing failures are recorded on the result and only
    abandon the affected branch.

    Args:
        root: Directory to start from.
        on_error: Optional callback fired with each error message as it
            is recorded.

    Returns:
        ScanResult with the matched paths and any errors.
    """
    root = Path(root).absolute()
    result = ScanResult(root=root)

    def _record(message: str) -> None:
        log.debug("Scan error: %s", message)
        result.errors.append(message)
        if on_error:
            on_error(message)

    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        if current != root and is_target(current):
            log.debug("Matched: %s", current)
            result.matches.append(current)
            continue

        try:
            children = _list_subdirs(current)
        except PermissionError:
            _record(f"Access denied: {current}")
            continue
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                _record(f"Path too long: {current}")
            else:
                _record(f"Error accessing {current}: {e.strerror or e}")
            continue

        # Reversed so the first child by name is popped first
        stack.extend(reversed(children))

    log.info("Scanned %s: %d match(es), %d error(s)", root, len(result.matches), len(result.errors))
    return result


def _list_subdirs(path: Path) -> list[Path]:
    """Return the real (non-symlink) subdirectories of *path*, sorted by name."""
    subdirs: list[Path] = []
    with os.scandir(path) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(Path(entry.path))
    subdirs.sort(key=lambda p: p.name)
    return subdirs
