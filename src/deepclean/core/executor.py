"""Deletion of scanned folders."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from deepclean.models.clean_result import CleanResult
from deepclean.utils import dir_size

log = logging.getLogger(__name__)

ProgressCallback = Callable[[Path, str], None]  # (path, status)


def delete_folders(
    paths: list[Path],
    on_progress: ProgressCallback | None = None,
) -> CleanResult:
    """Delete each folder in *paths*, in order.

    A failure on one folder is recorded and the batch moves on to the
    next. Freed bytes only count folders that were actually removed.

    Args:
        paths: Folders to remove, typically ``ScanResult.matches``.
        on_progress: Optional callback fired after each folder with one of
            ``"deleted"``, ``"access_denied"``, ``"io_error"`` or ``"error"``.

    Returns:
        CleanResult with deleted paths, freed bytes and errors.
    """
    result = CleanResult()

    for path in paths:
        status = _delete_one(path, result)
        if on_progress:
            on_progress(path, status)

    log.info(
        "Deleted %d folder(s), freed %d bytes, %d error(s)",
        result.deleted_folders,
        result.freed_bytes,
        len(result.errors),
    )
    return result


def _delete_one(path: Path, result: CleanResult) -> str:
    size = dir_size(path)
    try:
        shutil.rmtree(path)
    except PermissionError:
        result.errors.append(f"Access denied (may require elevation): {path}")
        return "access_denied"
    except OSError as e:
        # Usually a file held open by another process
        result.errors.append(f"I/O error (possibly locked files): {path} - {e}")
        return "io_error"
    except Exception as e:
        log.exception("Unexpected failure deleting %s", path)
        result.errors.append(f"Error deleting {path}: {e}")
        return "error"

    result.deleted.append(path)
    result.freed_bytes += size
    log.debug("Deleted %s (%d bytes)", path, size)
    return "deleted"
