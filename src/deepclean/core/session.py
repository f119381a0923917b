"""Run lifecycle: scan, report or confirm, delete."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from deepclean.core import executor, scanner
from deepclean.core.executor import ProgressCallback
from deepclean.core.scanner import ErrorCallback
from deepclean.models.clean_result import CleanResult
from deepclean.models.config import CleanConfig
from deepclean.models.scan_result import ScanResult

log = logging.getLogger(__name__)

AFFIRMATIVE = frozenset({"y", "yes"})


class SessionState(Enum):
    NEW = "new"
    SCANNED = "scanned"
    REPORTED = "reported"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CANCELLED = "cancelled"
    CONFIRMED = "confirmed"
    DELETING = "deleting"
    DONE = "done"


class SessionStateError(Exception):
    """Raised when a session operation is called in the wrong state."""


def is_affirmative(response: str | None) -> bool:
    """Check a confirmation answer; only 'y' or 'yes' (any case) count."""
    if response is None:
        return False
    return response.strip().lower() in AFFIRMATIVE


class CleanSession:
    """One cleaning run rooted at a directory.

    Holds the shared error log (scan errors first, then delete errors),
    the scan and clean results, and decides the process exit code.

    States: NEW -> SCANNED -> REPORTED (dry run)
                           -> AWAITING_CONFIRMATION -> CANCELLED | CONFIRMED
                           -> DELETING -> DONE
    """

    def __init__(self, root: Path | str, config: CleanConfig) -> None:
        self.root = Path(root)
        self.config = config
        self.state = SessionState.NEW
        self.errors: list[str] = []
        self.scan_result: ScanResult | None = None
        self.clean_result: CleanResult | None = None

    @property
    def matches(self) -> list[Path]:
        return self.scan_result.matches if self.scan_result else []

    @property
    def needs_confirmation(self) -> bool:
        """Whether the operator must be asked before deleting."""
        return not self.config.dry_run and not self.config.auto_confirm

    @property
    def exit_code(self) -> int:
        """1 if a deletion pass ran and the error log is non-empty, else 0.

        Nothing found, dry run and cancellation always exit 0, even when
        the scan recorded errors.
        """
        if self.state is SessionState.DONE and self.errors:
            return 1
        return 0

    def scan(self, on_error: ErrorCallback | None = None) -> ScanResult:
        self._require(SessionState.NEW)
        self.scan_result = scanner.scan(self.root, on_error=on_error)
        self.errors.extend(self.scan_result.errors)
        self.state = SessionState.SCANNED
        return self.scan_result

    def report(self) -> None:
        """Finish a dry run without touching the filesystem."""
        self._require(SessionState.SCANNED)
        if not self.config.dry_run:
            raise SessionStateError("report() is only valid for a dry run")
        self.state = SessionState.REPORTED

    def confirm(self, response: str | None) -> bool:
        """Apply the operator's answer to the confirmation prompt.

        Returns:
            True if deletion may proceed, False if the run was cancelled.
        """
        self._require(SessionState.SCANNED)
        if self.config.dry_run:
            raise SessionStateError("confirm() is not valid for a dry run")
        self.state = SessionState.AWAITING_CONFIRMATION

        if is_affirmative(response):
            self.state = SessionState.CONFIRMED
            return True

        log.info("Cancelled by operator (response: %r)", response)
        self.state = SessionState.CANCELLED
        return False

    def delete(self, on_progress: ProgressCallback | None = None) -> CleanResult:
        """Delete every match, collecting stats and errors."""
        if self.config.dry_run:
            raise SessionStateError("delete() is not valid for a dry run")
        if self.state is SessionState.SCANNED and not self.config.auto_confirm:
            raise SessionStateError("Deletion requires confirmation")
        self._require(SessionState.SCANNED, SessionState.CONFIRMED)

        self.state = SessionState.DELETING
        self.clean_result = executor.delete_folders(self.matches, on_progress=on_progress)
        self.errors.extend(self.clean_result.errors)
        self.state = SessionState.DONE
        return self.clean_result

    def _require(self, *states: SessionState) -> None:
        if self.state not in states:
            expected = ", ".join(s.value for s in states)
            raise SessionStateError(f"Invalid state {self.state.value!r}, expected {expected}")
