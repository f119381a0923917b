"""CLI interface for DeepClean."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from deepclean.core.session import CleanSession
from deepclean.models.config import CleanConfig
from deepclean.utils import bytes_to_human

log = logging.getLogger(__name__)

_BANNER = "DeepClean - Recursively delete bin and obj folders"

_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "token_normalize_func": str.lower,
}

_FAILURE_LABELS = {
    "access_denied": "Access denied",
    "io_error": "I/O error",
    "error": "Error",
}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command(context_settings=_CONTEXT_SETTINGS)
@click.option("-d", "--dry-run", "dry_run", is_flag=True, help="Show what would be deleted without actually deleting")
@click.option("-y", "--yes", "auto_confirm", is_flag=True, help="Skip confirmation prompt and delete automatically")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(ctx: click.Context, dry_run: bool, auto_confirm: bool, verbose: int) -> None:
    """Recursively find and delete all 'bin' and 'obj' folders from the
    current directory downwards. Useful for cleaning up .NET projects.
    """
    _setup_logging(verbose)

    click.echo(_BANNER)
    click.echo("=" * len(_BANNER))
    click.echo()

    for arg in ctx.args:
        click.echo(f"Warning: Unknown argument '{click.format_filename(arg)}' ignored.")

    config = CleanConfig(dry_run=dry_run, auto_confirm=auto_confirm)

    try:
        root = Path.cwd()
        click.echo(f"Starting directory: {click.format_filename(root)}")
        click.echo()
        code = _run(CleanSession(root, config))
    except Exception as exc:
        log.debug("Run aborted", exc_info=True)
        click.echo(f"Fatal error: {click.format_filename(str(exc))}", err=True)
        sys.exit(1)

    sys.exit(code)


def _run(session: CleanSession) -> int:
    """Drive one session through scan, report/confirm, delete and summary."""
    scan_result = session.scan(on_error=_echo_scan_error)

    if not scan_result.matches:
        click.echo("No bin or obj folders found.")
        return session.exit_code

    click.echo(f"Found {len(scan_result.matches)} folder(s) to delete:")
    for folder in scan_result.matches:
        click.echo(f"  - {click.format_filename(folder)}")
    click.echo()

    if session.config.dry_run:
        session.report()
        click.echo("DRY RUN MODE - No folders will be deleted.")
        return session.exit_code

    if session.needs_confirmation and not session.confirm(_ask_confirmation()):
        click.echo("Operation cancelled.")
        return session.exit_code

    click.echo("Deleting folders...")
    result = session.delete(on_progress=_echo_progress)

    click.echo()
    click.echo("Summary:")
    click.echo(f"  Deleted: {result.deleted_folders} folder(s)")
    click.echo(f"  Freed space: {click.style(bytes_to_human(result.freed_bytes), fg='green', bold=True)}")

    if session.errors:
        click.echo()
        click.echo("Errors encountered:")
        for error in session.errors:
            click.echo(f"  - {click.format_filename(error)}")

    return session.exit_code


def _ask_confirmation() -> str | None:
    """Prompt the operator; None means no answer was given (EOF or Ctrl-C)."""
    try:
        return click.prompt("Do you want to delete these folders? (y/n)", default="", show_default=False)
    except click.Abort:
        click.echo()
        return None


def _echo_scan_error(message: str) -> None:
    click.echo(f"  {click.style('!', fg='yellow')} {click.format_filename(message)}")


def _echo_progress(path: Path, status: str) -> None:
    if status == "deleted":
        click.echo(f"  {click.style('✓', fg='green')} Deleted: {click.format_filename(path)}")
    else:
        label = _FAILURE_LABELS.get(status, "Error")
        click.echo(f"  {click.style('✗', fg='red')} {label}: {click.format_filename(path)}")
