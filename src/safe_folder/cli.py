"""CLI commands using Typer."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from safe_folder.context import AppContext

import typer
from rich.console import Console

from safe_folder import __version__
from safe_folder.audit import FileAuditLogger
from safe_folder.config import Settings, load_settings
from safe_folder.console import ConsoleUI, console
from safe_folder.context import create_context
from safe_folder.errors import AuditLogError, ConfigError, OperationError

app = typer.Typer(
    name="safe-folder",
    help="Back up, retrieve and delete files with path-traversal checks and an audit trail",
    no_args_is_help=True,
)

ui = ConsoleUI(console, error_console=Console(stderr=True))

# Exit status click uses for usage errors
CLICK_USAGE_ERROR = 2


@dataclass
class GlobalOptions:
    """Options given before the command name."""

    log_file: Path | None = None
    verbose: bool = False


options = GlobalOptions()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"safe-folder v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", "-l", help="Audit log file (default: ./logfile.txt)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Print debug diagnostics to stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Back up, retrieve and delete files with an audit trail."""
    options.log_file = log_file
    options.verbose = verbose


def _configure_logging(level: str) -> None:
    """Send diagnostics to stderr so they never mix with retrieved content."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if options.verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def _load_settings() -> Settings:
    """Load settings and apply global CLI overrides.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        ui.show_error(str(e))
        raise typer.Exit(1) from e

    if options.log_file is not None:
        settings = settings.model_copy(update={"log_file": options.log_file.absolute()})
    _configure_logging(settings.log_level)
    return settings


def _build_context() -> AppContext:
    """Create the production context.

    Raises:
        typer.Exit: If the configuration is invalid or the audit log cannot
            be opened. No operation runs without an audit log.
    """
    settings = _load_settings()
    try:
        return create_context(settings)
    except AuditLogError as e:
        ui.show_error(f"Audit log unavailable: {e}")
        raise typer.Exit(1) from e


def _abort(error: OperationError | AuditLogError) -> typer.Exit:
    """Report a failure and build the exit to raise."""
    if isinstance(error, AuditLogError):
        ui.show_error(f"Audit log unavailable: {error}")
    else:
        ui.show_error(str(error))
    return typer.Exit(1)


# ============================================================================
# File Commands
# ============================================================================


@app.command()
def backup(
    source_file: Annotated[str, typer.Argument(help="File to back up")],
    backup_directory: Annotated[str, typer.Argument(help="Existing directory to copy into")],
    _context=None,
) -> None:
    """Copy a file into a backup directory (overwrites a same-named backup)."""
    ctx = _context or _build_context()

    try:
        result = ctx.backup.execute(source_file, backup_directory)
    except (OperationError, AuditLogError) as e:
        raise _abort(e) from e

    ui.show_success(f"Backup successful: {result.destination}")


@app.command()
def retrieve(
    backup_file: Annotated[str, typer.Argument(help="Backup file to read")],
    _context=None,
) -> None:
    """Print the content of a backup file."""
    ctx = _context or _build_context()

    try:
        result = ctx.retrieve.execute(backup_file)
    except (OperationError, AuditLogError) as e:
        raise _abort(e) from e

    ui.show_content(result.size, result.text)


@app.command()
def delete(
    file_path: Annotated[str, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a file after typing 'yes' to confirm."""
    ctx = _context or _build_context()

    try:
        result = ctx.delete.execute(file_path)
    except (OperationError, AuditLogError) as e:
        raise _abort(e) from e

    if result.cancelled:
        ui.show_info("Delete operation cancelled.")
    else:
        ui.show_success("File deleted successfully")


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command()
def history(
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", min=1, help="Show only the last N entries")
    ] = None,
    _context=None,
) -> None:
    """Show the audit log.

    Read-only: a missing log file is reported as empty and is not created.
    """
    audit = _context.audit if _context else FileAuditLogger(_load_settings().log_file)

    try:
        entries = audit.entries()
    except AuditLogError as e:
        raise _abort(e) from e

    if limit is not None:
        entries = entries[-limit:]
    ui.show_history(entries)


@app.command("config")
def config_show(
    _settings=None,
) -> None:
    """Show effective configuration."""
    settings = _settings or _load_settings()
    ui.show_settings(settings)


def run() -> None:
    """Console script entry point.

    Same as ``app()`` except that usage errors exit with status 1.
    """
    try:
        app()
    except SystemExit as e:
        if e.code == CLICK_USAGE_ERROR:
            raise SystemExit(1) from None
        raise


if __name__ == "__main__":
    run()
