# deftree:header:start
#
#   project      : DefTree
#   file         : errors.py
#   file_relpath : src/deftree/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Exceptions for the DefTree CLI.

Commands translate library errors (`deftree.core.errors`) into these exceptions,
each carrying a sysexits-aligned exit code (see `ExitCode`).

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from deftree.cli.exit_codes import ExitCode


class DefTreeCliError(click.ClickException):
    """Base class for all DefTree CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class DefTreeUsageError(DefTreeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DefTreeDataError(DefTreeCliError):
    """Error for trees that cannot be parsed or do not resolve."""

    exit_code = ExitCode.DATA_ERROR


class DefTreeFileNotFoundError(DefTreeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DefTreeIOError(DefTreeCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class DefTreeConfigError(DefTreeCliError):
    """Error for malformed schema documents."""

    exit_code = ExitCode.CONFIG_ERROR


class DefTreeUnexpectedError(DefTreeCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
