# deftree:header:start
#
#   project      : DefTree
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""CLI test helpers and shared input documents.

`run_cli()` invokes the Click group in-process with `click.testing.CliRunner`.
Program output (merged trees, shapes, diagnostics) is read from ``result.stdout``;
warnings and errors are written to ``result.stderr``.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from deftree.cli.exit_codes import ExitCode
from deftree.cli.main import cli
from tests.conftest import write_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

SCHEMA_TOML = """
[fields.name]
type = "string"

[fields.port]
type = "integer"
optional = true

[fields.notes]
type = "string"
optional = true
marker = "no_default"

[fields.server]
type = "object"
optional = true

[fields.server.fields.host]
type = "string"
optional = true

[fields.server.fields.tls]
type = "boolean"
optional = true
"""

DEFAULTS_TOML = """
port = 8080

[server]

[server_defaults]
host = "localhost"
tls = false
"""

CONFIG_TOML = """
name = "api"

[server]
tls = true
"""


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_inputs(tmp_path: Path, *, config: str = CONFIG_TOML) -> tuple[Path, Path, Path]:
    """Write the shared schema, defaults and ``config`` documents into ``tmp_path``.

    Returns:
        tuple[Path, Path, Path]: ``(schema, defaults, config)`` paths.
    """
    return (
        write_text(tmp_path / "app.schema.toml", SCHEMA_TOML),
        write_text(tmp_path / "app.defaults.toml", DEFAULTS_TOML),
        write_text(tmp_path / "app.toml", config),
    )


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    # Click's own usage errors exit with 2; DefTree's with 64.
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
