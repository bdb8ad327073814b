# deftree:header:start
#
#   project      : DefTree
#   file         : diagnostics.py
#   file_relpath : src/deftree/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Diagnostics support.

Validation of configuration trees does not stop at the first problem: it collects
`Diagnostic` records, each qualified with the dotted path of the offending field
(for example ``backend.environments[0].name``), and leaves it to the caller to
decide whether to raise, print, or ignore them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during validation.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticKind(Enum):
    """What a diagnostic is about."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_CHOICE = "invalid_choice"
    EMPTY_ARRAY = "empty_array"
    UNKNOWN_FIELD = "unknown_field"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a field path and a message."""

    level: DiagnosticLevel
    kind: DiagnosticKind
    path: str
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return a one-line, human-readable rendering of the diagnostic.

        Args:
            color (bool): Apply the severity color when True.

        Returns:
            str: ``"<level>: <path>: <message>"``.
        """
        text: str = f"{self.level.value}: {self.path}: {self.message}"
        return self.level.color(text) if color else text


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def errors_only(diags: Sequence[Diagnostic]) -> list[Diagnostic]:
    """Return the ERROR-level diagnostics of ``diags``, in order."""
    return [d for d in diags if d.level == DiagnosticLevel.ERROR]
