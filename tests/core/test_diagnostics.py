# deftree:header:start
#
#   project      : DefTree
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Tests for diagnostic records and their aggregation."""

from __future__ import annotations

from deftree.core.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticLevel,
    compute_diagnostic_stats,
    errors_only,
)

MISSING = Diagnostic(
    DiagnosticLevel.ERROR,
    DiagnosticKind.MISSING_FIELD,
    "backend.region",
    "required field is missing",
)
UNKNOWN = Diagnostic(
    DiagnosticLevel.WARNING, DiagnosticKind.UNKNOWN_FIELD, "extra", "field is not declared"
)


def test_render_plain() -> None:
    assert MISSING.render() == "error: backend.region: required field is missing"


def test_render_color_keeps_text() -> None:
    assert "backend.region: required field is missing" in MISSING.render(color=True)


def test_stats_and_errors_only() -> None:
    diags = [UNKNOWN, MISSING, UNKNOWN]
    stats = compute_diagnostic_stats(diags)
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (0, 2, 1, 3)
    assert errors_only(diags) == [MISSING]


def test_stats_empty() -> None:
    assert compute_diagnostic_stats([]).total == 0
