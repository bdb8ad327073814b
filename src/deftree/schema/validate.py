# deftree:header:start
#
#   project      : DefTree
#   file         : validate.py
#   file_relpath : src/deftree/schema/validate.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Check configuration trees against shapes.

`validate_tree` walks an instance alongside a shape and collects path-qualified
`Diagnostic` records; it never raises. `ensure_valid` turns ERROR-level findings
into exceptions so that a merged tree fails fast, at resolution time, instead of
when some consumer first dereferences a missing field.

A ``None`` value counts as absent, in line with the merge engine which never
emits ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from deftree.constants import ROOT_PATH
from deftree.core.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLevel, errors_only
from deftree.core.errors import MissingRequiredFieldError, ShapeMismatchError
from deftree.core.logging import get_logger
from deftree.schema.shapes import ArrayShape, ObjectShape, ScalarShape

if TYPE_CHECKING:
    from deftree.schema.shapes import Shape

logger = get_logger(__name__)


def join_path(parent: str, key: str) -> str:
    """Return the dotted path of ``key`` below ``parent``."""
    return f"{parent}.{key}" if parent else key


def index_path(parent: str, index: int) -> str:
    """Return the path of element ``index`` of the array at ``parent``."""
    return f"{parent or ROOT_PATH}[{index}]"


def _type_name(value: object) -> str:
    if isinstance(value, Mapping):
        return "table"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def validate_tree(instance: Any, shape: Shape, *, path: str = "") -> list[Diagnostic]:
    """Collect diagnostics for ``instance`` checked against ``shape``.

    Args:
        instance (Any): Tree to check (mappings, lists and scalars).
        shape (Shape): Shape the tree must conform to.
        path (str): Path prefix for diagnostics; empty for the root.

    Returns:
        list[Diagnostic]: Findings in traversal order. Missing required fields, type
        mismatches, unexpected literals and empty non-empty arrays are errors; fields
        unknown to the shape are warnings.
    """
    out: list[Diagnostic] = []
    _check(instance, shape, path, out)
    return out


def _add(
    out: list[Diagnostic],
    level: DiagnosticLevel,
    kind: DiagnosticKind,
    path: str,
    msg: str,
) -> None:
    out.append(Diagnostic(level=level, kind=kind, path=path or ROOT_PATH, message=msg))


def _check(value: Any, shape: Shape, path: str, out: list[Diagnostic]) -> None:
    if isinstance(shape, ObjectShape):
        if not isinstance(value, Mapping):
            _add(
                out,
                DiagnosticLevel.ERROR,
                DiagnosticKind.TYPE_MISMATCH,
                path,
                f"expected a table, got {_type_name(value)}",
            )
            return
        for name, f in shape.fields.items():
            child_path: str = join_path(path, name)
            child: Any = value.get(name)
            if child is None:
                if not f.optional:
                    _add(
                        out,
                        DiagnosticLevel.ERROR,
                        DiagnosticKind.MISSING_FIELD,
                        child_path,
                        "required field is missing",
                    )
                continue
            _check(child, f.shape, child_path, out)
        for key in value:
            if key not in shape.fields:
                _add(
                    out,
                    DiagnosticLevel.WARNING,
                    DiagnosticKind.UNKNOWN_FIELD,
                    join_path(path, str(key)),
                    "field is not declared in the schema",
                )
        return

    if isinstance(shape, ArrayShape):
        if not isinstance(value, (list, tuple)):
            _add(
                out,
                DiagnosticLevel.ERROR,
                DiagnosticKind.TYPE_MISMATCH,
                path,
                f"expected an array, got {_type_name(value)}",
            )
            return
        if shape.non_empty and not value:
            _add(
                out,
                DiagnosticLevel.ERROR,
                DiagnosticKind.EMPTY_ARRAY,
                path,
                "array must hold at least one element",
            )
        for i, item in enumerate(value):
            if item is None:
                _add(
                    out,
                    DiagnosticLevel.ERROR,
                    DiagnosticKind.MISSING_FIELD,
                    index_path(path, i),
                    "array element is missing",
                )
                continue
            _check(item, shape.element, index_path(path, i), out)
        return

    _check_scalar(value, shape, path, out)


def _check_scalar(value: Any, shape: ScalarShape, path: str, out: list[Diagnostic]) -> None:
    if not shape.kind.accepts(value):
        _add(
            out,
            DiagnosticLevel.ERROR,
            DiagnosticKind.TYPE_MISMATCH,
            path,
            f"expected {shape.kind.value}, got {_type_name(value)}",
        )
        return
    if shape.choices is not None and value not in shape.choices:
        allowed: str = ", ".join(repr(c) for c in shape.choices)
        _add(
            out,
            DiagnosticLevel.ERROR,
            DiagnosticKind.INVALID_CHOICE,
            path,
            f"{value!r} is not one of {allowed}",
        )


def ensure_valid(instance: Any, shape: Shape, *, what: str) -> list[Diagnostic]:
    """Validate ``instance`` and raise on the first class of error found.

    Args:
        instance (Any): Tree to check.
        shape (Shape): Shape the tree must conform to.
        what (str): Human-readable name of the tree, used in error messages.

    Returns:
        list[Diagnostic]: The non-fatal (warning/info) diagnostics.

    Raises:
        MissingRequiredFieldError: If any required field is absent.
        ShapeMismatchError: If any other error-level diagnostic was collected.
    """
    diags: list[Diagnostic] = validate_tree(instance, shape)
    errors: list[Diagnostic] = errors_only(diags)
    missing: list[str] = [d.path for d in errors if d.kind is DiagnosticKind.MISSING_FIELD]
    if missing:
        raise MissingRequiredFieldError(what, errors, missing)
    if errors:
        raise ShapeMismatchError(what, errors)
    for d in diags:
        logger.warning("%s: %s: %s", what, d.path, d.message)
    return diags
