# deftree:header:start
#
#   project      : DefTree
#   file         : errors.py
#   file_relpath : src/deftree/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Exceptions raised by the DefTree library.

The merge engine itself never raises: it is total over mapping/list/scalar trees.
Errors surface when shapes are declared (`SchemaError`), when trees are read from
disk (`SourceError`), and when a merged tree is checked against its final shape
(`ResolutionError` and its subclasses).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from deftree.core.diagnostics import Diagnostic


class DefTreeError(Exception):
    """Base class for all DefTree errors."""


class SchemaError(DefTreeError):
    """A shape declaration or schema document is malformed."""


class SourceError(DefTreeError):
    """A configuration, defaults or schema file cannot be read or parsed."""


class ResolutionError(DefTreeError):
    """A tree does not conform to the shape it was checked against.

    Attributes:
        what (str): Which tree was checked (e.g. ``"final config"``, ``"defaults"``).
        diagnostics (tuple[Diagnostic, ...]): All ERROR-level findings, in traversal order.
    """

    def __init__(self, what: str, diagnostics: Sequence[Diagnostic]) -> None:
        self.what = what
        self.diagnostics = tuple(diagnostics)
        lines: list[str] = [f"{d.path}: {d.message}" for d in self.diagnostics]
        super().__init__(f"Invalid {what}:\n  " + "\n  ".join(lines))


class MissingRequiredFieldError(ResolutionError):
    """One or more required fields were supplied by neither the config nor the defaults.

    Attributes:
        paths (tuple[str, ...]): Dotted paths of the missing fields.
    """

    def __init__(self, what: str, diagnostics: Sequence[Diagnostic], paths: Sequence[str]) -> None:
        super().__init__(what, diagnostics)
        self.paths = tuple(paths)


class ShapeMismatchError(ResolutionError):
    """A value has the wrong type, an unexpected literal, or an array is unexpectedly empty."""
