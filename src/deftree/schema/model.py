# deftree:header:start
#
#   project      : DefTree
#   file         : model.py
#   file_relpath : src/deftree/schema/model.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""`ConfigSchema`: a definition shape bundled with its defaults.

A schema is built once, by the author of a configuration definition, and then
resolves any number of caller-supplied configs:

    schema = ConfigSchema(definition, defaults)
    final = schema.resolve(config)

Design:
    * The defaults tree is checked against the derived default shape when the
      schema is created (``strict_defaults=True``), so an incomplete defaults tree
      is reported at definition time rather than on the first resolve.
    * `resolve` always validates its result against the final shape; use
      `deftree.core.merge.merge_trees` for an unchecked merge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any

from deftree.core.logging import get_logger
from deftree.core.merge import MergeMode, generate_final_config
from deftree.schema.derive import config_shape, default_shape, final_shape
from deftree.schema.shapes import ObjectShape
from deftree.schema.validate import ensure_valid, validate_tree

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deftree.core.diagnostics import Diagnostic
    from deftree.schema.shapes import Shape

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConfigSchema:
    """A configuration definition and the defaults that complete it.

    Attributes:
        shape (ObjectShape): Definition shape (fields, optionality, markers).
        defaults (Mapping[str, Any]): Defaults tree matching `default_shape`.
        mode (MergeMode): When a config value counts as supplied.
        strict_defaults (bool): Validate ``defaults`` against `default_shape` on creation.

    Raises:
        MissingRequiredFieldError: If ``strict_defaults`` and a needed default is missing.
        ShapeMismatchError: If ``strict_defaults`` and a default has the wrong type.
    """

    shape: ObjectShape
    defaults: Mapping[str, Any] = field(default_factory=dict)
    mode: MergeMode = MergeMode.PRESENCE
    strict_defaults: bool = True

    def __post_init__(self) -> None:
        if self.strict_defaults:
            ensure_valid(self.defaults, self.default_shape, what="defaults")

    @cached_property
    def config_shape(self) -> Shape:
        """Shape of the configs `resolve` accepts (markers stripped)."""
        return config_shape(self.shape)

    @cached_property
    def default_shape(self) -> Shape:
        """Shape the defaults tree must have."""
        return default_shape(self.shape)

    @cached_property
    def final_shape(self) -> Shape:
        """Shape every resolved config is guaranteed to have."""
        return final_shape(self.shape)

    def check_defaults(self) -> list[Diagnostic]:
        """Return diagnostics for the defaults tree checked against `default_shape`."""
        return validate_tree(self.defaults, self.default_shape)

    def check_config(self, config: Mapping[str, Any]) -> list[Diagnostic]:
        """Return diagnostics for ``config`` checked against `config_shape`."""
        return validate_tree(config, self.config_shape)

    def resolve(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Merge ``config`` with the defaults and validate the result.

        Args:
            config (Mapping[str, Any]): Partial configuration instance.

        Returns:
            dict[str, Any]: The fully-resolved configuration.

        Raises:
            MissingRequiredFieldError: If a required field is supplied by neither tree.
            ShapeMismatchError: If the result holds values of the wrong type.
        """
        logger.debug("Resolving config against schema (%d fields)", len(self.shape.fields))
        return generate_final_config(
            config,
            self.defaults,
            shape=self.shape,
            mode=self.mode,
            validate=True,
        )
