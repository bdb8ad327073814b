# deftree:header:start
#
#   project      : DefTree
#   file         : constants.py
#   file_relpath : src/deftree/constants.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DEFTREE_VERSION: str = get_version("deftree")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    DEFTREE_VERSION = "0.0.0"

# Suffix of the defaults-tree key carrying a field's own child defaults.
DEFAULTS_SUFFIX: str = "_defaults"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "DEFTREE_LOG_LEVEL"

# Environment variable the application preset reads for the default AWS account.
DEFAULT_ACCOUNT_ENV_VAR: str = "CDK_DEFAULT_ACCOUNT"

# Root path label used in diagnostics.
ROOT_PATH: str = "<root>"

