# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Click-based command-line interface for DefTree.

Entry point: `deftree.cli.main.cli` (installed as the ``deftree`` console script,
also reachable as ``python -m deftree``).
"""

from __future__ import annotations
