# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Subcommands of the ``deftree`` command group."""

from __future__ import annotations
