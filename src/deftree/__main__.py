# deftree:header:start
#
#   project      : DefTree
#   file         : __main__.py
#   file_relpath : src/deftree/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Allow ``python -m deftree``."""

from __future__ import annotations

from deftree.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="deftree")
