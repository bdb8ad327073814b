# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Core building blocks of DefTree: logging, diagnostics, errors and the merge engine.

Import the merge engine from `deftree.core.merge` (or from the top-level `deftree`
package); this package module stays import-light so that schema modules can use
the logging and error helpers without cycles.
"""

from __future__ import annotations
