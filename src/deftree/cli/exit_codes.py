# deftree:header:start
#
#   project      : DefTree
#   file         : exit_codes.py
#   file_relpath : src/deftree/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Exit codes for the DefTree CLI.

DefTree follows the BSD `sysexits` convention so scripts can tell a malformed
schema from an unreadable file or a config that does not resolve.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DefTree CLI.

    Attributes:
        SUCCESS: The command completed and every checked tree is valid.
        FAILURE: ``deftree check`` found ERROR-level diagnostics.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A tree cannot be parsed, or a config does not resolve against
            its schema. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: An input file cannot be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: The schema document is malformed. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
