"""Centralized exit codes for all CLI commands.

Exit codes:
    0: Success
    1: The operation failed inside the host library (bad regex, unknown codec)
    2: Usage error (unknown operation, malformed or missing arguments)
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for stringy CLI commands."""

    SUCCESS = 0
    HOST_ERROR = 1
    USAGE_ERROR = 2
