"""
Exit Codes - Process exit codes for the adfbridge CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit codes."""

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    INPUT_ERROR = 3
    INTERRUPTED = 130
