"""
CLI Module - Command Line Interface for adfbridge.
"""

from .app import main, run, setup_logging
from .exit_codes import ExitCode

__all__ = ["main", "run", "setup_logging", "ExitCode"]
