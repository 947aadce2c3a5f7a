"""
Output - Console output formatting.

Converted documents go to stdout untouched; status messages go to stderr
with optional colors.
"""

import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    DIM = "\033[2m"

    RED = "\033[31m"


class Symbols:
    """Unicode symbols for output."""

    CROSS = "✗"


class Console:
    """Console output helper with colors and formatting."""

    def __init__(
        self,
        color: bool = True,
        verbose: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.color = color and self.stderr.isatty()
        self.verbose = verbose

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "") -> None:
        """Print document output."""
        print(text, file=self.stdout)

    def status(self, text: str) -> None:
        """Print a status line."""
        print(text, file=self.stderr)

    def error(self, text: str) -> None:
        """Print error message."""
        self.status(self._c(f"{Symbols.CROSS} {text}", Colors.RED))

    def debug(self, text: str) -> None:
        """Print debug message (only in verbose mode)."""
        if self.verbose:
            self.status(self._c(f"[DEBUG] {text}", Colors.DIM))
