"""
Exceptions - Centralized exception hierarchy for adfbridge.

The conversion code itself never raises: malformed tokens, odd payloads and
unparseable dates all degrade to partial output. These exceptions cover the
edges around it (configuration and reading input).
"""

from typing import Optional


class AdfBridgeError(Exception):
    """Base exception for all adfbridge errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class ConfigurationError(AdfBridgeError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.key = key


class InputError(AdfBridgeError):
    """Input could not be read or decoded."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.source = source


__all__ = [
    "AdfBridgeError",
    "ConfigurationError",
    "InputError",
]
