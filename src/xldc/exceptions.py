"""
Exceptions for xldc.

Every fatal condition is raised as an XLDCError subclass and handled once,
by the top-level command group, which prints the message and exits with 1.
"""

from __future__ import annotations


class XLDCError(Exception):
    """Base exception for all xldc errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._original_cause = cause

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration & connectivity
# =============================================================================


class ConfigurationError(XLDCError):
    """A required connection setting is missing or invalid."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field.capitalize()} is required")


class ConnectivityError(XLDCError):
    """The XL Deploy server could not be reached with the resolved profile."""

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url
        msg = "Connection to XL-Deploy failed"
        if base_url:
            msg = f"{msg} ({base_url})"
        super().__init__(msg)


# =============================================================================
# Command errors
# =============================================================================


class RemoteCallError(XLDCError):
    """A remote call made on behalf of a command failed."""

    def __init__(
        self,
        command_path: str,
        action: str,
        identifier: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.command_path = command_path
        self.action = action
        self.identifier = identifier
        target = f"{action} {identifier}" if identifier else action
        msg = f"{command_path}: encountered a fatal error {target}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg, cause=cause)


class UsageError(XLDCError):
    """A command was invoked without the arguments it needs."""

    def __init__(self, command_path: str, message: str) -> None:
        self.command_path = command_path
        super().__init__(f"{command_path}: {message}")


class SerializationError(XLDCError):
    """A result could not be serialized or written out."""


__all__ = [
    "XLDCError",
    "ConfigurationError",
    "ConnectivityError",
    "RemoteCallError",
    "UsageError",
    "SerializationError",
]
