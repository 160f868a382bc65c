"""
Base exceptions for user-facing errors.

Everything the user can fix (bad settings, missing files) inherits from
XInjectUserError and is reported by the CLI as a clean message.
Programming errors propagate with full tracebacks.
"""

from __future__ import annotations


class XInjectUserError(Exception):
    """Base class for all user-facing errors in xinject."""
    pass


class ConfigError(XInjectUserError, ValueError):
    """Invalid xinject-cfg/settings.yaml content."""

    def __init__(self, message: str, path: object = None):
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.path = path


__all__ = ["XInjectUserError", "ConfigError"]
