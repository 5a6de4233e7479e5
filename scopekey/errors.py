"""Errors raised by scopekey."""

from __future__ import annotations


class InvalidUsage(TypeError):
    """Raised when a key factory is used in a way it does not support."""
