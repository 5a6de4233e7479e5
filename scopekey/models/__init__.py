"""Pydantic data models for scopekey."""

from scopekey.models.options import KeyOptions

__all__ = [
    "KeyOptions",
]
