"""Opaque identity tokens and the process-wide symbol registry."""

from __future__ import annotations

import os
import threading
from typing import Any

_DISABLED_VALUES = frozenset({"0", "false", "no", "off"})

_symbol_support: bool | None = None


class Symbol:
    """Opaque token whose only meaningful operation is identity comparison.

    The description is a diagnostic label. It takes no part in equality or
    hashing, so two symbols created with the same description are different
    keys unless they were both obtained from the registry via ``for_name``.
    """

    __slots__ = ("_description", "_registered", "__weakref__")

    _registry: dict[str, Symbol] = {}
    _registry_lock = threading.Lock()

    def __init__(self, description: str | None = None) -> None:
        self._description = None if description is None else str(description)
        self._registered = False

    @property
    def description(self) -> str | None:
        """Diagnostic label given when the symbol was created."""
        return self._description

    @classmethod
    def for_name(cls, name: str) -> Symbol:
        """Return the registered symbol for ``name``, creating it on first use.

        Args:
            name: Registry name (coerced to ``str``)

        Returns:
            The same Symbol instance for every call with an equal name
        """
        name = str(name)
        with cls._registry_lock:
            symbol = cls._registry.get(name)
            if symbol is None:
                symbol = cls(name)
                symbol._registered = True
                cls._registry[name] = symbol
            return symbol

    @staticmethod
    def key_for(symbol: Symbol) -> str | None:
        """Return the registry name of ``symbol``, or None if it is not registered."""
        if not isinstance(symbol, Symbol):
            raise TypeError(f"{symbol!r} is not a Symbol")
        return symbol._description if symbol._registered else None

    def __repr__(self) -> str:
        return f"Symbol({self._description or ''})"

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Symbol:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        if not self._registered:
            raise TypeError(f"cannot pickle local {self!r}")
        return (Symbol.for_name, (self._description,))


def set_symbol_support(enabled: bool | None) -> None:
    """Force symbol support on or off. ``None`` restores environment detection."""
    global _symbol_support
    _symbol_support = enabled


def symbols_supported() -> bool:
    """Return whether options may resolve to symbol keys."""
    if _symbol_support is not None:
        return _symbol_support

    value = os.environ.get("SCOPEKEY_SYMBOLS")
    if value is None:
        return True
    return value.strip().lower() not in _DISABLED_VALUES
