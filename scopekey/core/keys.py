"""Scoped key generation and classification."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from scopekey.core.options import resolve_options
from scopekey.core.symbols import Symbol

PREFIX = "_"

Key = Symbol | str


def _prefixed(name: str) -> str:
    return f"{PREFIX}{name}"


def _key_maker(global_: bool, options: Any) -> Callable[[str], Key]:
    resolved = resolve_options(options)
    if resolved.symbol:
        return Symbol.for_name if global_ else Symbol
    return _prefixed


def _make_all(global_: bool, names: Iterable[str] | None, options: Any) -> dict[str, Key]:
    maker = _key_maker(global_, options)
    keys: dict[str, Key] = {}
    for name in names or []:
        if name not in keys:
            keys[name] = maker(name)
    return keys


def make_key(name: str, options: Any = None) -> Key:
    """Return a local scoped key for ``name``.

    In symbol mode every call returns a new Symbol, even for the same name. In
    string mode the key is ``name`` prefixed with an underscore.

    Args:
        name: Name of the scoped member
        options: Key options (see ``resolve_options``)

    Returns:
        Symbol or prefixed string
    """
    return _key_maker(False, options)(name)


def make_keys(names: Iterable[str] | None = None, options: Any = None) -> dict[str, Key]:
    """Return local scoped keys mapped to each unique name in ``names``."""
    return _make_all(False, names, options)


def make_global_key(name: str, options: Any = None) -> Key:
    """Return a global scoped key for ``name``.

    In symbol mode the key comes from the process-wide registry, so every call
    with the same name returns the identical Symbol. String mode is the same
    as ``make_key``.
    """
    return _key_maker(True, options)(name)


def make_global_keys(names: Iterable[str] | None = None, options: Any = None) -> dict[str, Key]:
    """Return global scoped keys mapped to each unique name in ``names``."""
    return _make_all(True, names, options)


make_global_key.all = make_global_keys  # type: ignore[attr-defined]


def is_key(value: Any, options: Any = None) -> bool:
    """Return whether ``value`` looks like a scoped key under ``options``.

    Symbol mode accepts any Symbol. String mode accepts any string whose first
    character is the underscore prefix.
    """
    if value is None:
        return False

    if resolve_options(options).symbol:
        return isinstance(value, Symbol)
    return isinstance(value, str) and value[:1] == PREFIX
