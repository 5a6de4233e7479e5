"""Key factories with optional bound options."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from scopekey.core.keys import (
    Key,
    is_key,
    make_global_key,
    make_global_keys,
    make_key,
    make_keys,
)
from scopekey.core.options import resolve_options
from scopekey.core.projection import get_entries, get_names, get_values
from scopekey.errors import InvalidUsage
from scopekey.models.options import KeyOptions

logger = logging.getLogger(__name__)

# Operations re-exposed by every factory, bound or not.
_UNBOUND: dict[str, Callable[..., Any]] = {
    "make_key": make_key,
    "make_keys": make_keys,
    "make_global_key": make_global_key,
    "make_global_keys": make_global_keys,
    "is_key": is_key,
    "get_entries": get_entries,
    "get_names": get_names,
    "get_values": get_values,
}


def _apply_options(func: Callable[..., Any], options: KeyOptions) -> Callable[..., Any]:
    """Wrap ``func`` so it always receives ``options``, whatever the caller passes.

    The first argument may be given positionally or by its parameter name.
    Any ``options`` argument is dropped; other keywords are rejected.
    """
    first_name = next(iter(inspect.signature(func).parameters))

    def bound(*args: Any, **kwargs: Any) -> Any:
        kwargs.pop("options", None)
        if args:
            first = args[0]
        else:
            first = kwargs.pop(first_name, None)
        if kwargs:
            unexpected = next(iter(kwargs))
            raise TypeError(f"{func.__name__}() got an unexpected keyword argument {unexpected!r}")
        return func(first, options)

    bound.__name__ = func.__name__
    bound.__qualname__ = func.__qualname__
    bound.__doc__ = func.__doc__
    return bound


class KeyFactory:
    """Callable aggregate of the scoped key operations.

    Calling a factory generates a local key. Factories are obtained from
    ``scopekey.scoped`` or ``bind()``; they cannot be instantiated directly.
    """

    make_key: Callable[..., Key]
    make_keys: Callable[..., dict[str, Key]]
    make_global_key: Callable[..., Key]
    make_global_keys: Callable[..., dict[str, Key]]
    is_key: Callable[..., bool]
    get_entries: Callable[..., list[tuple[Any, Any]]]
    get_names: Callable[..., list[Any]]
    get_values: Callable[..., list[Any]]

    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        raise InvalidUsage(f"{type(self).__name__} is not a constructor")

    @classmethod
    def _create(cls, options: KeyOptions | None) -> KeyFactory:
        factory = cls.__new__(cls)
        factory._options = options

        if options is None:
            operations = dict(_UNBOUND)
        else:
            operations = {name: _apply_options(func, options) for name, func in _UNBOUND.items()}
            operations["make_global_key"].all = operations["make_global_keys"]  # type: ignore[attr-defined]

        for name, func in operations.items():
            setattr(factory, name, func)
        return factory

    @property
    def options(self) -> KeyOptions | None:
        """Bound options, or None when each call resolves its own."""
        return self._options

    def __call__(self, name: str, options: Any = None) -> Key:
        return self.make_key(name, options)

    def bind(self, options: Any = None) -> KeyFactory:
        """Return a new factory whose operations always use ``options``.

        Options passed to the returned factory's operations are ignored. Binding
        an already bound factory starts from scratch rather than layering.
        """
        return bind(options)

    def __repr__(self) -> str:
        if self._options is None:
            return "KeyFactory()"
        return f"KeyFactory(symbol={self._options.symbol})"


def bind(options: Any = None) -> KeyFactory:
    """Return a KeyFactory bound to the resolved ``options``."""
    resolved = resolve_options(options)
    logger.debug("Binding key factory with options %s", resolved)
    return KeyFactory._create(resolved)


scoped = KeyFactory._create(None)
