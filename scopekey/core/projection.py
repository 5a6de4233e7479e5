"""Public property projection.

Properties are visited in ``for...in`` order: an object's own fields first,
then the data attributes declared on each class of its MRO. Symbol-keyed
properties are always skipped; underscore-prefixed names are skipped only when
string keys are in use.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, Mapping
from types import ModuleType
from typing import Any, TypeVar

from scopekey.core.keys import PREFIX
from scopekey.core.options import resolve_options
from scopekey.core.symbols import Symbol

T = TypeVar("T")

_MISSING = object()


def _is_enumerable(name: Any, value: Any) -> bool:
    if isinstance(name, str) and name.startswith("__") and name.endswith("__"):
        return False
    if inspect.isroutine(value) or isinstance(value, classmethod | staticmethod):
        return False
    return not (inspect.isdatadescriptor(value) or inspect.ismethoddescriptor(value))


def _slot_names(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [slot for slot in slots if slot not in ("__dict__", "__weakref__")]


def _own_items(obj: Any) -> Iterator[tuple[Any, Any]]:
    if isinstance(obj, type | ModuleType):
        for name, value in vars(obj).items():
            if _is_enumerable(name, value):
                yield name, value
        return

    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        yield from instance_dict.items()

    for cls in reversed(type(obj).__mro__):
        for slot in _slot_names(cls):
            value = getattr(obj, slot, _MISSING)
            if value is not _MISSING:
                yield slot, value


def _base_classes(obj: Any) -> tuple[type, ...]:
    if isinstance(obj, type):
        return obj.__mro__[1:]
    if isinstance(obj, ModuleType):
        return ()
    return type(obj).__mro__


def _inherited_items(obj: Any) -> Iterator[tuple[Any, Any]]:
    for cls in _base_classes(obj):
        if cls is object:
            continue
        for name, value in vars(cls).items():
            if _is_enumerable(name, value):
                yield name, value


def iter_properties(obj: Any) -> Iterator[tuple[Any, Any]]:
    """Yield every enumerable ``(name, value)`` pair of ``obj``, own then inherited.

    Mappings contribute their own items only. Each name is yielded once; an
    inherited attribute shadowed by an own field is skipped.
    """
    if obj is None:
        return

    if isinstance(obj, Mapping):
        yield from obj.items()
        return

    seen: set[Any] = set()
    for name, value in _own_items(obj):
        if name not in seen:
            seen.add(name)
            yield name, value
    for name, value in _inherited_items(obj):
        if name not in seen:
            seen.add(name)
            yield name, value


def _map_properties(obj: Any, mapper: Callable[[Any, Any], T], options: Any) -> list[T]:
    resolved = resolve_options(options)
    result: list[T] = []
    for name, value in iter_properties(obj):
        if isinstance(name, Symbol):
            continue
        if not resolved.symbol and isinstance(name, str) and name[:1] == PREFIX:
            continue
        result.append(mapper(name, value))
    return result


def get_entries(obj: Any, options: Any = None) -> list[tuple[Any, Any]]:
    """Return ``(name, value)`` pairs for the public properties of ``obj``."""
    return _map_properties(obj, lambda name, value: (name, value), options)


def get_names(obj: Any, options: Any = None) -> list[Any]:
    """Return the names of the public properties of ``obj``."""
    return _map_properties(obj, lambda name, value: name, options)


def get_values(obj: Any, options: Any = None) -> list[Any]:
    """Return the values of the public properties of ``obj``."""
    return _map_properties(obj, lambda name, value: value, options)
