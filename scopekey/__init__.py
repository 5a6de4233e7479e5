"""Scoped property keys for emulating private members."""

from scopekey.core import (
    PREFIX,
    Key,
    KeyFactory,
    Symbol,
    bind,
    get_entries,
    get_names,
    get_values,
    is_key,
    iter_properties,
    make_global_key,
    make_global_keys,
    make_key,
    make_keys,
    resolve_options,
    scoped,
    set_symbol_support,
    symbols_supported,
)
from scopekey.errors import InvalidUsage
from scopekey.models import KeyOptions

__version__ = "0.1.0"

__all__ = [
    "PREFIX",
    "InvalidUsage",
    "Key",
    "KeyFactory",
    "KeyOptions",
    "Symbol",
    "__version__",
    "bind",
    "get_entries",
    "get_names",
    "get_values",
    "is_key",
    "iter_properties",
    "make_global_key",
    "make_global_keys",
    "make_key",
    "make_keys",
    "resolve_options",
    "scoped",
    "set_symbol_support",
    "symbols_supported",
]
