"""Key generation, classification and property projection."""

from scopekey.core.factory import KeyFactory, bind, scoped
from scopekey.core.keys import (
    PREFIX,
    Key,
    is_key,
    make_global_key,
    make_global_keys,
    make_key,
    make_keys,
)
from scopekey.core.options import resolve_options
from scopekey.core.projection import get_entries, get_names, get_values, iter_properties
from scopekey.core.symbols import Symbol, set_symbol_support, symbols_supported

__all__ = [
    "PREFIX",
    "Key",
    "KeyFactory",
    "Symbol",
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
