"""Option resolution for key factories."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from scopekey.core.symbols import symbols_supported
from scopekey.models.options import KeyOptions

logger = logging.getLogger(__name__)


def resolve_options(options: Any = None) -> KeyOptions:
    """Normalize caller options into a KeyOptions with defaults applied.

    Symbol keys stay enabled unless ``symbol`` is explicitly ``False`` and are
    downgraded to string keys when symbol support is turned off. Fields other
    than ``symbol`` are ignored.

    Args:
        options: None, a KeyOptions, a mapping, or any object with a
            ``symbol`` attribute

    Returns:
        KeyOptions
    """
    if options is None:
        requested = None
    elif isinstance(options, Mapping):
        requested = options.get("symbol")
    else:
        requested = getattr(options, "symbol", None)

    symbol = requested is not False
    if symbol and not symbols_supported():
        logger.debug("Symbol support disabled; falling back to string keys")
        symbol = False

    return KeyOptions(symbol=symbol)
