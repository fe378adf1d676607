"""
Compact serialization hook for structured prompt content.

When a request asks for compact encoding, structured prompt/turn content is
rendered with a token-efficient text format before it reaches a backend. The
default encoder uses TOON via the optional ``toon-format`` distribution
(``pip install bridgeai[toon]``); callers may plug any ``Callable[[Any], str]``
instead through the client configuration.
"""
from __future__ import annotations

import importlib
from typing import Any, Callable

from ..errors import ConfigurationError

CompactEncoder = Callable[[Any], str]


def default_compact_encoder(value: Any) -> str:
    """Encode ``value`` as TOON text.

    Raises:
        ConfigurationError: when the ``toon_format`` library is not installed.
    """
    try:
        toon = importlib.import_module("toon_format")
    except ImportError as e:
        raise ConfigurationError(
            "compact encoding requires the 'toon-format' package (pip install bridgeai[toon])"
        ) from e
    return toon.encode(value)


def encode_payload(value: Any, encoder: CompactEncoder) -> str:
    """Encode structured ``value``; strings pass through untouched."""
    if isinstance(value, str):
        return value
    return encoder(value)


__all__ = ["CompactEncoder", "default_compact_encoder", "encode_payload"]
