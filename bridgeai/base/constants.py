"""Base shared constants for adapters.

Central location to avoid scattering magic strings and default numbers.

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential message template
MISSING_API_KEY_ERROR = "API key for '{provider}' is missing; pass api_key or set {env_var}"  # pragma: allowlist secret

# Default HTTP timeout (seconds) passed to SDK clients
DEFAULT_HTTP_TIMEOUT = 60.0

__all__ = [
    "MISSING_API_KEY_ERROR",
    "DEFAULT_HTTP_TIMEOUT",
]
