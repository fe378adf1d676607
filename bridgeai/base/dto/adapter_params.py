"""Typed parameter object for adapter construction.

Captures the initialization fields every adapter accepts so the registry and
the client pass one validated object instead of loose keyword arguments.
Adapter-specific settings travel in ``extra``.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common adapter initialization parameters.

    Attributes
    ----------
    model:
        Default model for the adapter; ``None`` uses the provider default
        from configuration.
    api_key:
        Credential for the backend. Adapters that require one raise
        ``ConfigurationError`` when it is missing.
    base_url:
        Endpoint override (proxies, self-hosted gateways, compatible APIs).
    system_message:
        Pre-instructions sent as the system prompt when a request carries
        none of its own.
    extra:
        Provider-specific options (e.g. ``{"responses": [...]}`` for the mock).
    """

    model_config = ConfigDict(extra="forbid")

    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    system_message: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
