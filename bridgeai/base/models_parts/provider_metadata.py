"""
Provider call metadata model.

Encapsulates diagnostic metadata for one backend call (which provider and
model answered, latency, request identifiers, whether a fallback served the
reply). Attached to every :class:`ChatResponse`.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Execution metadata for a provider call.

    Attributes:
        provider_name: Canonical provider key (e.g., ``"openai"``).
        model_name: Resolved model name used for the call.
        http_status: HTTP status code if available from the SDK.
        request_id: Provider-specific request/response identifier when available.
        latency_ms: End-to-end latency for the adapter call, in milliseconds.
        attempts: Number of attempts the retry policy made (set by the client).
        fallback_used: True when a fallback provider produced the reply.
        extra: Opaque, JSON-serializable map for adapter-specific diagnostics.
    """

    provider_name: str
    model_name: str
    http_status: Optional[int] = None
    request_id: Optional[str] = None
    latency_ms: Optional[float] = None
    attempts: Optional[int] = None
    fallback_used: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]
