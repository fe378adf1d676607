"""bridgeai package

Unified async client over multiple LLM backends.

Purpose:
    One ``BridgeAIClient`` talks to OpenAI, Gemini, Claude, Perplexity,
    DeepSeek (or the offline mock) with retry, provider fallback,
    conversation memory, prompt hashing, cost estimates and streaming.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`BridgeAIClient`, :class:`BridgeConfig`,
      :class:`RetryOptions`, :class:`ChatCommand`
    - Models: :class:`ChatRequest`, :class:`ChatResponse`,
      :class:`StreamChunk`, :class:`Message`, ...
    - Exceptions: :class:`ProviderError`, :class:`ConfigurationError`,
      :class:`TransientBackendError`, :class:`TerminalBackendError`
    - Adapters: :func:`create` builds a bare adapter by provider name
"""

from typing import Any

from .base.dto import AdapterParams
from .base.errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    TerminalBackendError,
    TransientBackendError,
    UnknownProviderError,
)
from .base.factory import ProviderFactory
from .base.interfaces import LLMProvider, SupportsStreaming
from .base.logging import configure_logger, get_logger
from .base.models import (
    ChatRequest,
    ChatResponse,
    ImageInput,
    MemoryDirective,
    Message,
    ResponseEvent,
    ResponseFormat,
    StreamChunk,
    TokenUsage,
    ToolCall,
    ToolSpec,
)
from .base.utils import calculate_cost, generate_hash
from .client import BridgeAIClient, BridgeConfig, ChatCommand, Command, RetryOptions

__version__ = "0.1.0"


def create(provider: str, **kwargs: Any) -> LLMProvider:
    """Create a bare adapter (no retry, fallback or memory) by provider name."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = [
    "__version__",
    # Client
    "BridgeAIClient",
    "BridgeConfig",
    "RetryOptions",
    "Command",
    "ChatCommand",
    # Models
    "ChatRequest",
    "ChatResponse",
    "StreamChunk",
    "Message",
    "ToolSpec",
    "ToolCall",
    "ImageInput",
    "ResponseFormat",
    "MemoryDirective",
    "TokenUsage",
    "ResponseEvent",
    # Exceptions
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "UnknownProviderError",
    "TransientBackendError",
    "TerminalBackendError",
    # Adapters
    "create",
    "ProviderFactory",
    "AdapterParams",
    "LLMProvider",
    "SupportsStreaming",
    # Utilities
    "generate_hash",
    "calculate_cost",
    "get_logger",
    "configure_logger",
]
