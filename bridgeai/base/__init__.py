"""
Base package

Exports the provider-agnostic contracts, DTOs and the provider factory used by
the adapters and the client:

- Interfaces: normalized adapter boundaries
- Models (DTOs): request/response objects shared by every backend
- Errors: structured error taxonomy decided at the adapter boundary
- Factory: lazy creation of adapters by canonical name
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    TerminalBackendError,
    TransientBackendError,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import HasDefaultModel, LLMProvider, SupportsStreaming
from .models import (
    ChatRequest,
    ChatResponse,
    ImageInput,
    MemoryDirective,
    MemoryMode,
    Message,
    ProviderMetadata,
    ResponseEvent,
    ResponseFormat,
    Role,
    StreamChunk,
    TokenUsage,
    ToolCall,
    ToolSpec,
)

__all__ = [
    # Models
    "Role",
    "Message",
    "ToolSpec",
    "ImageInput",
    "ResponseFormat",
    "MemoryMode",
    "MemoryDirective",
    "ChatRequest",
    "TokenUsage",
    "ToolCall",
    "ProviderMetadata",
    "ChatResponse",
    "StreamChunk",
    "ResponseEvent",
    # Interfaces
    "LLMProvider",
    "SupportsStreaming",
    "HasDefaultModel",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransientBackendError",
    "TerminalBackendError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
]
