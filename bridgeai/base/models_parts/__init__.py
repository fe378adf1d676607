"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`bridgeai.base.models_parts` if needed, while `bridgeai.base.models` remains
the primary stable import path.
"""

from .message import Message, Role, render_content
from .tool_spec import ToolSpec
from .image_input import ImageInput
from .response_format import ResponseFormat
from .memory_directive import MemoryDirective, MemoryMode
from .chat_request import ChatRequest
from .token_usage import TokenUsage
from .tool_call import ToolCall
from .provider_metadata import ProviderMetadata
from .chat_response import ChatResponse
from .stream_chunk import StreamChunk
from .response_event import ResponseEvent

__all__ = [
    "Message",
    "Role",
    "render_content",
    "ToolSpec",
    "ImageInput",
    "ResponseFormat",
    "MemoryDirective",
    "MemoryMode",
    "ChatRequest",
    "TokenUsage",
    "ToolCall",
    "ProviderMetadata",
    "ChatResponse",
    "StreamChunk",
    "ResponseEvent",
]
