"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``bridgeai.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.message import Message, Role, render_content
from .models_parts.tool_spec import ToolSpec
from .models_parts.image_input import ImageInput
from .models_parts.response_format import ResponseFormat
from .models_parts.memory_directive import MemoryDirective, MemoryMode
from .models_parts.chat_request import ChatRequest
from .models_parts.token_usage import TokenUsage
from .models_parts.tool_call import ToolCall
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.chat_response import ChatResponse
from .models_parts.stream_chunk import StreamChunk
from .models_parts.response_event import ResponseEvent

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
