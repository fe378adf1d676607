"""
ChatRequest DTO: the logical request a caller hands to the client.

The request is immutable. The dispatcher derives a working copy per call with
:meth:`ChatRequest.evolve` (encoded content, merged memory, defaults) and
adapters only ever see that working copy. Convenience inputs (dict messages,
``memory=True``, ``response_format="json"``) are normalized on construction.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .image_input import ImageInput
from .memory_directive import MemoryDirective
from .message import Message, render_content
from .response_format import ResponseFormat
from .tool_spec import ToolSpec


def _as_tuple(items: Any, kind: type, build) -> Tuple[Any, ...]:
    if items is None:
        return ()
    return tuple(i if isinstance(i, kind) else build(i) for i in items)


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request.

    Attributes:
        prompt: The primary prompt, text or a structured value.
        system_prompt: Overrides the client's pre-instructions for this call.
        messages: Prior turns sent before the prompt.
        model: Model override (aliases are resolved by the client).
        max_tokens: Completion token budget.
        temperature: Sampling temperature.
        tools: Tool definitions the model may call.
        images: Image attachments sent with the prompt.
        response_format: Desired reply format; ``None`` means plain text.
        memory: Conversation memory directive for this call.
        use_compact_encoding: Encode structured content compactly before sending.
        extra: Adapter-specific escape hatch.
    """

    prompt: Any
    system_prompt: Optional[str] = None
    messages: Tuple[Message, ...] = ()
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    tools: Tuple[ToolSpec, ...] = ()
    images: Tuple[ImageInput, ...] = ()
    response_format: Optional[ResponseFormat] = None
    memory: MemoryDirective = field(default_factory=MemoryDirective.disabled)
    use_compact_encoding: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "messages", _as_tuple(self.messages, Message, Message.from_mapping))
        object.__setattr__(self, "tools", _as_tuple(self.tools, ToolSpec, ToolSpec.from_mapping))
        object.__setattr__(self, "images", _as_tuple(self.images, ImageInput, ImageInput.from_mapping))
        object.__setattr__(self, "response_format", ResponseFormat.coerce(self.response_format))
        object.__setattr__(self, "memory", MemoryDirective.coerce(self.memory))
        if self.max_tokens is not None and self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")

    @property
    def wants_json(self) -> bool:
        return self.response_format is not None and self.response_format.wants_json

    def prompt_text(self) -> str:
        """Return the primary prompt as text (structured prompts as canonical JSON)."""
        return render_content(self.prompt)

    def evolve(self, **changes: Any) -> "ChatRequest":
        """Return a copy with ``changes`` applied; the original is untouched."""
        return dataclasses.replace(self, **changes)


__all__ = [
    "ChatRequest",
]
