"""Request preprocessing applied before any backend sees a request.

``prepare_request`` derives the working request sent to adapters from the
caller's request:

1. Structured prompt and turn content is compact-encoded when the request
   asks for it, otherwise rendered as canonical JSON text.
2. Stored conversation memory is prepended to the caller's turns when the
   request enables memory. Caller turns are kept, never replaced.
3. Model aliases are resolved and client-level sampling defaults fill the
   fields the request leaves unset.

The caller's request is never mutated.
"""
from __future__ import annotations

from typing import Any, Sequence

from ..base.encoding import CompactEncoder, encode_payload
from ..base.models import ChatRequest, Message, render_content
from .config import BridgeConfig


def coerce_request(request: Any = None, **kwargs: Any) -> ChatRequest:
    """Accept a ``ChatRequest``, a bare prompt plus keyword fields, or keyword fields only."""
    if isinstance(request, ChatRequest):
        return request.evolve(**kwargs) if kwargs else request
    if request is None:
        return ChatRequest(**kwargs)
    return ChatRequest(prompt=request, **kwargs)


def render_payload(value: Any, encoder: CompactEncoder | None) -> str:
    """Return ``value`` as the text transmitted to a backend."""
    if encoder is not None:
        return encode_payload(value, encoder)
    return render_content(value)


def _render_turns(turns: Sequence[Message], encoder: CompactEncoder | None) -> tuple[Message, ...]:
    return tuple(
        Message(role=m.role, content=render_payload(m.content, encoder)) if m.is_structured() else m for m in turns
    )


def prepare_request(
    request: ChatRequest,
    config: BridgeConfig,
    memory: Sequence[Message],
    encoder: CompactEncoder | None,
) -> ChatRequest:
    """Build the working request for one call.

    Parameters
    ----------
    request:
        Caller's request.
    config:
        Client configuration (aliases and sampling defaults).
    memory:
        Snapshot of the stored conversation, oldest first.
    encoder:
        Compact encoder used when ``request.use_compact_encoding`` is set.

    Raises
    ------
    ConfigurationError
        Compact encoding was requested and no encoder is available.
    """
    active = encoder if request.use_compact_encoding else None
    turns = _render_turns(request.messages, active)
    if request.memory.enabled and memory:
        turns = _render_turns(memory, None) + turns
    return request.evolve(
        prompt=render_payload(request.prompt, active),
        messages=turns,
        model=config.resolve_model(request.model),
        max_tokens=request.max_tokens if request.max_tokens is not None else config.max_tokens,
        temperature=request.temperature if request.temperature is not None else config.temperature,
        system_prompt=request.system_prompt or config.pre_instructions,
    )


__all__ = ["coerce_request", "prepare_request", "render_payload"]
