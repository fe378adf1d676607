"""Anthropic Messages API translation helpers.

Purpose:
- Build ``messages.create`` / ``messages.stream`` parameters from a
  ``ChatRequest`` and extract text, usage and tool calls from replies.

Notes:
- The Messages API takes the system prompt as a separate parameter; system
  turns in the history are dropped.
- There is no native JSON mode: a JSON request is expressed as an
  instruction appended to the system prompt.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..base.models import ChatRequest, ImageInput, TokenUsage, ToolCall
from ..config.defaults import CLAUDE_DEFAULT_MAX_TOKENS, JSON_MODE_INSTRUCTION


def image_block(image: ImageInput) -> Dict[str, Any]:
    if image.type == "url":
        return {"type": "image", "source": {"type": "url", "url": image.data}}
    return {
        "type": "image",
        "source": {"type": "base64", "media_type": image.resolved_media_type, "data": image.data},
    }


def build_system(request: ChatRequest, system_prompt: Optional[str]) -> Optional[str]:
    """Return the system parameter, with the JSON instruction when requested."""
    if not request.wants_json:
        return system_prompt
    instruction = JSON_MODE_INSTRUCTION
    schema = request.response_format.schema if request.response_format else None
    if schema:
        instruction += " The object must match this JSON schema: " + json.dumps(schema, sort_keys=True)
    return f"{system_prompt}\n\n{instruction}" if system_prompt else instruction


def build_messages(request: ChatRequest) -> List[Dict[str, Any]]:
    messages: List[Dict[str, Any]] = [m.to_dict() for m in request.messages if m.role != "system"]
    prompt = request.prompt_text()
    if request.images:
        content: List[Dict[str, Any]] = [image_block(img) for img in request.images]
        content.append({"type": "text", "text": prompt})
        messages.append({"role": "user", "content": content})
    else:
        messages.append({"role": "user", "content": prompt})
    return messages


def build_params(model: str, request: ChatRequest, system_prompt: Optional[str]) -> Dict[str, Any]:
    """Assemble keyword arguments for ``client.messages.create``.

    ``max_tokens`` is mandatory for the Messages API and defaults to 1024.
    """
    params: Dict[str, Any] = {
        "model": model,
        "max_tokens": int(request.max_tokens or CLAUDE_DEFAULT_MAX_TOKENS),
        "messages": build_messages(request),
    }
    system = build_system(request, system_prompt)
    if system:
        params["system"] = system
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    if request.tools:
        params["tools"] = [
            {"name": t.name, "description": t.description, "input_schema": t.parameters or {"type": "object"}}
            for t in request.tools
        ]
    return params


def extract_text(resp: Any) -> str:
    """Join every text block of the reply (tool-use blocks are skipped)."""
    parts = [getattr(b, "text", "") or "" for b in getattr(resp, "content", None) or [] if getattr(b, "type", None) == "text"]
    return "".join(parts)


def extract_tool_calls(resp: Any) -> List[ToolCall]:
    out: List[ToolCall] = []
    for block in getattr(resp, "content", None) or []:
        if getattr(block, "type", None) != "tool_use":
            continue
        args = getattr(block, "input", None)
        out.append(ToolCall(name=getattr(block, "name", ""), arguments=dict(args) if isinstance(args, dict) else {}))
    return out


def extract_usage(resp: Any) -> TokenUsage:
    usage = getattr(resp, "usage", None)
    if usage is None:
        return TokenUsage.zero()
    return TokenUsage.from_counts(getattr(usage, "input_tokens", 0), getattr(usage, "output_tokens", 0))


__all__ = [
    "image_block",
    "build_system",
    "build_messages",
    "build_params",
    "extract_text",
    "extract_tool_calls",
    "extract_usage",
]
