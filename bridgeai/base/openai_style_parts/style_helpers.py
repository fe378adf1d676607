"""
Translation helpers for OpenAI-style Chat Completions backends.

Pure functions: request DTOs in, SDK parameter dicts out; SDK reply objects
in, plain values out. No network I/O happens here.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..models import ChatRequest, TokenUsage, ToolCall


def build_messages(request: ChatRequest, system_prompt: Optional[str]) -> List[Dict[str, Any]]:
    """Build the ``messages`` list: system, prior turns, then the prompt.

    Images are attached to the final user message as ``image_url`` parts.
    """
    messages: List[Dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.extend(m.to_dict() for m in request.messages)
    prompt = request.prompt_text()
    if request.images:
        content: List[Dict[str, Any]] = [{"type": "text", "text": prompt}]
        content.extend({"type": "image_url", "image_url": {"url": img.as_url()}} for img in request.images)
        messages.append({"role": "user", "content": content})
    else:
        messages.append({"role": "user", "content": prompt})
    return messages


def build_response_format(request: ChatRequest) -> Optional[Dict[str, Any]]:
    """Translate the request's response format into the SDK parameter."""
    fmt = request.response_format
    if fmt is None or not fmt.wants_json:
        return None
    if fmt.schema:
        return {"type": "json_schema", "json_schema": {"name": "response", "schema": fmt.schema}}
    return {"type": "json_object"}


def build_tools(request: ChatRequest) -> List[Dict[str, Any]]:
    return [
        {
            "type": "function",
            "function": {"name": t.name, "description": t.description, "parameters": t.parameters or {"type": "object"}},
        }
        for t in request.tools
    ]


def build_chat_params(
    model: str,
    request: ChatRequest,
    system_prompt: Optional[str],
    *,
    include_tools: bool = True,
) -> Dict[str, Any]:
    """Assemble keyword arguments for ``client.chat.completions.create``."""
    params: Dict[str, Any] = {"model": model, "messages": build_messages(request, system_prompt)}
    if request.max_tokens is not None:
        params["max_tokens"] = int(request.max_tokens)
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    response_format = build_response_format(request)
    if response_format:
        params["response_format"] = response_format
    if include_tools and request.tools:
        params["tools"] = build_tools(request)
    return params


def extract_text(resp: Any) -> str:
    """Return ``choices[0].message.content`` or an empty string."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


def extract_usage(resp: Any) -> TokenUsage:
    usage = getattr(resp, "usage", None)
    if usage is None:
        return TokenUsage.zero()
    return TokenUsage.from_counts(
        getattr(usage, "prompt_tokens", 0),
        getattr(usage, "completion_tokens", 0),
        getattr(usage, "total_tokens", None),
    )


def parse_arguments(raw: Any) -> Dict[str, Any]:
    """Decode a tool-call arguments payload; undecodable text is kept under ``_raw``."""
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return {"_raw": raw}
    return value if isinstance(value, dict) else {"_raw": value}


def extract_tool_calls(resp: Any) -> List[ToolCall]:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return []
    message = getattr(choices[0], "message", None)
    calls = getattr(message, "tool_calls", None) or []
    out: List[ToolCall] = []
    for call in calls:
        fn = getattr(call, "function", None)
        if fn is None:
            continue
        out.append(ToolCall(name=getattr(fn, "name", ""), arguments=parse_arguments(getattr(fn, "arguments", None))))
    return out


def extract_delta(chunk: Any) -> tuple[str, Optional[List[Dict[str, Any]]]]:
    """Return ``(text, tool_call_fragments)`` from one streamed chunk."""
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return "", None
    delta = getattr(choices[0], "delta", None)
    if delta is None:
        return "", None
    text = getattr(delta, "content", None) or ""
    fragments: Optional[List[Dict[str, Any]]] = None
    calls = getattr(delta, "tool_calls", None)
    if calls:
        fragments = []
        for call in calls:
            fn = getattr(call, "function", None)
            fragments.append(
                {
                    "index": getattr(call, "index", 0),
                    "name": getattr(fn, "name", None),
                    "arguments": getattr(fn, "arguments", None) or "",
                }
            )
    return text, fragments


def extract_request_id(resp: Any) -> Optional[str]:
    rid = getattr(resp, "id", None)
    return rid if isinstance(rid, str) else None


__all__ = [
    "build_messages",
    "build_response_format",
    "build_tools",
    "build_chat_params",
    "extract_text",
    "extract_usage",
    "parse_arguments",
    "extract_tool_calls",
    "extract_delta",
    "extract_request_id",
]
