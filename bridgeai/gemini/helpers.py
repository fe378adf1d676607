"""google-generativeai translation helpers.

Builds ``GenerativeModel`` / ``ChatSession`` inputs from a ``ChatRequest``
and extracts text, usage and function calls from replies. The SDK raises on
``response.text`` when a reply holds only function calls, so text is read by
joining the text parts of the first candidate instead.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional

from ..base.models import ChatRequest, ImageInput, TokenUsage, ToolCall


def history(request: ChatRequest) -> List[Dict[str, Any]]:
    """Prior turns as chat history; Gemini names the assistant role ``model``."""
    return [
        {"role": "model" if m.role == "assistant" else "user", "parts": [m.text()]}
        for m in request.messages
    ]


def image_part(image: ImageInput) -> Dict[str, Any]:
    if image.type == "url":
        return {"file_data": {"mime_type": image.resolved_media_type, "file_uri": image.data}}
    return {"inline_data": {"mime_type": image.resolved_media_type, "data": base64.b64decode(image.data)}}


def message_content(request: ChatRequest) -> Any:
    prompt = request.prompt_text()
    if not request.images:
        return prompt
    return [prompt, *(image_part(img) for img in request.images)]


def generation_config(request: ChatRequest) -> Optional[Dict[str, Any]]:
    cfg: Dict[str, Any] = {}
    if request.temperature is not None:
        cfg["temperature"] = float(request.temperature)
    if request.max_tokens is not None:
        cfg["max_output_tokens"] = int(request.max_tokens)
    if request.wants_json:
        cfg["response_mime_type"] = "application/json"
    return cfg or None


def tools(request: ChatRequest) -> Optional[List[Dict[str, Any]]]:
    if not request.tools:
        return None
    declarations = [
        {"name": t.name, "description": t.description, "parameters": t.parameters or {"type": "object"}}
        for t in request.tools
    ]
    return [{"function_declarations": declarations}]


def _parts(resp: Any) -> List[Any]:
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def extract_text(resp: Any) -> str:
    return "".join(getattr(p, "text", "") or "" for p in _parts(resp))


def extract_function_calls(resp: Any) -> List[ToolCall]:
    out: List[ToolCall] = []
    for part in _parts(resp):
        fn = getattr(part, "function_call", None)
        name = getattr(fn, "name", None) if fn is not None else None
        if not name:
            continue
        args = getattr(fn, "args", None)
        out.append(ToolCall(name=name, arguments=dict(args) if args else {}))
    return out


def extract_usage(resp: Any) -> TokenUsage:
    meta = getattr(resp, "usage_metadata", None)
    if meta is None:
        return TokenUsage.zero()
    return TokenUsage.from_counts(
        getattr(meta, "prompt_token_count", 0),
        getattr(meta, "candidates_token_count", 0),
        getattr(meta, "total_token_count", None),
    )


__all__ = [
    "history",
    "image_part",
    "message_content",
    "generation_config",
    "tools",
    "extract_text",
    "extract_function_calls",
    "extract_usage",
]
