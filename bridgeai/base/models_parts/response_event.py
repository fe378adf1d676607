"""Payload handed to the client's response observer."""
from __future__ import annotations

from dataclasses import dataclass

from .chat_response import ChatResponse


@dataclass(frozen=True)
class ResponseEvent:
    """Observer payload: prompt text, the final response and its hash."""

    prompt: str
    response: ChatResponse
    hash: str


__all__ = ["ResponseEvent"]
