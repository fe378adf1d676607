"""Conversation memory owned by a client instance."""

from .conversation_memory import ConversationMemory

__all__ = ["ConversationMemory"]
