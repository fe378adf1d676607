"""Deterministic content hashing for prompts."""
from __future__ import annotations

import hashlib


def generate_hash(text: str) -> str:
    """Return the lowercase SHA-256 hex digest of ``text`` encoded as UTF-8."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


__all__ = ["generate_hash"]
