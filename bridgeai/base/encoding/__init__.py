"""Compact encoding of structured prompt payloads."""

from .compact import CompactEncoder, default_compact_encoder, encode_payload

__all__ = ["CompactEncoder", "default_compact_encoder", "encode_payload"]
