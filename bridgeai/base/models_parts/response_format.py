"""
Desired response format for a chat request.

Callers may pass the short forms accepted by the client surface (``"text"``,
``"json"``, ``{"type": "json_object", "schema": {...}}``); ``coerce`` folds
them into one :class:`ResponseFormat` value so adapters only handle a single
shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional

ResponseFormatKind = Literal["text", "json_object"]


@dataclass(frozen=True)
class ResponseFormat:
    """Plain text, a JSON object, or a JSON object constrained by a schema."""

    kind: ResponseFormatKind = "text"
    schema: Optional[Dict[str, Any]] = None

    @property
    def wants_json(self) -> bool:
        return self.kind == "json_object"

    @classmethod
    def coerce(cls, value: Any) -> Optional["ResponseFormat"]:
        """Normalize the accepted short forms into a :class:`ResponseFormat`.

        Raises:
            ValueError: For unrecognized values.
        """
        if value is None or isinstance(value, ResponseFormat):
            return value
        if isinstance(value, str):
            if value == "text":
                return cls("text")
            if value in ("json", "json_object"):
                return cls("json_object")
            raise ValueError(f"unsupported response format: {value!r}")
        if isinstance(value, Mapping):
            kind = value.get("type", "json_object")
            if kind in ("json", "json_object"):
                schema = value.get("schema")
                return cls("json_object", dict(schema) if schema else None)
            if kind == "text":
                return cls("text")
            raise ValueError(f"unsupported response format type: {kind!r}")
        raise ValueError(f"unsupported response format: {value!r}")


__all__ = ["ResponseFormat", "ResponseFormatKind"]
