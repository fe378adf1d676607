"""Image attachment DTO."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

ImageSourceType = Literal["url", "base64"]

DEFAULT_IMAGE_MEDIA_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageInput:
    """An image sent alongside the prompt.

    Attributes:
        type: ``"url"`` for a remote image or ``"base64"`` for inline bytes.
        data: The URL or the base64 payload (without ``data:`` prefix).
        media_type: MIME type such as ``"image/png"``; defaults to JPEG.
    """

    type: ImageSourceType
    data: str
    media_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type not in ("url", "base64"):
            raise ValueError(f"unsupported image type: {self.type!r}")

    @property
    def resolved_media_type(self) -> str:
        return self.media_type or DEFAULT_IMAGE_MEDIA_TYPE

    def as_url(self) -> str:
        """Return a URL usable by URL-only APIs (base64 becomes a data URL)."""
        if self.type == "url":
            return self.data
        return f"data:{self.resolved_media_type};base64,{self.data}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ImageInput":
        return cls(
            type=data["type"],
            data=data["data"],
            media_type=data.get("media_type") or data.get("mediaType"),
        )


__all__ = ["ImageInput", "ImageSourceType", "DEFAULT_IMAGE_MEDIA_TYPE"]
