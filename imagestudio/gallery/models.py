"""
DTO gallery: GeneratedImage, one entry of the in-memory history.
"""
from __future__ import annotations

import time
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from imagestudio.services.image_generation.styles import DEFAULT_ASPECT_RATIO, StyleTag


def new_image_id() -> str:
    """Nanosecond clock: unique per process and sortable in generation order."""
    return str(time.time_ns())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GeneratedImage(BaseModel):
    """Created once per generation (real or placeholder-backed), never mutated."""

    id: str = Field(default_factory=new_image_id)
    prompt: str
    url: str = Field(..., description="Resolved image location (provider URL or placeholder)")
    timestamp: datetime = Field(default_factory=utcnow)
    style: StyleTag = StyleTag.REALISTIC
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    provider: str | None = Field(None, description="Provider that produced url; None for placeholders")
    is_placeholder: bool = False
    revised_prompt: str | None = None

    model_config = {"frozen": True}
