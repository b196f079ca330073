"""
Image generation service with multi-provider support.
"""
from .base import (
    EmptyPromptError,
    ImageGenerationError,
    ImageGenerationProvider,
    ImageGenerationResponse,
    ImageResponseShapeError,
    NoImageUrlError,
    ProviderNotConfiguredError,
    ProviderRequest,
    ProviderTransportError,
    QuotaExceededError,
    RateLimitError,
    UserFacingProviderError,
)
from .factory import ImageProviderFactory
from .normalizer import extract_revised_prompt, extract_url
from .relay import ProxyRelay
from .runner import generate_with_fallback
from .styles import StyleTag, enhance_prompt, normalize_style, placeholder_for

__all__ = [
    "EmptyPromptError",
    "ImageGenerationError",
    "ImageGenerationProvider",
    "ImageGenerationResponse",
    "ImageResponseShapeError",
    "NoImageUrlError",
    "ProviderNotConfiguredError",
    "ProviderRequest",
    "ProviderTransportError",
    "QuotaExceededError",
    "RateLimitError",
    "UserFacingProviderError",
    "ImageProviderFactory",
    "extract_revised_prompt",
    "extract_url",
    "ProxyRelay",
    "generate_with_fallback",
    "StyleTag",
    "enhance_prompt",
    "normalize_style",
    "placeholder_for",
]
