"""
Base classes and types for image generation providers.
Used by factory, generator service and all providers (openai, deepai, pixelixe).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProviderRequest:
    """Outbound provider call, ready to be sent directly or through the relay."""
    provider: str
    url: str
    enhanced_prompt: str
    method: str = "POST"
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    # Multipart/form providers send body as form fields instead of JSON
    as_form: bool = False


@dataclass
class ImageGenerationResponse:
    """Response from image generation."""
    image_url: str
    provider: str
    model: str | None = None
    revised_prompt: str | None = None


class ImageGenerationError(Exception):
    """Raised when generation fails; detail holds provider fields for logging."""
    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.detail = detail or {}


class ProviderNotConfiguredError(ImageGenerationError):
    """Required credential is missing. Raised before any network call."""


class ProviderTransportError(ImageGenerationError):
    """Non-2xx provider or relay response, or a network fault."""


class UserFacingProviderError(ProviderTransportError):
    """Provider error whose wording is shown to the user instead of a placeholder."""


class RateLimitError(UserFacingProviderError):
    pass


class QuotaExceededError(UserFacingProviderError):
    pass


class ImageResponseShapeError(ImageGenerationError):
    """Response body parsed (or failed to parse) without a usable image URL."""


class NoImageUrlError(ImageResponseShapeError):
    pass


class EmptyPromptError(ValueError):
    """Prompt is empty after trimming; generation must not start."""


class ImageGenerationProvider(ABC):
    """Base class for image generation providers."""

    name: str = ""
    display_name: str = ""
    uses_relay: bool = False

    def __init__(self, config: dict) -> None:
        self.config = config

    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider is configured and available."""
        pass

    @abstractmethod
    def get_supported_models(self) -> list[str]:
        """Return list of supported model names."""
        pass

    @abstractmethod
    def build_request(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ProviderRequest:
        """Build the provider-specific request for an already validated prompt."""
        pass

    @abstractmethod
    def generate(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ImageGenerationResponse:
        """Generate image. Raises ImageGenerationError (or a subclass) on failure."""
        pass

    def close(self) -> None:
        """Release network resources held by the provider."""

    def ensure_available(self) -> None:
        if not self.is_available():
            raise ProviderNotConfiguredError(
                f"{self.display_name} API key is not configured",
                detail={"provider": self.name},
            )
