"""
OpenAI DALL-E provider for image generation.
Calls go through the proxy relay. The relay is authenticated with its own token;
the OpenAI bearer key travels inside the envelope headers.
"""
import logging

from imagestudio.services.image_generation.base import (
    ImageGenerationProvider,
    ImageGenerationResponse,
    ProviderRequest,
)
from imagestudio.services.image_generation.normalizer import extract_revised_prompt, extract_url
from imagestudio.services.image_generation.relay import ProxyRelay
from imagestudio.services.image_generation.request_builder import build_openai_request

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.openai.com/v1/images/generations"


class OpenAIProvider(ImageGenerationProvider):
    """OpenAI DALL-E image generation provider."""

    name = "openai"
    display_name = "OpenAI"
    uses_relay = True

    def __init__(self, config: dict, relay: ProxyRelay | None = None):
        super().__init__(config)
        self.api_key = config.get("api_key") or ""
        self.api_url = config.get("api_url") or DEFAULT_API_URL
        self.model = config.get("model") or "dall-e-3"
        self.quality = config.get("quality") or "standard"
        self.relay = relay or ProxyRelay(
            config.get("proxy_url", ""),
            config.get("proxy_token", ""),
            timeout=config.get("timeout", 120.0),
        )

    def is_available(self) -> bool:
        """Check if OpenAI is configured."""
        return bool(self.api_key)

    def close(self) -> None:
        self.relay.close()

    def get_supported_models(self) -> list[str]:
        return ["dall-e-2", "dall-e-3"]

    def build_request(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ProviderRequest:
        return build_openai_request(
            prompt,
            style,
            api_key=self.api_key,
            url=self.api_url,
            model=self.model,
            quality=self.quality,
            aspect_ratio=aspect_ratio,
        )

    def generate(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ImageGenerationResponse:
        self.ensure_available()
        request = self.build_request(prompt, style, aspect_ratio)
        logger.info(
            "Attempting OpenAI API call",
            extra={"target_url": request.url, "model": self.model, "style": style},
        )

        data = self.relay.send(request, label=self.display_name)
        image_url = extract_url(data)

        revised_prompt = extract_revised_prompt(data)
        if revised_prompt:
            logger.info("OpenAI revised prompt", extra={"revised_prompt": revised_prompt})

        return ImageGenerationResponse(
            image_url=image_url,
            provider=self.name,
            model=self.model,
            revised_prompt=revised_prompt,
        )
