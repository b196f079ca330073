"""
Pixelixe provider.
The response contract of the primary endpoint is not fixed, so the URL is
probed with the shared normalizer. When the primary endpoint answers without
any image URL, the alternate text-to-image endpoint gets one attempt.
"""
import logging

from imagestudio.services.image_generation.base import (
    ImageGenerationProvider,
    ImageGenerationResponse,
    NoImageUrlError,
    ProviderRequest,
)
from imagestudio.services.image_generation.normalizer import extract_url
from imagestudio.services.image_generation.relay import ProxyRelay
from imagestudio.services.image_generation.request_builder import (
    build_pixelixe_alt_request,
    build_pixelixe_request,
)
from imagestudio.services.image_generation.styles import model_for_style

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://studio.pixelixe.com/api/compress/v1?imageUrl=https://yoururl.com/image.png"
DEFAULT_ALT_API_URL = "https://api.pixelixe.com/v1/ai/text-to-image"


class PixelixeProvider(ImageGenerationProvider):
    """Pixelixe image generation via the proxy relay."""

    name = "pixelixe"
    display_name = "Pixelixe"
    uses_relay = True

    def __init__(self, config: dict, relay: ProxyRelay | None = None):
        super().__init__(config)
        self.api_key = config.get("api_key") or ""
        self.api_url = config.get("api_url") or DEFAULT_API_URL
        self.alt_api_url = config.get("alt_api_url") or DEFAULT_ALT_API_URL
        self.relay = relay or ProxyRelay(
            config.get("proxy_url", ""),
            config.get("proxy_token", ""),
            timeout=config.get("timeout", 120.0),
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    def close(self) -> None:
        self.relay.close()

    def get_supported_models(self) -> list[str]:
        return ["stable-diffusion", "artistic", "anime", "3d-render"]

    def build_request(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ProviderRequest:
        # Pixelixe renders at a fixed 512x512; aspect ratio is not forwarded
        return build_pixelixe_request(prompt, style, api_key=self.api_key, url=self.api_url)

    def generate(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ImageGenerationResponse:
        self.ensure_available()
        request = self.build_request(prompt, style, aspect_ratio)
        logger.info("Attempting Pixelixe API call", extra={"target_url": request.url, "style": style})

        data = self.relay.send(request, label=self.display_name)
        try:
            image_url = extract_url(data)
        except NoImageUrlError:
            logger.info("Trying alternative Pixelixe endpoint", extra={"target_url": self.alt_api_url})
            return self._generate_alternative(prompt, style)

        return ImageGenerationResponse(image_url=image_url, provider=self.name)

    def _generate_alternative(self, prompt: str, style: str) -> ImageGenerationResponse:
        request = build_pixelixe_alt_request(prompt, style, api_key=self.api_key, url=self.alt_api_url)
        data = self.relay.send(request, label=self.display_name)
        return ImageGenerationResponse(
            image_url=extract_url(data),
            provider=self.name,
            model=model_for_style(style),
        )
