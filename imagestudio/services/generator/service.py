"""
Image generator service: prompt -> provider chain -> GeneratedImage in history.

Every request resolves to an image. Provider failures degrade silently to the
style placeholder; only precondition failures (blank prompt, missing key of the
primary provider) and rate-limit/quota errors reach the caller.
"""
import logging

import httpx

from imagestudio.gallery import GalleryHistory, GeneratedImage
from imagestudio.services.image_generation import (
    ImageGenerationProvider,
    ImageProviderFactory,
    generate_with_fallback,
    normalize_style,
    placeholder_for,
)
from imagestudio.services.image_generation.styles import DEFAULT_ASPECT_RATIO, DEFAULT_STYLE, normalize_aspect_ratio
from imagestudio.utils.metrics import image_generations_total

logger = logging.getLogger(__name__)


class ImageDownloadError(Exception):
    pass


class ImageGeneratorService:
    def __init__(
        self,
        providers: list[ImageGenerationProvider],
        history: GalleryHistory,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.providers = providers
        self.history = history
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "ImageGeneratorService":
        return cls(
            providers=ImageProviderFactory.create_chain_from_settings(settings),
            history=GalleryHistory(seed_samples=settings.history_seed_samples),
            timeout=settings.http_client_timeout,
        )

    @property
    def primary_provider(self) -> ImageGenerationProvider:
        return self.providers[0]

    def close(self) -> None:
        for provider in self.providers:
            provider.close()

    def generate_image(
        self,
        prompt: str,
        style: str = DEFAULT_STYLE.value,
        aspect_ratio: str = DEFAULT_ASPECT_RATIO,
    ) -> GeneratedImage:
        """
        Generate one image and prepend it to the history.

        Raises:
            EmptyPromptError, ProviderNotConfiguredError, UserFacingProviderError
        """
        prompt = prompt.strip() if prompt else ""
        aspect_ratio = normalize_aspect_ratio(aspect_ratio)
        logger.info("Starting image generation", extra={"style": style})
        result = generate_with_fallback(self.providers, prompt, style, aspect_ratio)

        if result is None:
            url = placeholder_for(style)
            image_generations_total.labels(provider="placeholder", outcome="placeholder").inc()
            logger.warning("placeholder_used", extra={"style": style, "url": url})
            image = GeneratedImage(
                prompt=prompt,
                url=url,
                style=normalize_style(style),
                aspect_ratio=aspect_ratio,
                is_placeholder=True,
            )
        else:
            image = GeneratedImage(
                prompt=prompt,
                url=result.image_url,
                style=normalize_style(style),
                aspect_ratio=aspect_ratio,
                provider=result.provider,
                revised_prompt=result.revised_prompt,
            )

        self.history.add(image)
        logger.info("Received image URL", extra={"image_id": image.id, "url": image.url, "provider": image.provider})
        return image

    def download(self, image: GeneratedImage) -> tuple[bytes, str]:
        """Fetch image bytes for saving; returns (content, content_type)."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport, follow_redirects=True) as client:
                response = client.get(image.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Download failed", extra={"image_id": image.id, "error": str(e)})
            raise ImageDownloadError(f"Download failed: {e}") from e
        return response.content, response.headers.get("content-type", "image/png")
