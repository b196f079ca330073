"""
DeepAI text2img provider.
DeepAI accepts browser-origin requests, so it is called directly with
multipart form fields instead of going through the relay.
"""
import logging

import httpx

from imagestudio.services.image_generation.base import (
    ImageGenerationProvider,
    ImageGenerationResponse,
    ProviderRequest,
    ProviderTransportError,
)
from imagestudio.services.image_generation.normalizer import extract_url
from imagestudio.services.image_generation.relay import check_response
from imagestudio.services.image_generation.request_builder import build_deepai_request

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.deepai.org/api/text2img"


class DeepAIProvider(ImageGenerationProvider):
    """DeepAI text-to-image provider."""

    name = "deepai"
    display_name = "DeepAI"

    def __init__(self, config: dict):
        super().__init__(config)
        self.api_key = config.get("api_key") or ""
        self.api_url = config.get("api_url") or DEFAULT_API_URL
        self.timeout = config.get("timeout", 120.0)
        self.transport: httpx.BaseTransport | None = config.get("transport")

    def is_available(self) -> bool:
        return bool(self.api_key)

    def get_supported_models(self) -> list[str]:
        return ["text2img"]

    def build_request(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ProviderRequest:
        return build_deepai_request(
            prompt,
            style,
            api_key=self.api_key,
            url=self.api_url,
            aspect_ratio=aspect_ratio,
        )

    def generate(self, prompt: str, style: str, aspect_ratio: str | None = None) -> ImageGenerationResponse:
        self.ensure_available()
        request = self.build_request(prompt, style, aspect_ratio)
        logger.info("Attempting DeepAI API call", extra={"target_url": request.url, "style": style})

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                if request.as_form:
                    # multipart/form-data, one part per field
                    files = {key: (None, value) for key, value in request.body.items()}
                    response = client.post(request.url, headers=request.headers, files=files)
                else:
                    response = client.post(request.url, headers=request.headers, json=request.body)
        except httpx.HTTPError as e:
            raise ProviderTransportError(
                f"{self.display_name} request failed: {e}",
                detail={"error_type": type(e).__name__},
            ) from e

        data = check_response(response, self.display_name)
        return ImageGenerationResponse(
            image_url=extract_url(data),
            provider=self.name,
            model="text2img",
        )
