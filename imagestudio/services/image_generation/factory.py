"""
Factory for creating image generation providers based on configuration.
"""
from typing import Optional
import logging

from imagestudio.services.image_generation.base import ImageGenerationProvider
from imagestudio.services.image_generation.providers.deepai import DeepAIProvider
from imagestudio.services.image_generation.providers.openai import OpenAIProvider
from imagestudio.services.image_generation.providers.pixelixe import PixelixeProvider

logger = logging.getLogger(__name__)


class ImageProviderFactory:
    """Factory for creating image generation providers."""

    PROVIDERS: dict[str, type[ImageGenerationProvider]] = {
        "openai": OpenAIProvider,
        "deepai": DeepAIProvider,
        "pixelixe": PixelixeProvider,
    }

    @classmethod
    def create(cls, provider_name: str, config: dict) -> ImageGenerationProvider:
        """
        Create provider instance by name.

        Args:
            provider_name: Name of provider (openai, deepai, pixelixe)
            config: Provider-specific configuration dict

        Returns:
            Initialized provider instance

        Raises:
            ValueError: If provider name is unknown
        """
        provider_class = cls.PROVIDERS.get(provider_name.strip().lower())

        if not provider_class:
            available = ", ".join(cls.PROVIDERS.keys())
            raise ValueError(
                f"Unknown provider: {provider_name}. "
                f"Available providers: {available}"
            )

        logger.info(f"Creating image provider: {provider_name}")
        provider = provider_class(config)

        if not provider.is_available():
            logger.warning(f"Provider {provider_name} created but not fully configured")

        return provider

    @classmethod
    def config_from_settings(cls, settings, provider_name: str) -> dict:
        """Build the provider config dict from application settings."""
        relay = {
            "proxy_url": settings.proxy_url,
            "proxy_token": settings.proxy_server_access_token,
            "timeout": settings.http_client_timeout,
        }
        if provider_name == "openai":
            return {
                **relay,
                "api_key": settings.openai_api_key,
                "api_url": settings.openai_api_url,
                "model": settings.openai_image_model,
                "quality": settings.openai_image_quality,
            }
        if provider_name == "deepai":
            return {
                "api_key": settings.deepai_api_key,
                "api_url": settings.deepai_api_url,
                "timeout": settings.http_client_timeout,
            }
        if provider_name == "pixelixe":
            return {
                **relay,
                "api_key": settings.pixelixe_api_key,
                "api_url": settings.pixelixe_api_url,
                "alt_api_url": settings.pixelixe_alt_api_url,
            }
        raise ValueError(f"Provider {provider_name} not supported in settings")

    @classmethod
    def create_from_settings(cls, settings, provider_override: Optional[str] = None) -> ImageGenerationProvider:
        """
        Create provider from application settings.

        Args:
            settings: Application settings object
            provider_override: If set, use this provider name instead of settings.image_provider
        """
        provider_name = ((provider_override or "").strip() or settings.image_provider).lower()
        return cls.create(provider_name, cls.config_from_settings(settings, provider_name))

    @classmethod
    def create_chain_from_settings(cls, settings) -> list[ImageGenerationProvider]:
        """Primary provider followed by configured fallbacks, without duplicates."""
        names: list[str] = []
        for name in [settings.image_provider, *settings.fallback_providers_list]:
            if name not in names:
                names.append(name)
        return [cls.create_from_settings(settings, name) for name in names]

    @classmethod
    def get_available_providers(cls) -> list[str]:
        """Get list of all provider names."""
        return list(cls.PROVIDERS.keys())
