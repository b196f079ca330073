"""
Runner: walks the provider chain once, classifies failures and logs every attempt.
No retries: each provider gets exactly one attempt, first real image URL wins.
"""
import logging
from typing import Any

from imagestudio.services.image_generation.base import (
    ImageGenerationError,
    ImageGenerationProvider,
    ImageGenerationResponse,
    UserFacingProviderError,
)
from imagestudio.services.image_generation.request_builder import validate_prompt
from imagestudio.utils.metrics import image_generations_total

logger = logging.getLogger(__name__)

# Keys for structured logging
LOG_KEYS = (
    "provider",
    "style",
    "outcome",
    "error",
    "error_type",
    "status_code",
    "model",
)


def generate_with_fallback(
    providers: list[ImageGenerationProvider],
    prompt: str,
    style: str,
    aspect_ratio: str | None = None,
) -> ImageGenerationResponse | None:
    """
    Try providers in order; return the first response, or None when all failed.

    Raises before any network call:
        EmptyPromptError: blank prompt
        ProviderNotConfiguredError: the primary provider has no API key
    Raises after a call:
        UserFacingProviderError: rate limit / quota wording meant for the user
    """
    validate_prompt(prompt)
    if not providers:
        raise ValueError("No image providers configured")

    primary = providers[0]
    try:
        primary.ensure_available()
    except ImageGenerationError:
        image_generations_total.labels(provider=primary.name, outcome="config_error").inc()
        raise

    for provider in providers:
        if not provider.is_available():
            logger.warning("image_provider_skipped", extra={"provider": provider.name, "error": "not configured"})
            continue
        try:
            result = provider.generate(prompt, style, aspect_ratio)
        except UserFacingProviderError as e:
            image_generations_total.labels(provider=provider.name, outcome="user_error").inc()
            _log_structured(
                provider=provider.name,
                style=style,
                outcome="user_error",
                error=str(e),
                error_type=type(e).__name__,
                status_code=e.detail.get("http_status"),
            )
            raise
        except ImageGenerationError as e:
            image_generations_total.labels(provider=provider.name, outcome="provider_error").inc()
            _log_structured(
                provider=provider.name,
                style=style,
                outcome="provider_error",
                error=str(e),
                error_type=type(e).__name__,
                status_code=e.detail.get("http_status"),
            )
            continue

        image_generations_total.labels(provider=provider.name, outcome="success").inc()
        _log_structured(provider=provider.name, style=style, outcome="success", model=result.model)
        return result

    return None


def _log_structured(**kwargs: Any) -> None:
    """Emit one structured log line per provider attempt."""
    extra = {k: v for k, v in kwargs.items() if k in LOG_KEYS and v is not None}
    logger.info("image_generation_result", extra=extra)
