"""
Provider request builders.
Pure functions: prompt + style -> ProviderRequest. No I/O, no shared schema
between providers.
"""
from imagestudio.services.image_generation.base import EmptyPromptError, ProviderRequest
from imagestudio.services.image_generation.styles import (
    enhance_prompt,
    model_for_style,
    normalize_style,
    size_for_aspect_ratio,
    size_to_dimensions,
)

PIXELIXE_SIZE = 512


def validate_prompt(prompt: str | None) -> str:
    """Return the trimmed prompt; empty prompts must never reach a provider."""
    text = (prompt or "").strip()
    if not text:
        raise EmptyPromptError("Prompt must not be empty")
    return text


def build_openai_request(
    prompt: str,
    style: str,
    *,
    api_key: str,
    url: str,
    model: str = "dall-e-3",
    quality: str = "standard",
    aspect_ratio: str | None = None,
) -> ProviderRequest:
    enhanced = enhance_prompt(validate_prompt(prompt), style)
    return ProviderRequest(
        provider="openai",
        url=url,
        enhanced_prompt=enhanced,
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        body={
            "model": model,
            "prompt": enhanced,
            "n": 1,
            "size": size_for_aspect_ratio(aspect_ratio),
            "quality": quality,
            "response_format": "url",
        },
    )


def build_deepai_request(
    prompt: str,
    style: str,
    *,
    api_key: str,
    url: str,
    aspect_ratio: str | None = None,
) -> ProviderRequest:
    """DeepAI takes multipart form fields; style only reaches it through the prompt text."""
    enhanced = enhance_prompt(validate_prompt(prompt), style)
    width, height = size_to_dimensions(size_for_aspect_ratio(aspect_ratio))
    return ProviderRequest(
        provider="deepai",
        url=url,
        enhanced_prompt=enhanced,
        headers={"api-key": api_key},
        body={"text": enhanced, "width": str(width), "height": str(height)},
        as_form=True,
    )


def build_pixelixe_request(prompt: str, style: str, *, api_key: str, url: str) -> ProviderRequest:
    text = validate_prompt(prompt)
    style_tag = normalize_style(style).value
    return ProviderRequest(
        provider="pixelixe",
        url=url,
        enhanced_prompt=enhance_prompt(text, style),
        headers={
            "Authorization": f"Bearer {api_key}",
            "Api-Key": api_key,
            "X-API-Key": api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        body={
            "prompt": text,
            "style": style_tag,
            "width": PIXELIXE_SIZE,
            "height": PIXELIXE_SIZE,
            "samples": 1,
        },
    )


def build_pixelixe_alt_request(prompt: str, style: str, *, api_key: str, url: str) -> ProviderRequest:
    """Alternate Pixelixe text-to-image endpoint: different field names, model per style."""
    text = validate_prompt(prompt)
    style_tag = normalize_style(style).value
    return ProviderRequest(
        provider="pixelixe",
        url=url,
        enhanced_prompt=enhance_prompt(text, style),
        headers={
            "Api-Key": api_key,
            "Content-Type": "application/json",
        },
        body={
            "text": text,
            "model": model_for_style(style_tag),
            "style": style_tag,
            "width": PIXELIXE_SIZE,
            "height": PIXELIXE_SIZE,
        },
    )
