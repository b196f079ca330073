"""
Image URL extraction from provider responses whose shape varies by provider.

Extractors are tried in order and the first non-empty URL wins. To support a
new response shape, append an extractor to URL_EXTRACTORS.
"""
import logging
from typing import Any, Callable

from imagestudio.services.image_generation.base import ImageGenerationError, NoImageUrlError

logger = logging.getLogger(__name__)

Extractor = Callable[[dict[str, Any]], Any]


def _first_item(value: Any) -> dict[str, Any]:
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return {}


def _nested(key: str) -> Extractor:
    """Extractor for `<key>.url` where <key> is an object."""
    def extract(data: dict[str, Any]) -> Any:
        value = data.get(key)
        return value.get("url") if isinstance(value, dict) else None
    extract.__name__ = f"{key}_url"
    return extract


def _first_of(key: str) -> Extractor:
    """Extractor for `<key>[0].url` where <key> is a list."""
    def extract(data: dict[str, Any]) -> Any:
        return _first_item(data.get(key)).get("url")
    extract.__name__ = f"{key}_0_url"
    return extract


def _field(key: str) -> Extractor:
    def extract(data: dict[str, Any]) -> Any:
        return data.get(key)
    extract.__name__ = key
    return extract


URL_EXTRACTORS: list[Extractor] = [
    _field("url"),
    _nested("data"),
    _first_of("data"),  # OpenAI: {"data": [{"url": ...}]}
    _first_of("images"),
    _nested("result"),
    _nested("output"),
    _field("image_url"),
    _field("output_url"),  # DeepAI
]


def extract_url(raw: Any) -> str:
    """
    Return the first image URL found in a raw provider response.

    Raises:
        ImageGenerationError: no URL, but the body carries an error/message field
        NoImageUrlError: no URL and no error field
    """
    if not isinstance(raw, dict):
        raise NoImageUrlError("No image URL found in response", detail={"response_type": type(raw).__name__})

    for extractor in URL_EXTRACTORS:
        url = extractor(raw)
        if isinstance(url, str) and url:
            logger.debug("image url matched extractor %s", extractor.__name__)
            return url

    error = raw.get("error") or raw.get("message")
    if error:
        if isinstance(error, dict):
            error = error.get("message") or str(error)
        raise ImageGenerationError(str(error), detail={"response_keys": sorted(raw.keys())})

    logger.error("Unexpected response structure", extra={"error": ",".join(sorted(raw.keys()))})
    raise NoImageUrlError("No image URL found in response", detail={"response_keys": sorted(raw.keys())})


def extract_revised_prompt(raw: Any) -> str | None:
    """OpenAI returns the prompt it actually used as data[0].revised_prompt."""
    if not isinstance(raw, dict):
        return None
    revised = _first_item(raw.get("data")).get("revised_prompt")
    return revised if isinstance(revised, str) and revised else None
