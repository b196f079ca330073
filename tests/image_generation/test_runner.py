"""Tests for generate_with_fallback: provider chain ordering and error propagation."""
import unittest
from unittest.mock import MagicMock

from imagestudio.services.image_generation.base import (
    EmptyPromptError,
    ImageGenerationResponse,
    NoImageUrlError,
    ProviderNotConfiguredError,
    ProviderTransportError,
    QuotaExceededError,
    RateLimitError,
)
from imagestudio.services.image_generation.runner import generate_with_fallback


def fake_provider(name: str, available: bool = True, result=None, error: Exception | None = None) -> MagicMock:
    provider = MagicMock()
    provider.name = name
    provider.is_available.return_value = available
    if not available:
        provider.ensure_available.side_effect = ProviderNotConfiguredError(f"{name} API key is not configured")
    if error is not None:
        provider.generate.side_effect = error
    else:
        provider.generate.return_value = result or ImageGenerationResponse(image_url=f"https://{name}/img.png", provider=name)
    return provider


class TestGenerateWithFallback(unittest.TestCase):
    def test_primary_success(self):
        primary = fake_provider("openai")
        fallback = fake_provider("deepai")
        result = generate_with_fallback([primary, fallback], "a cat", "realistic")
        self.assertEqual(result.image_url, "https://openai/img.png")
        fallback.generate.assert_not_called()

    def test_fallback_after_transport_error(self):
        primary = fake_provider("openai", error=ProviderTransportError("OpenAI request failed: 500"))
        fallback = fake_provider("pixelixe")
        result = generate_with_fallback([primary, fallback], "a cat", "anime", "16:9")
        self.assertEqual(result.provider, "pixelixe")
        fallback.generate.assert_called_once_with("a cat", "anime", "16:9")

    def test_all_failed_returns_none(self):
        primary = fake_provider("openai", error=NoImageUrlError("No image URL found in response"))
        fallback = fake_provider("deepai", error=ProviderTransportError("DeepAI request failed: 502"))
        self.assertIsNone(generate_with_fallback([primary, fallback], "a cat", "anime"))

    def test_unconfigured_fallback_is_skipped(self):
        primary = fake_provider("openai", error=ProviderTransportError("boom"))
        skipped = fake_provider("deepai", available=False)
        last = fake_provider("pixelixe")
        result = generate_with_fallback([primary, skipped, last], "a cat", "3d")
        self.assertEqual(result.provider, "pixelixe")
        skipped.generate.assert_not_called()

    def test_unconfigured_primary_raises_before_any_call(self):
        primary = fake_provider("openai", available=False)
        fallback = fake_provider("deepai")
        with self.assertRaises(ProviderNotConfiguredError):
            generate_with_fallback([primary, fallback], "a cat", "realistic")
        primary.generate.assert_not_called()
        fallback.generate.assert_not_called()

    def test_blank_prompt_raises(self):
        primary = fake_provider("openai")
        with self.assertRaises(EmptyPromptError):
            generate_with_fallback([primary], "  \n ", "realistic")
        primary.generate.assert_not_called()

    def test_rate_limit_propagates(self):
        primary = fake_provider("openai", error=RateLimitError("Rate limit exceeded.", detail={"http_status": 429}))
        fallback = fake_provider("deepai")
        with self.assertRaises(RateLimitError):
            generate_with_fallback([primary, fallback], "a cat", "realistic")
        fallback.generate.assert_not_called()

    def test_quota_propagates(self):
        primary = fake_provider("openai", error=QuotaExceededError("OpenAI API quota exceeded."))
        with self.assertRaises(QuotaExceededError):
            generate_with_fallback([primary], "a cat", "realistic")

    def test_empty_chain(self):
        with self.assertRaises(ValueError):
            generate_with_fallback([], "a cat", "realistic")
