"""Tests for the proxy relay transport (httpx.MockTransport, no network)."""
import json
import unittest

import httpx

from imagestudio.services.image_generation.base import (
    ImageResponseShapeError,
    ProviderTransportError,
    QuotaExceededError,
    RateLimitError,
)
from imagestudio.services.image_generation.relay import (
    RATE_LIMIT_MESSAGE,
    ProxyRelay,
    build_status_error,
)

PROXY_URL = "https://proxy.example.com/proxy"


def make_relay(handler) -> ProxyRelay:
    return ProxyRelay(PROXY_URL, "relay-token", timeout=5.0, transport=httpx.MockTransport(handler))


class TestProxyRelay(unittest.TestCase):
    def test_envelope_and_relay_auth(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            seen["envelope"] = json.loads(request.content)
            return httpx.Response(200, json={"data": [{"url": "https://img/x.png"}]})

        relay = make_relay(handler)
        result = relay.relay(
            "https://api.openai.com/v1/images/generations",
            "POST",
            {"Authorization": "Bearer sk-provider"},
            {"prompt": "a cat"},
            label="OpenAI",
        )

        self.assertEqual(result, {"data": [{"url": "https://img/x.png"}]})
        self.assertEqual(seen["url"], PROXY_URL)
        self.assertEqual(seen["auth"], "Bearer relay-token")
        self.assertEqual(
            seen["envelope"],
            {
                "url": "https://api.openai.com/v1/images/generations",
                "method": "POST",
                "headers": {"Authorization": "Bearer sk-provider"},
                "body": {"prompt": "a cat"},
            },
        )

    def test_rate_limit_wording(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                429,
                json={"error": {"message": "Rate limit reached for images", "code": "rate_limit_exceeded"}},
            )

        with self.assertRaises(RateLimitError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="OpenAI")
        self.assertEqual(str(ctx.exception), RATE_LIMIT_MESSAGE)
        self.assertEqual(ctx.exception.detail["http_status"], 429)

    def test_quota_wording(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                429,
                json={"error": {"message": "You exceeded your current quota", "code": "insufficient_quota"}},
            )

        with self.assertRaises(QuotaExceededError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="OpenAI")
        self.assertEqual(str(ctx.exception), "OpenAI API quota exceeded. Please check your billing.")

    def test_generic_status_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="upstream exploded")

        with self.assertRaises(ProviderTransportError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="OpenAI")
        self.assertNotIsInstance(ctx.exception, RateLimitError)
        self.assertEqual(str(ctx.exception), "OpenAI request failed: 500 Internal Server Error")
        self.assertEqual(ctx.exception.detail["http_status"], 500)

    def test_error_message_from_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": {"message": "Your prompt was rejected"}})

        with self.assertRaises(ProviderTransportError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="OpenAI")
        self.assertEqual(str(ctx.exception), "OpenAI API error: Your prompt was rejected")

    def test_network_fault(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(ProviderTransportError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="OpenAI")
        self.assertEqual(ctx.exception.detail["error_type"], "ConnectError")

    def test_non_json_success_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway page</html>")

        with self.assertRaises(ImageResponseShapeError) as ctx:
            make_relay(handler).relay("https://t", "POST", {}, {}, label="Pixelixe")
        self.assertIn("Invalid response from API: <html>", str(ctx.exception))

    def test_no_retry_on_failure(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, text="unavailable")

        with self.assertRaises(ProviderTransportError):
            make_relay(handler).relay("https://t", "POST", {}, {})
        self.assertEqual(len(calls), 1)


def test_build_status_error_plain_text_rate_limit():
    error = build_status_error(429, "Too Many Requests", "rate_limit: slow down", "OpenAI")
    assert isinstance(error, RateLimitError)


def test_build_status_error_without_reason():
    error = build_status_error(418, "", "", "Relay")
    assert str(error) == "Relay request failed: 418"
