"""
Proxy relay transport.
The relay receives an envelope {url, method, headers, body}, performs the real
provider call server-side with the enclosed headers and returns the provider's
raw response body. The relay itself is authenticated with its own token.

No retry and no backoff: a non-2xx response or a network fault is final.
"""
import json
import logging
import time
from typing import Any

import httpx

from imagestudio.services.image_generation.base import (
    ImageResponseShapeError,
    ProviderRequest,
    QuotaExceededError,
    RateLimitError,
    ProviderTransportError,
)
from imagestudio.utils.metrics import relay_request_duration_seconds, relay_requests_total

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a few moments."


def build_status_error(status_code: int, reason: str, error_text: str, label: str) -> ProviderTransportError:
    """
    Map a non-2xx response to the most specific error.
    Quota and rate-limit wording is detected by substring in the raw error text.
    """
    message = f"{label} request failed: {status_code} {reason}".rstrip()
    try:
        error_data = json.loads(error_text)
        error = error_data.get("error") if isinstance(error_data, dict) else None
        if isinstance(error, dict) and error.get("message"):
            message = f"{label} API error: {error['message']}"
    except json.JSONDecodeError:
        pass

    detail = {"http_status": status_code, "reason": reason}
    if "rate_limit" in error_text or "rate_limit" in message:
        return RateLimitError(RATE_LIMIT_MESSAGE, detail=detail)
    if "insufficient_quota" in error_text or "insufficient_quota" in message:
        return QuotaExceededError(f"{label} API quota exceeded. Please check your billing.", detail=detail)
    return ProviderTransportError(message, detail=detail)


def parse_json_body(text: str) -> Any:
    """Parse a 2xx body; anything but JSON is a shape error."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ImageResponseShapeError(f"Invalid response from API: {text[:200]}") from e


def check_response(response: httpx.Response, label: str) -> Any:
    """Raise on non-2xx, otherwise return the parsed JSON body."""
    if not response.is_success:
        error_text = response.text
        logger.error(
            f"{label} error response",
            extra={"status_code": response.status_code, "error": error_text[:500]},
        )
        raise build_status_error(response.status_code, response.reason_phrase, error_text, label)
    return parse_json_body(response.text)


class ProxyRelay:
    """Sync relay client. One httpx client per relay, created lazily."""

    def __init__(
        self,
        proxy_url: str,
        access_token: str,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.proxy_url = proxy_url
        self.access_token = access_token
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy initialization of httpx client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def relay(
        self,
        target_url: str,
        method: str,
        headers: dict[str, str],
        body: Any,
        label: str = "Relay",
    ) -> Any:
        """
        Forward one request through the relay and return the parsed provider body.

        Raises:
            ProviderTransportError: network fault or non-2xx status (RateLimitError / QuotaExceededError
                when the error text says so)
            ImageResponseShapeError: 2xx body that is not JSON
        """
        envelope = {
            "url": target_url,
            "method": method,
            "headers": headers,
            "body": body,
        }
        relay_headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }
        start = time.time()
        try:
            response = self.client.post(self.proxy_url, headers=relay_headers, json=envelope)
        except httpx.HTTPError as e:
            self._record(label, "network_error", time.time() - start)
            logger.warning(
                "relay_request_failed",
                extra={"target_url": target_url, "error": str(e), "error_type": type(e).__name__},
            )
            raise ProviderTransportError(f"{label} request failed: {e}", detail={"error_type": type(e).__name__}) from e

        self._record(label, str(response.status_code), time.time() - start)
        logger.info(
            "relay_request",
            extra={
                "target_url": target_url,
                "status_code": response.status_code,
                "latency_ms": int((time.time() - start) * 1000),
            },
        )
        return check_response(response, label)

    def send(self, request: ProviderRequest, label: str = "Relay") -> Any:
        return self.relay(request.url, request.method, request.headers, request.body, label=label)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _record(self, label: str, status: str, duration: float) -> None:
        provider = label.lower()
        relay_requests_total.labels(provider=provider, status=status).inc()
        relay_request_duration_seconds.labels(provider=provider).observe(duration)
