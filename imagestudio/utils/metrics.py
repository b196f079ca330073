"""
Prometheus-based metrics for production monitoring.
Provides /metrics endpoint for scraping.
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response


# Counters
image_generations_total = Counter(
    "image_generations_total",
    "Total image generation requests by provider and outcome",
    ["provider", "outcome"],  # outcome: success, placeholder, config_error, provider_error, user_error
)

relay_requests_total = Counter(
    "relay_requests_total",
    "Total requests forwarded through the proxy relay",
    ["provider", "status"],
)

# Histograms
relay_request_duration_seconds = Histogram(
    "relay_request_duration_seconds",
    "Proxy relay request duration",
    ["provider"],
    buckets=[0.5, 1, 2, 5, 10, 30, 60, 120],
)


# Metrics endpoint router
router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
