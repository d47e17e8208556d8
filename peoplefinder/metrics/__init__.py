# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the peoplefinder service."""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "peoplefinder_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "peoplefinder_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "peoplefinder_http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)

# ── Business Metrics (updated by service layer only) ──
DIRECTORY_REQUESTS = Counter(
    "peoplefinder_directory_requests_total",
    "Outbound requests to the PeopleFinder endpoint",
    ["outcome"],
)
DIRECTORY_LATENCY = Histogram(
    "peoplefinder_directory_request_seconds",
    "Latency of outbound PeopleFinder requests",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
SELECTIONS = Counter(
    "peoplefinder_selections_total",
    "Field selections by field and outcome",
    ["field", "outcome"],
)
