"""Monitoring and metrics collection.

This module provides Prometheus metrics collection and monitoring
functionality for the application.
"""

import time

from prometheus_client import Counter, Histogram, Info
import structlog

logger = structlog.get_logger(__name__)

# Prometheus metrics
request_count = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"]
)

request_duration = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"]
)

external_service_requests = Counter(
    "external_service_requests_total",
    "Total requests to external services",
    ["service", "status_code"]
)

external_service_duration = Histogram(
    "external_service_request_duration_seconds",
    "External service request duration in seconds",
    ["service"]
)

error_count = Counter(
    "errors_total",
    "Total number of errors",
    ["type", "component"]
)

# Application info
app_info = Info(
    "app_info",
    "Application information"
)


def setup_monitoring(name: str, version: str) -> None:
    """Setup monitoring and metrics collection.

    Args:
        name: Application name.
        version: Application version.
    """
    logger.info("Setting up monitoring")

    app_info.info({
        "version": version,
        "name": name,
    })


def track_request(method: str, endpoint: str, status_code: int, duration: float) -> None:
    """Track HTTP request metrics.

    Args:
        method: HTTP method.
        endpoint: Request endpoint.
        status_code: Response status code.
        duration: Request duration in seconds.
    """
    request_count.labels(
        method=method,
        endpoint=endpoint,
        status_code=status_code
    ).inc()

    request_duration.labels(
        method=method,
        endpoint=endpoint
    ).observe(duration)


def track_error(error_type: str, component: str) -> None:
    """Track error occurrence.

    Args:
        error_type: Type of error.
        component: Component where error occurred.
    """
    error_count.labels(type=error_type, component=component).inc()


class ExternalCallTimer:
    """Times one call to an external service and records it on exit.

    Set ``status_code`` once a response arrives. Calls that end without a
    response (timeouts, connection errors) are counted under status 0.
    Exceptions are never suppressed.
    """

    def __init__(self, service: str) -> None:
        self.service = service
        self.status_code = 0
        self.duration = 0.0
        self.start_time = None

    def __enter__(self) -> "ExternalCallTimer":
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.duration = time.time() - self.start_time
        external_service_requests.labels(
            service=self.service,
            status_code=self.status_code
        ).inc()
        external_service_duration.labels(service=self.service).observe(self.duration)
