# ticket_system/core/metrics.py
import time
from typing import Protocol

from fastapi import FastAPI, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)


class MetricsSink(Protocol):
    def ticket_operation(self, operation: str) -> None: ...

    def ticket_status_added(self, status: str) -> None: ...

    def ticket_status_removed(self, status: str) -> None: ...

    def error(self, kind: str) -> None: ...

    def http_request(self, method: str, endpoint: str, status_code: int, duration: float) -> None: ...


class PrometheusMetrics:
    """Prometheus-backed sink. Each instance owns its registry unless one is given."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        # HTTP metrics
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )
        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            ["method", "endpoint"],
            registry=self.registry,
        )

        # Ticket metrics
        self.ticket_operations_total = Counter(
            "ticket_operations_total",
            "Total number of ticket operations",
            ["operation", "status"],
            registry=self.registry,
        )
        self.ticket_status = Gauge(
            "ticket_status_total",
            "Total number of tickets by status",
            ["status"],
            registry=self.registry,
        )

        # Error metrics
        self.errors_total = Counter(
            "error_total",
            "Total number of errors",
            ["type"],
            registry=self.registry,
        )

    def ticket_operation(self, operation: str) -> None:
        self.ticket_operations_total.labels(operation=operation, status="success").inc()

    def ticket_status_added(self, status: str) -> None:
        self.ticket_status.labels(status=status).inc()

    def ticket_status_removed(self, status: str) -> None:
        self.ticket_status.labels(status=status).dec()

    def error(self, kind: str) -> None:
        self.errors_total.labels(type=kind).inc()

    def http_request(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        self.http_request_duration.labels(method=method, endpoint=endpoint).observe(duration)
        self.http_requests_total.labels(method=method, endpoint=endpoint, status=str(status_code)).inc()

    def value(self, name: str, labels: dict[str, str] | None = None) -> float:
        sample = self.registry.get_sample_value(name, labels or {})
        return sample if sample is not None else 0.0

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST


def get_metrics(request: Request) -> MetricsSink:
    return request.app.state.metrics


def install_metrics_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def record_request(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # the router stores the matched route on the shared scope
        route = request.scope.get("route")
        endpoint = getattr(route, "path", None) or "unknown"
        request.app.state.metrics.http_request(request.method, endpoint, response.status_code, elapsed)
        return response
