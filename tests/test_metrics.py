# tests/test_metrics.py
from ticket_system.core.metrics import PrometheusMetrics


def test_registries_are_per_instance():
    first = PrometheusMetrics()
    second = PrometheusMetrics()
    first.error("invalid_id")
    assert first.value("error_total", {"type": "invalid_id"}) == 1
    assert second.value("error_total", {"type": "invalid_id"}) == 0


def test_status_gauge_moves_both_ways():
    sink = PrometheusMetrics()
    sink.ticket_status_added("open")
    sink.ticket_status_added("open")
    sink.ticket_status_removed("open")
    assert sink.value("ticket_status_total", {"status": "open"}) == 1


def test_requests_are_recorded_by_route_template(client, metrics):
    client.get("/health")
    client.get("/api/v1/tickets/not-a-uuid")

    assert metrics.value("http_requests_total", {"method": "GET", "endpoint": "/health", "status": "200"}) == 1
    assert (
        metrics.value(
            "http_requests_total",
            {"method": "GET", "endpoint": "/api/v1/tickets/{ticket_id}", "status": "400"},
        )
        == 1
    )
    client.get("/api/v1/admin/users")
    assert (
        metrics.value(
            "http_requests_total",
            {"method": "GET", "endpoint": "/api/v1/admin/users", "status": "401"},
        )
        == 1
    )
    assert metrics.value("http_request_duration_seconds_count", {"method": "GET", "endpoint": "/health"}) == 1


def test_unmatched_path_is_unknown(client, metrics):
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert metrics.value("http_requests_total", {"method": "GET", "endpoint": "unknown", "status": "404"}) == 1


def test_metrics_endpoint_exposes_series(client):
    client.post("/api/v1/tickets/", json={"title": "T", "description": "D", "created_by": "a@x.com"})

    r = client.get("/metrics")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert "# HELP http_requests_total" in r.text
    assert 'ticket_operations_total{operation="create",status="success"} 1.0' in r.text
    assert 'ticket_status_total{status="open"} 1.0' in r.text
