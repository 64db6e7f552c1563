"""Integration tests for health, landing page and ambient middleware."""

import time
from datetime import datetime, timezone


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        body = response.json()
        assert body["status"] == "ok"
        stamp = _parse_timestamp(body["timestamp"])
        assert abs((datetime.now(timezone.utc) - stamp).total_seconds()) < 60

    def test_timestamp_is_fresh_per_call(self, client):
        first = _parse_timestamp(client.get("/health").json()["timestamp"])
        time.sleep(0.01)
        second = _parse_timestamp(client.get("/health").json()["timestamp"])
        assert second > first


class TestLandingPage:
    def test_serves_index_html(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Restaurant Store" in response.text

    def test_unknown_route_is_404(self, client):
        assert client.get("/api/unknown").status_code == 404


class TestRequestID:
    def test_generated_when_absent(self, client):
        response = client.get("/health")
        assert response.headers["X-Request-ID"]

    def test_incoming_id_is_echoed(self, client):
        response = client.get("/api/cart", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


class TestMetrics:
    def test_requests_are_counted(self, client):
        client.get("/api/menu")
        client.get("/api/orders/7")

        response = client.get("/metrics")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'path="/api/menu"' in response.text
        assert 'path="/api/orders/{order_id}"' in response.text
