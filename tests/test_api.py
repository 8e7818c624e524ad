"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from cronpoll.api.http_server import create_app
from cronpoll.config import Settings
from cronpoll.scheduler import CronSchedule, CronScheduler, InvalidScheduleError


@pytest.fixture
def client():
    """Create test client without the poller."""
    return TestClient(create_app(Settings(poller_enabled=False)))


class TestHelloEndpoint:
    """Test the greeting route."""

    def test_hello(self, client):
        response = client.get("/hello")

        assert response.status_code == 200
        assert response.text == "Hello World!"
        assert response.headers["content-type"].startswith("text/plain")

    def test_hello_ignores_query_and_headers(self, client):
        response = client.get(
            "/hello",
            params={"name": "someone", "debug": "1"},
            headers={"Accept": "application/json", "X-Custom": "value"}
        )

        assert response.status_code == 200
        assert response.text == "Hello World!"

    @pytest.mark.parametrize("path", ["/", "/hello/", "/health", "/docs", "/redoc", "/openapi.json", "/hello/world"])
    def test_other_paths_not_found(self, client, path):
        response = client.get(path, follow_redirects=False)

        assert response.status_code != 200

    def test_unknown_path_is_404(self, client):
        assert client.get("/nope").status_code == 404

    def test_other_methods_rejected(self, client):
        response = client.post("/hello")

        assert response.status_code == 405


class TestLifespan:
    """Test the app owns the scheduler for its lifetime."""

    def test_scheduler_started_and_stopped(self):
        scheduler = CronScheduler(CronSchedule("0 0 0 1 1 *"), AsyncMock())
        app = create_app(Settings(poller_enabled=False), scheduler=scheduler)

        with TestClient(app) as client:
            assert client.get("/hello").status_code == 200
            assert app.state.scheduler is scheduler
            assert scheduler.running is True

        assert scheduler.running is False

    def test_poller_built_from_settings(self):
        app = create_app(Settings(schedule_expression="0 0 0 1 1 *", poll_url="http://example.com/ip"))

        with TestClient(app):
            scheduler = app.state.scheduler
            assert isinstance(scheduler, CronScheduler)
            assert scheduler.job.url == "http://example.com/ip"
            assert scheduler.running is True

        assert scheduler.running is False

    def test_poller_disabled(self):
        app = create_app(Settings(poller_enabled=False))

        with TestClient(app):
            assert app.state.scheduler is None

    def test_invalid_schedule_fails_fast(self):
        with pytest.raises(InvalidScheduleError):
            create_app(Settings(schedule_expression="1/50 * * *"))
