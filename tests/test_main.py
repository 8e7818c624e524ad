"""Tests for configuration and the entry point."""

import pytest
import socket
from unittest.mock import patch

from cronpoll.config import Settings
from cronpoll.main import main


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("API_HOST", "API_PORT", "SCHEDULE_EXPRESSION", "POLL_URL"):
            monkeypatch.delenv(f"CRONPOLL_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 8080
        assert settings.schedule_expression == "1/50 * * * * * *"
        assert settings.scheduler_utc_offset == 0
        assert settings.poll_url == "https://httpbin.org/ip"
        assert settings.http_timeout > 0

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CRONPOLL_API_PORT", "9090")
        monkeypatch.setenv("CRONPOLL_SCHEDULE_EXPRESSION", "*/10 * * * * *")
        monkeypatch.setenv("CRONPOLL_POLLER_ENABLED", "false")

        settings = Settings(_env_file=None)

        assert settings.api_port == 9090
        assert settings.schedule_expression == "*/10 * * * * *"
        assert settings.poller_enabled is False


class TestMain:
    """Test command line startup."""

    def test_runs_server_with_cli_overrides(self):
        with patch('cronpoll.main.uvicorn.run') as mock_run:
            exit_code = main(["--host", "0.0.0.0", "--port", "9000", "--schedule", "0 0 0 1 1 *"])

        assert exit_code == 0
        mock_run.assert_called_once()
        call_args = mock_run.call_args
        assert call_args[1]["host"] == "0.0.0.0"
        assert call_args[1]["port"] == 9000

    def test_invalid_schedule_exits_before_binding(self, caplog):
        with patch('cronpoll.main.uvicorn.run') as mock_run:
            exit_code = main(["--schedule", "every fifty seconds"])

        assert exit_code == 1
        mock_run.assert_not_called()
        assert "Fatal error" in caplog.text

    def test_keyboard_interrupt_is_clean_exit(self):
        with patch('cronpoll.main.uvicorn.run', side_effect=KeyboardInterrupt):
            assert main(["--schedule", "0 0 0 1 1 *"]) == 0

    def test_cli_schedule_overrides_bad_environment(self):
        """A valid --schedule wins over an invalid configured one."""
        bad_settings = Settings(_env_file=None, schedule_expression="bad")

        with patch('cronpoll.main.default_settings', bad_settings), \
                patch('cronpoll.main.uvicorn.run') as mock_run:
            exit_code = main(["--schedule", "0 0 0 1 1 *"])

        assert exit_code == 0
        mock_run.assert_called_once()

    def test_api_module_builds_nothing_on_import(self):
        import cronpoll.api.http_server as http_server

        assert not hasattr(http_server, "app")

    def test_port_in_use_fails_fast(self, caplog):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
            blocker.bind(("127.0.0.1", 0))
            blocker.listen(1)
            port = blocker.getsockname()[1]

            exit_code = main(["--host", "127.0.0.1", "--port", str(port), "--schedule", "0 0 0 1 1 *"])

        assert exit_code == 1
        assert f"failed to start on 127.0.0.1:{port}" in caplog.text

    def test_clean_uvicorn_exit_propagates(self):
        with patch('cronpoll.main.uvicorn.run', side_effect=SystemExit(0)):
            with pytest.raises(SystemExit):
                main(["--schedule", "0 0 0 1 1 *"])
