"""Tests for the CLI entrypoint."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from burgtv.interfaces.cli import cli


class TestParseArgs:
    def test_defaults(self) -> None:
        args = cli._parse_args([])
        assert args.host is None
        assert args.port is None
        assert args.config is None
        assert args.log_level is None

    def test_all_flags(self) -> None:
        args = cli._parse_args(
            [
                "--host",
                "127.0.0.1",
                "--port",
                "8080",
                "--config",
                "config.yaml",
                "--environment",
                "prod",
                "--log-level",
                "DEBUG",
                "--log-format",
                "json",
            ]
        )
        assert args.host == "127.0.0.1"
        assert args.port == 8080
        assert args.config == "config.yaml"
        assert args.environment == "prod"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            cli._parse_args(["--log-level", "TRACE"])


class TestBuildCliOverrides:
    def test_empty_when_no_flags(self) -> None:
        assert cli.build_cli_overrides(cli._parse_args([])) == {}

    def test_only_set_flags(self) -> None:
        args = cli._parse_args(["--log-level", "ERROR", "--environment", "test"])
        assert cli.build_cli_overrides(args) == {
            "environment": "test",
            "log_level": "ERROR",
        }


class TestStart:
    @pytest.fixture()
    def run(self, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
        run = MagicMock()
        monkeypatch.setattr(cli.uvicorn, "run", run)
        monkeypatch.setattr(
            cli, "configure_logging", MagicMock(return_value={"version": 1})
        )
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        return run

    def test_default_bind(self, run: MagicMock) -> None:
        cli.start([])

        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3000
        assert kwargs["log_config"] == {"version": 1}

    def test_env_bind(self, run: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "8000")

        cli.start([])

        _, kwargs = run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8000

    def test_flags_beat_env(
        self, run: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "8000")

        cli.start(["--port", "9000"])

        assert run.call_args.kwargs["port"] == 9000

    def test_app_built_from_loaded_config(
        self, run: MagicMock, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "config.yaml"
        config_path.write_text("environment: test\n", encoding="utf-8")

        cli.start(["--config", str(config_path), "--log-level", "DEBUG"])

        app = run.call_args.args[0]
        assert app.state.config.environment == "test"
        assert app.state.config.log_level == "DEBUG"
        cli.configure_logging.assert_called_once_with(app.state.config)
