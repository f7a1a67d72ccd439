"""Tests for RCDASH_* configuration loading and logging setup."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from rcdash.config import load_config
from rcdash.errors import ConfigError
from rcdash.models.config import LogConfig
from rcdash.observability.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("LOG_LEVEL", "LOG_FORMAT", "NAMESPACE", "KUBECONFIG", "KUBE_CONTEXT", "IN_CLUSTER"):
        monkeypatch.delenv(f"RCDASH_{key}", raising=False)


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.namespace == "default"
        assert config.kube.in_cluster is True
        assert config.kube.kubeconfig == ""
        assert config.kube.context == ""
        assert config.log.level == "info"
        assert config.log.format == "json"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RCDASH_NAMESPACE", "team-a")
        monkeypatch.setenv("RCDASH_IN_CLUSTER", "no")
        monkeypatch.setenv("RCDASH_KUBECONFIG", "/etc/kube/config")
        monkeypatch.setenv("RCDASH_KUBE_CONTEXT", "staging")
        monkeypatch.setenv("RCDASH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RCDASH_LOG_FORMAT", "console")

        config = load_config()

        assert config.namespace == "team-a"
        assert config.kube.in_cluster is False
        assert config.kube.kubeconfig == "/etc/kube/config"
        assert config.kube.context == "staging"
        assert config.log.level == "debug"
        assert config.log.format == "console"

    @pytest.mark.parametrize("namespace", ["Team", "-a", "a_b", "n" * 64, "", "default\n"])
    def test_invalid_namespace(self, monkeypatch: pytest.MonkeyPatch, namespace: str) -> None:
        monkeypatch.setenv("RCDASH_NAMESPACE", namespace)
        with pytest.raises(ConfigError):
            load_config()

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RCDASH_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigError, match="log level"):
            load_config()

    def test_invalid_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RCDASH_LOG_FORMAT", "xml")
        with pytest.raises(ValueError):
            load_config()


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self) -> Iterator[None]:
        yield
        structlog.reset_defaults()

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LogConfig(level="info"))
        get_logger("test").info("hello", namespace="mock")

        line = capsys.readouterr().err.strip()
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["component"] == "test"
        assert record["namespace"] == "mock"
        assert record["level"] == "info"
        assert "ts" in record

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LogConfig(level="warning"))
        get_logger("test").info("dropped")
        assert capsys.readouterr().err == ""
