"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from rcdash.errors import ConfigError
from rcdash.models.config import KubeConfig, LogConfig, RcdashConfig

_RE_DNS_LABEL = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"RCDASH_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_choice(name: str, value: str, valid: set[str]) -> str:
    if value.lower() not in valid:
        raise ConfigError(f"Invalid {name}: {value}. Must be one of {sorted(valid)}")
    return value.lower()


def _validate_namespace(value: str) -> str:
    if len(value) > 63 or not _RE_DNS_LABEL.fullmatch(value):
        raise ConfigError(f"Invalid namespace: {value!r}")
    return value


def load_config() -> RcdashConfig:
    """Load configuration from RCDASH_* environment variables."""
    return RcdashConfig(
        namespace=_validate_namespace(_env("NAMESPACE", "default")),
        kube=KubeConfig(
            in_cluster=_env_bool("IN_CLUSTER", True),
            kubeconfig=_env("KUBECONFIG", ""),
            context=_env("KUBE_CONTEXT", ""),
        ),
        log=LogConfig(
            level=_validate_choice("log level", _env("LOG_LEVEL", "info"), {"debug", "info", "warning", "error"}),
            format=_validate_choice("log format", _env("LOG_FORMAT", "json"), {"json", "console"}),
        ),
    )
