"""Configuration loader for the ICE portal client."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from iceportal.data.endpoints import DEFAULT_USER_AGENT


@dataclass(frozen=True)
class PortalConfig:
    """ICE portal API configuration."""

    status_url: str
    trip_url: str
    user_agent: str
    timeout_seconds: float


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    portal: PortalConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    user_agent = os.environ.get("ICEPORTAL_USER_AGENT", "").strip() or DEFAULT_USER_AGENT
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    portal_section = _require_key(data, "portal", "portal")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(portal_section, dict):
        raise ValueError("'portal' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    portal = PortalConfig(
        status_url=_require_key(portal_section, "status_url", "portal"),
        trip_url=_require_key(portal_section, "trip_url", "portal"),
        user_agent=user_agent,
        timeout_seconds=_require_key(portal_section, "timeout_seconds", "portal"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(portal=portal, log=logging)
