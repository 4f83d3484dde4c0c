"""Load tracker settings from config/settings.yaml, .env and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from job_tracker.errors import ConfigError
from job_tracker.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

DEFAULT_API_URL = "https://student-backend-0gu8.onrender.com/api/jobs"
DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _settings_path() -> Path:
    override = get_env("JOB_TRACKER_CONFIG")
    return Path(override) if override else SETTINGS_PATH


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")
    return data


def _parse_timeout(raw: Any) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"timeout must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {timeout}")
    return timeout


def load_settings(path: Path | None = None) -> Settings:
    """Resolve settings: defaults < YAML file < environment variables."""
    data = _read_yaml(path or _settings_path())

    base_url = get_env("JOB_TRACKER_API_URL") or str(data.get("api_base_url") or DEFAULT_API_URL)
    timeout = _parse_timeout(get_env("JOB_TRACKER_TIMEOUT") or data.get("timeout", DEFAULT_TIMEOUT))
    log_level = (get_env("LOG_LEVEL") or str(data.get("log_level") or "INFO")).upper()

    settings = Settings(api_base_url=base_url.rstrip("/"), timeout=timeout, log_level=log_level)
    log.debug("Settings resolved: api=%s timeout=%.1fs", settings.api_base_url, settings.timeout)
    return settings
