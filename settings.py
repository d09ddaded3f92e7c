from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from errors import ConfigMissing

DEFAULT_SWITCHBOT_BASE_URL = "https://api.switch-bot.com"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"

_TOKEN_ENV = "SWITCH_BOT_TOKEN"
_CLIENT_SECRET_ENV = "SWITCH_BOT_CLIENT_SECRET"
_DEVICE_ID_ENV = "CO2_DEVICE_ID"
_API_KEY_ENV = "API_KEY"
_PUSH_URL_ENV = "PUSH_URL"
_BASE_URL_ENV = "SWITCH_BOT_API_BASE_URL"
_TIMEOUT_ENV = "REQUEST_TIMEOUT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

REQUIRED_ENV = (
    _TOKEN_ENV,
    _CLIENT_SECRET_ENV,
    _DEVICE_ID_ENV,
    _API_KEY_ENV,
    _PUSH_URL_ENV,
)


@dataclass(frozen=True)
class Settings:
    switchbot_token: str
    switchbot_client_secret: str
    device_id: str
    api_key: str
    push_url: str
    switchbot_base_url: str = DEFAULT_SWITCHBOT_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_required_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def read_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


def load_settings() -> Settings:
    """Read the relay settings from the environment.

    Raises ConfigMissing naming every required variable that is absent or
    blank, so the process can abort before any network activity.
    """
    required = {name: _read_required_env(name) for name in REQUIRED_ENV}
    missing = [name for name, value in required.items() if value is None]
    if missing:
        raise ConfigMissing(missing)

    return Settings(
        switchbot_token=required[_TOKEN_ENV],
        switchbot_client_secret=required[_CLIENT_SECRET_ENV],
        device_id=required[_DEVICE_ID_ENV],
        api_key=required[_API_KEY_ENV],
        push_url=required[_PUSH_URL_ENV],
        switchbot_base_url=_read_str_env(_BASE_URL_ENV, DEFAULT_SWITCHBOT_BASE_URL).rstrip("/"),
        request_timeout=_read_timeout(DEFAULT_REQUEST_TIMEOUT),
    )
