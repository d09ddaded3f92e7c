from __future__ import annotations

from typing import Dict

import pytest

RELAY_ENV = {
    "SWITCH_BOT_TOKEN": "token-abc",
    "SWITCH_BOT_CLIENT_SECRET": "secret-xyz",
    "CO2_DEVICE_ID": "dev-1",
    "API_KEY": "push-key",
    "PUSH_URL": "https://metrics.example.test/api/v1/push",
}


@pytest.fixture
def relay_env(monkeypatch) -> Dict[str, str]:
    for key, value in RELAY_ENV.items():
        monkeypatch.setenv(key, value)
    for key in ("SWITCH_BOT_API_BASE_URL", "REQUEST_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return dict(RELAY_ENV)
