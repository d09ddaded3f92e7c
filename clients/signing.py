"""Request signing for the SwitchBot v1.1 API."""

from __future__ import annotations

import base64
import hashlib
import hmac
import time

from errors import SignatureError

# Sent verbatim in the ``nonce`` header and folded into every signature.
DEFAULT_NONCE = "nonce"


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def generate_signature(timestamp_ms: int, token: str, secret: str, nonce: str = DEFAULT_NONCE) -> str:
    """Return the base64 HMAC-SHA256 of ``token + timestamp + nonce`` keyed by ``secret``."""
    try:
        message = f"{token}{timestamp_ms}{nonce}".encode("utf-8")
        digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()
    except (TypeError, ValueError) as exc:
        raise SignatureError(f"failed to sign request: {exc}") from exc
    return base64.b64encode(digest).decode("ascii")


def signed_headers(token: str, secret: str, timestamp_ms: int, nonce: str = DEFAULT_NONCE) -> dict[str, str]:
    return {
        "Authorization": token,
        "sign": generate_signature(timestamp_ms, token, secret, nonce),
        "nonce": nonce,
        "t": str(timestamp_ms),
    }
