from __future__ import annotations

import json
import logging
import time
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from clients.schemas import SUCCESS_STATUS_CODE, DeviceStatusResponse
from clients.signing import DEFAULT_NONCE, current_millis, signed_headers
from errors import DecodeError, RequestBuildError, RequestError, ResponseReadError
from models.records import SensorReading
from settings import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SWITCHBOT_BASE_URL

logger = logging.getLogger(__name__)


class SwitchBotClient:
    """Signed HTTP client for the SwitchBot cloud device status API."""

    def __init__(
        self,
        token: str,
        secret: str,
        base_url: str = DEFAULT_SWITCHBOT_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], int] = current_millis,
        nonce: str = DEFAULT_NONCE,
    ) -> None:
        self._token = token
        self._secret = secret
        self._clock = clock
        self._nonce = nonce
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SwitchBotClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_device_status(self, device_id: str) -> SensorReading:
        timestamp_ms = self._clock()
        headers = signed_headers(self._token, self._secret, timestamp_ms, self._nonce)

        try:
            request = self._client.build_request(
                "GET", f"/v1.1/devices/{device_id}/status", headers=headers
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise RequestBuildError(f"failed to create request: {exc}", stage="fetch") from exc

        start = time.perf_counter()
        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise RequestError(f"failed to send request: {exc}") from exc

        try:
            raw = response.read()
        except httpx.HTTPError as exc:
            raise ResponseReadError(f"failed to read response body: {exc}") from exc
        finally:
            response.close()

        logger.debug(
            "Fetched device status",
            extra={
                "device_id": device_id,
                "status_code": response.status_code,
                "elapsed_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return self._parse_status(raw, device_id, response.status_code)

    @staticmethod
    def _parse_status(raw: bytes, device_id: str, http_status: int) -> SensorReading:
        try:
            envelope = DeviceStatusResponse.model_validate_json(raw)
        except ValidationError as exc:
            context = _vendor_context(raw, http_status)
            raise DecodeError(f"failed to decode response body ({context}): {exc}") from exc

        if envelope.status_code is not None and envelope.status_code != SUCCESS_STATUS_CODE:
            logger.warning(
                "Vendor reported status %s: %s",
                envelope.status_code,
                envelope.message or "no message",
                extra={"device_id": device_id},
            )
        return envelope.body.to_reading()


def _vendor_context(raw: bytes, http_status: int) -> str:
    """Best-effort summary of what the vendor said in a body that failed validation."""
    parts = [f"http_status={http_status}"]
    try:
        document = json.loads(raw)
    except ValueError:
        return parts[0]
    if isinstance(document, dict):
        for key in ("statusCode", "message"):
            if document.get(key) is not None:
                parts.append(f"{key}={document[key]!r}")
    return ", ".join(parts)
