from __future__ import annotations

import logging
from typing import Optional

import httpx

from errors import PushRejected, PushTransportError, RequestBuildError
from models.records import MetricsPayload
from settings import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class MetricsPusher:
    """Posts line-protocol payloads to the ingestion endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MetricsPusher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def push(self, payload: MetricsPayload) -> None:
        headers = {
            "Content-Type": "text/plain",
            "Authorization": f"Bearer {self._api_key}",
        }
        try:
            request = self._client.build_request(
                "POST", self._url, content=payload.encode("utf-8"), headers=headers
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise RequestBuildError(f"failed to create request: {exc}", stage="push") from exc

        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise PushTransportError(f"failed to send metrics: {exc}") from exc

        try:
            if 200 <= response.status_code < 300:
                logger.debug(
                    "Push accepted",
                    extra={"status_code": response.status_code, "url": self._url},
                )
                return
            raise PushRejected(response.status_code, self._read_body(response))
        finally:
            response.close()

    @staticmethod
    def _read_body(response: httpx.Response) -> str:
        try:
            response.read()
            return response.text
        except httpx.HTTPError:
            logger.debug("Could not read body of rejected push", exc_info=True)
            return ""
