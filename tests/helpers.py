from __future__ import annotations

import json
from typing import Callable, Dict, List

import httpx

STATUS_PAYLOAD = {
    "statusCode": 100,
    "body": {"temperature": 21.5, "battery": 87, "humidity": 45, "CO2": 612},
    "message": "success",
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def status_response(payload: Dict | None = None) -> httpx.Response:
    return httpx.Response(200, content=json.dumps(payload or STATUS_PAYLOAD).encode())
