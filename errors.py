"""Error hierarchy for the relay pipeline."""

from __future__ import annotations

from typing import Iterable, Optional


class RelayError(Exception):
    """Base class for every failure that aborts a relay run."""

    stage: str = "relay"

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class ConfigMissing(RelayError):
    stage = "config"

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"Missing required environment variable(s): {', '.join(self.missing)}"
        )


class SignatureError(RelayError):
    stage = "sign"


class RequestBuildError(RelayError):
    """The outbound request could not be constructed (bad URL, bad header)."""


class TransportError(RelayError):
    """Network-level failure on one of the outbound calls."""


class RequestError(TransportError):
    stage = "fetch"


class PushTransportError(TransportError):
    stage = "push"


class ResponseReadError(RelayError):
    stage = "fetch"


class DecodeError(RelayError):
    stage = "decode"


class PushRejected(RelayError):
    """The push endpoint answered with a non-2xx status."""

    stage = "push"

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"received non-2xx response: {status_code}, body: {body}")
