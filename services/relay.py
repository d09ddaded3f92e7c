"""Fetch, format and push orchestration for a single device."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from clients.pusher import MetricsPusher
from clients.switchbot import SwitchBotClient
from models.records import MetricsPayload, SensorReading
from services.formatter import MetricsFormatter
from settings import Settings

logger = logging.getLogger(__name__)


class RelayService:
    """Runs one relay pass: read the device, render metrics, push them once."""

    def __init__(
        self,
        device_id: str,
        switchbot: SwitchBotClient,
        pusher: MetricsPusher,
        formatter: MetricsFormatter,
    ) -> None:
        self.device_id = device_id
        self.switchbot = switchbot
        self.pusher = pusher
        self.formatter = formatter

    def fetch(self) -> SensorReading:
        logger.info("Fetching device status", extra={"device_id": self.device_id})
        return self.switchbot.get_device_status(self.device_id)

    def render(self, reading: SensorReading) -> MetricsPayload:
        return self.formatter.format(reading, self.device_id)

    def collect(self) -> MetricsPayload:
        return self.render(self.fetch())

    def push(self, payload: MetricsPayload) -> None:
        logger.info("Pushing metrics", extra={"device_id": self.device_id})
        self.pusher.push(payload)

    def run(
        self,
        *,
        dry_run: bool = False,
        on_payload: Optional[Callable[[MetricsPayload], None]] = None,
    ) -> MetricsPayload:
        """Collect the payload, hand it to ``on_payload`` and push it unless ``dry_run``."""
        payload = self.collect()
        if on_payload is not None:
            on_payload(payload)
        if dry_run:
            logger.info("Dry run, metrics not pushed", extra={"device_id": self.device_id})
            return payload
        self.push(payload)
        return payload

    def close(self) -> None:
        self.switchbot.close()
        self.pusher.close()


def build_relay(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> RelayService:
    """Factory that wires the relay from explicit settings."""
    switchbot = SwitchBotClient(
        token=settings.switchbot_token,
        secret=settings.switchbot_client_secret,
        base_url=settings.switchbot_base_url,
        timeout=settings.request_timeout,
        transport=transport,
    )
    pusher = MetricsPusher(
        url=settings.push_url,
        api_key=settings.api_key,
        timeout=settings.request_timeout,
        transport=transport,
    )
    return RelayService(
        device_id=settings.device_id,
        switchbot=switchbot,
        pusher=pusher,
        formatter=MetricsFormatter(),
    )
