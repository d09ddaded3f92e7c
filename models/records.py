"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SensorReading:
    """A single MeterPro CO2 reading taken from the vendor status endpoint."""

    temperature: float
    battery: int
    humidity: int
    co2: int


# Newline-terminated line-protocol text produced by the formatter.
MetricsPayload = str
