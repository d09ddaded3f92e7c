"""Unit tests for the line-protocol formatter."""

from __future__ import annotations

import pytest

from models.records import SensorReading
from services.formatter import MEASUREMENT_NAME, MetricsFormatter


def test_format_matches_expected_layout() -> None:
    reading = SensorReading(temperature=21.5, battery=87, humidity=45, co2=612)

    payload = MetricsFormatter().format(reading, "dev-1")

    assert payload == (
        "meterproco2_status,device_id=dev-1 temperature=21.500000\n"
        "meterproco2_status,device_id=dev-1 battery=87\n"
        "meterproco2_status,device_id=dev-1 humidity=45\n"
        "meterproco2_status,device_id=dev-1 co2=612\n"
    )


@pytest.mark.parametrize(
    "reading, device_id",
    [
        (SensorReading(temperature=-3.25, battery=0, humidity=100, co2=400), "ABCDEF012345"),
        (SensorReading(temperature=0.0, battery=100, humidity=0, co2=9999), "meter pro"),
    ],
)
def test_format_emits_four_tagged_lines_in_order(reading: SensorReading, device_id: str) -> None:
    payload = MetricsFormatter().format(reading, device_id)

    assert payload.endswith("\n")
    lines = payload.splitlines()
    assert len(lines) == 4
    for line in lines:
        assert line.startswith(f"{MEASUREMENT_NAME},device_id={device_id} ")
    assert [line.rsplit(" ", 1)[1].split("=")[0] for line in lines] == [
        "temperature",
        "battery",
        "humidity",
        "co2",
    ]


def test_negative_temperature_uses_fixed_precision() -> None:
    reading = SensorReading(temperature=-3.25, battery=1, humidity=2, co2=3)

    first_line = MetricsFormatter().format(reading, "d").splitlines()[0]

    assert first_line.endswith("temperature=-3.250000")
