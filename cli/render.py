from __future__ import annotations

from typing import Any, Iterable

import typer

from models.records import SensorReading


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_reading(reading: SensorReading, device_id: str) -> None:
    echo_heading("MeterPro CO2 Status")
    echo_key_values(
        [
            ("device_id", device_id),
            ("temperature", reading.temperature),
            ("humidity", f"{reading.humidity}%"),
            ("co2", f"{reading.co2} ppm"),
            ("battery", f"{reading.battery}%"),
        ]
    )


def render_payload(payload: str) -> None:
    typer.echo(payload, nl=False)
