"""Line-protocol rendering for sensor readings."""

from __future__ import annotations

from models.records import MetricsPayload, SensorReading

MEASUREMENT_NAME = "meterproco2_status"


class MetricsFormatter:
    """Pure formatting component that can be unit tested in isolation."""

    def __init__(self, measurement: str = MEASUREMENT_NAME) -> None:
        self.measurement = measurement

    def format(self, reading: SensorReading, device_id: str) -> MetricsPayload:
        # Tag and field values are written verbatim; nothing is escaped.
        fields = (
            ("temperature", f"{reading.temperature:f}"),
            ("battery", f"{reading.battery:d}"),
            ("humidity", f"{reading.humidity:d}"),
            ("co2", f"{reading.co2:d}"),
        )
        return "".join(
            f"{self.measurement},device_id={device_id} {key}={value}\n"
            for key, value in fields
        )
