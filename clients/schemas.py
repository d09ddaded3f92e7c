"""Pydantic schemas for the SwitchBot device status envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models.records import SensorReading

SUCCESS_STATUS_CODE = 100


class MeterProCO2Body(BaseModel):
    """Sensor values reported under ``body`` by the status endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)

    temperature: float
    battery: int
    humidity: int
    co2: int = Field(..., alias="CO2")

    def to_reading(self) -> SensorReading:
        return SensorReading(
            temperature=self.temperature,
            battery=self.battery,
            humidity=self.humidity,
            co2=self.co2,
        )


class DeviceStatusResponse(BaseModel):
    """Outer response wrapper returned by ``/v1.1/devices/{id}/status``.

    Only ``body`` is validated; ``statusCode`` and ``message`` are carried
    through as sent so they can be reported.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status_code: Any = Field(None, alias="statusCode")
    body: MeterProCO2Body
    message: Any = None
