from pydantic import BaseModel, Field
from typing import Any, Dict
from enum import Enum


class DeviceKind(str, Enum):
    LIGHT = "light"
    THERMOSTAT = "thermostat"
    SPEAKER = "speaker"
    FAN = "fan"
    GROUP = "group"


class ThermostatMode(str, Enum):
    OFF = "off"
    HEATING = "heating"
    COOLING = "cooling"
    MAINTAINING = "maintaining"


class FanSpeed(int, Enum):
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class DeviceState(BaseModel):
    """Point-in-time snapshot of a device for external collaborators"""
    name: str
    kind: DeviceKind
    is_on: bool
    attributes: Dict[str, Any] = Field(default_factory=dict)
