from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Literal, Optional


class AutomationConfig(BaseModel):
    """Random automation loop configuration"""
    enabled: bool = Field(False, description="Run the random automation loop on startup")
    interval: float = Field(5.0, gt=0, description="Seconds between random toggles")
    stop_timeout: float = Field(2.0, gt=0, description="Seconds to wait for the loop to exit on stop")


class EnergyConfig(BaseModel):
    """Defaults for energy monitoring decorators"""
    power_kw: float = Field(0.06, gt=0, description="Assumed power draw of a monitored device")
    cost_per_kwh: float = Field(0.12, ge=0, description="Electricity price per kWh")


class DeviceSpec(BaseModel):
    type: str
    name: str
    initial_temp: Optional[float] = Field(None, description="Starting temperature for thermostats")
    decorators: List[Literal["energy", "voice"]] = Field(default_factory=list)
    cost_per_kwh: Optional[float] = Field(None, ge=0, description="Overrides energy.cost_per_kwh")
    assistant: str = Field("Alexa", description="Voice assistant used by the voice decorator")

    @field_validator('type')
    def normalize_type(cls, v):
        return v.strip().lower()


class RoomSpec(BaseModel):
    name: str
    devices: List[str] = Field(default_factory=list)


class HomeConfig(BaseModel):
    devices: List[DeviceSpec] = Field(default_factory=list)
    rooms: List[RoomSpec] = Field(default_factory=list)
    strategy: Literal["manual", "scheduled", "automated"] = "manual"
    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    energy: EnergyConfig = Field(default_factory=EnergyConfig)
    logging: Dict[str, Any] = Field(default_factory=dict)
