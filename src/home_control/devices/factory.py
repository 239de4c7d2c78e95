from typing import Callable, Dict, List
from .base import SmartDevice
from .light import Light
from .thermostat import Thermostat
from .speaker import Speaker
from .fan import FanAdapter, LegacyFan
from ..utils.exceptions import UnknownDeviceType
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CURRENT_TEMP = 70.0

class DeviceFactory:
    """Factory for creating device instances keyed by a type tag"""
    _device_types: Dict[str, Callable[[str], SmartDevice]] = {
        "light": Light,
        "thermostat": lambda name: Thermostat(name, DEFAULT_CURRENT_TEMP),
        "speaker": Speaker,
        "fan": lambda name: FanAdapter(LegacyFan(name))
    }

    @classmethod
    def register_device_type(cls, device_type: str, builder: Callable[[str], SmartDevice]) -> None:
        """Register a new device type"""
        cls._device_types[device_type.lower()] = builder

    @classmethod
    def available_types(cls) -> List[str]:
        return sorted(cls._device_types)

    @classmethod
    def create_device(cls, device_type: str, name: str) -> SmartDevice:
        """Create a device instance based on type (case-insensitive)"""
        tag = device_type.lower()
        if tag not in cls._device_types:
            raise UnknownDeviceType(
                f"Unknown device type: {device_type}. Valid types: {', '.join(cls.available_types())}"
            )
        logger.info(f"Creating {tag}: {name}")
        return cls._device_types[tag](name)

    @classmethod
    def create_thermostat(cls, name: str, current_temp: float) -> Thermostat:
        logger.info(f"Creating thermostat: {name} (Current temp: {current_temp}°F)")
        return Thermostat(name, current_temp)
