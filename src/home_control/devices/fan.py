# Adapter exposing a legacy fan through the SmartDevice interface
from typing import Any, Dict
from .base import SmartDevice
from ..models.device import DeviceKind, FanSpeed
from ..utils.logging import get_logger

logger = get_logger(__name__)


class LegacyFan:
    """Fan with its own start/stop/speed API. Speeds: 0-3 (OFF, LOW, MEDIUM, HIGH)."""
    def __init__(self, fan_name: str):
        self.fan_name = fan_name
        self.is_running = False
        self.speed = FanSpeed.OFF.value
        logger.info(f"Legacy fan initialized: {fan_name}")

    def start_fan(self) -> None:
        self.is_running = True
        self.speed = FanSpeed.LOW.value
        logger.info(f"{self.fan_name} started at speed {self.speed}")

    def stop_fan(self) -> None:
        self.is_running = False
        self.speed = FanSpeed.OFF.value
        logger.info(f"{self.fan_name} stopped")

    def set_speed(self, speed: int) -> bool:
        if isinstance(speed, bool) or not isinstance(speed, int) or speed not in {s.value for s in FanSpeed}:
            logger.warning(f"Invalid speed {speed!r} for {self.fan_name}! Must be 0-3")
            return False
        self.speed = speed
        self.is_running = speed > 0
        logger.info(f"{self.fan_name} speed set to: {FanSpeed(speed).name}")
        return True

    def get_fan_status(self) -> str:
        return f"{self.fan_name} is {'RUNNING' if self.is_running else 'STOPPED'} at speed: {FanSpeed(self.speed).name}"


class FanAdapter(SmartDevice):
    """Translates turn_on/turn_off/set_fan_speed into LegacyFan calls"""
    kind = DeviceKind.FAN

    def __init__(self, legacy_fan: LegacyFan):
        super().__init__(legacy_fan.fan_name)
        self.legacy_fan = legacy_fan
        logger.info(f"Created adapter for: {legacy_fan.fan_name}")

    @property
    def is_on(self) -> bool:
        return self.legacy_fan.is_running

    @property
    def fan_speed(self) -> int:
        return self.legacy_fan.speed

    def turn_on(self) -> None:
        self.legacy_fan.start_fan()
        self.notify_observers()

    def turn_off(self) -> None:
        self.legacy_fan.stop_fan()
        self.notify_observers()

    def set_fan_speed(self, speed: int) -> bool:
        """Returns False (and leaves the fan untouched) for speeds outside 0-3"""
        if not self.legacy_fan.set_speed(speed):
            return False
        self.notify_observers()
        return True

    def get_status(self) -> str:
        return self.legacy_fan.get_fan_status()

    def attributes(self) -> Dict[str, Any]:
        return {"fan_speed": self.legacy_fan.speed}
