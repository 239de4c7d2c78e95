from typing import Any, Dict, Optional
from .base import SmartDevice, check_range
from ..models.device import DeviceKind, ThermostatMode
from ..utils.exceptions import ValidationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

class Thermostat(SmartDevice):
    """
    Climate controller working in °F.
    The target is kept while off; turning off only idles the mode.
    """
    kind = DeviceKind.THERMOSTAT
    MIN_TARGET = 50
    MAX_TARGET = 90
    DEFAULT_TARGET = 72.0

    def __init__(self, name: str, current_temp: float = 70.0):
        super().__init__(name)
        self._current_temp = float(current_temp)
        self._target_temp = self.DEFAULT_TARGET
        self._mode = ThermostatMode.OFF

    @property
    def current_temp(self) -> float:
        return self._current_temp

    @property
    def target_temp(self) -> float:
        return self._target_temp

    @property
    def mode(self) -> ThermostatMode:
        return self._mode

    def turn_on(self) -> None:
        self._is_on = True
        self._update_mode()
        logger.info(f"{self.name} turned ON - Mode: {self._mode.value}, Target: {self._target_temp}°F")
        self.notify_observers()

    def turn_off(self) -> None:
        self._is_on = False
        self._mode = ThermostatMode.OFF
        logger.info(f"{self.name} turned OFF")
        self.notify_observers()

    def set_target_temp(self, target_temp: float) -> None:
        check_range(target_temp, self.MIN_TARGET, self.MAX_TARGET, "Target temperature")
        self._target_temp = float(target_temp)
        if self._is_on:
            self._update_mode()
        logger.info(f"{self.name} target temperature set to {self._target_temp}°F")
        self.notify_observers()

    def set_mode(self, mode) -> None:
        try:
            mode = ThermostatMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown thermostat mode: {mode}")
        self._mode = mode
        logger.info(f"{self.name} mode changed to: {mode.value}")
        self.notify_observers()

    def settle(self) -> None:
        """Bring the measured temperature to the target"""
        self._current_temp = self._target_temp
        if self._is_on:
            self._update_mode()
        logger.info(f"{self.name} current temperature adjusted to {self._current_temp}°F")
        self.notify_observers()

    def _update_mode(self) -> None:
        if not self._is_on:
            self._mode = ThermostatMode.OFF
        elif self._current_temp < self._target_temp:
            self._mode = ThermostatMode.HEATING
        elif self._current_temp > self._target_temp:
            self._mode = ThermostatMode.COOLING
        else:
            self._mode = ThermostatMode.MAINTAINING

    def get_status(self) -> str:
        return (
            f"{self.name} is {'ON' if self._is_on else 'OFF'}, "
            f"Current: {self._current_temp}°F, "
            f"Target: {self._target_temp}°F, "
            f"Mode: {self._mode.value}"
        )

    def attributes(self) -> Dict[str, Any]:
        return {
            "current_temp": self._current_temp,
            "target_temp": self._target_temp,
            "mode": self._mode.value
        }

    def as_climate_controlled(self) -> Optional["Thermostat"]:
        return self
