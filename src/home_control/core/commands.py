# Reversible commands executed through the Controller
from abc import ABC, abstractmethod
from ..devices.base import SmartDevice
from ..utils.exceptions import ValidationError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """One reversible state change. undo() reapplies what execute() replaced."""

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description}>"


class TurnOnCommand(Command):
    def __init__(self, device: SmartDevice):
        self._device = device

    @property
    def device(self) -> SmartDevice:
        return self._device

    def execute(self) -> None:
        logger.info(f"Executing: Turn On {self._device.name}")
        self._device.turn_on()

    def undo(self) -> None:
        logger.info(f"Undoing: Turn On {self._device.name} (turning off)")
        self._device.turn_off()

    @property
    def description(self) -> str:
        return f"Turn On: {self._device.name}"


class TurnOffCommand(Command):
    def __init__(self, device: SmartDevice):
        self._device = device

    @property
    def device(self) -> SmartDevice:
        return self._device

    def execute(self) -> None:
        logger.info(f"Executing: Turn Off {self._device.name}")
        self._device.turn_off()

    def undo(self) -> None:
        logger.info(f"Undoing: Turn Off {self._device.name} (turning on)")
        self._device.turn_on()

    @property
    def description(self) -> str:
        return f"Turn Off: {self._device.name}"


class AdjustBrightnessCommand(Command):
    """Captures the brightness in effect when the command is built"""
    def __init__(self, device: SmartDevice, new_brightness: int):
        light = device.as_dimmable()
        if light is None:
            raise ValidationError(f"{device.name} does not support brightness")
        self._light = light
        self._new_brightness = new_brightness
        self._previous_brightness = light.brightness

    @property
    def new_brightness(self) -> int:
        return self._new_brightness

    @property
    def previous_brightness(self) -> int:
        return self._previous_brightness

    def execute(self) -> None:
        logger.info(f"Executing: Adjust {self._light.name} brightness to {self._new_brightness}%")
        self._light.set_brightness(self._new_brightness)

    def undo(self) -> None:
        logger.info(f"Undoing: Adjust {self._light.name} brightness (restoring to {self._previous_brightness}%)")
        self._light.set_brightness(self._previous_brightness)

    @property
    def description(self) -> str:
        return f"Adjust Brightness: {self._light.name} ({self._previous_brightness}% → {self._new_brightness}%)"


class AdjustTemperatureCommand(Command):
    """Captures the target temperature in effect when the command is built"""
    def __init__(self, device: SmartDevice, new_temp: float):
        thermostat = device.as_climate_controlled()
        if thermostat is None:
            raise ValidationError(f"{device.name} does not support target temperature")
        self._thermostat = thermostat
        self._new_temp = new_temp
        self._previous_temp = thermostat.target_temp

    @property
    def new_temp(self) -> float:
        return self._new_temp

    @property
    def previous_temp(self) -> float:
        return self._previous_temp

    def execute(self) -> None:
        logger.info(f"Executing: Adjust {self._thermostat.name} to {self._new_temp}°F")
        self._thermostat.set_target_temp(self._new_temp)

    def undo(self) -> None:
        logger.info(f"Undoing: Adjust {self._thermostat.name} (restoring to {self._previous_temp}°F)")
        self._thermostat.set_target_temp(self._previous_temp)

    @property
    def description(self) -> str:
        return f"Adjust Temperature: {self._thermostat.name} ({self._previous_temp}°F → {self._new_temp}°F)"
