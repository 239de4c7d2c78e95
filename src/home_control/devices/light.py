from typing import Any, Dict, Optional
from .base import SmartDevice, check_range
from ..models.device import DeviceKind
from ..utils.logging import get_logger

logger = get_logger(__name__)

class Light(SmartDevice):
    """Dimmable light. Starts OFF at 0% brightness."""
    kind = DeviceKind.LIGHT
    ON_BRIGHTNESS = 100

    def __init__(self, name: str):
        super().__init__(name)
        self._brightness = 0

    @property
    def brightness(self) -> int:
        return self._brightness

    def turn_on(self) -> None:
        self._is_on = True
        self._brightness = self.ON_BRIGHTNESS
        logger.info(f"{self.name} turned ON - Brightness: {self._brightness}%")
        self.notify_observers()

    def turn_off(self) -> None:
        self._is_on = False
        self._brightness = 0
        logger.info(f"{self.name} turned OFF")
        self.notify_observers()

    def set_brightness(self, brightness: int) -> None:
        check_range(brightness, 0, 100, "Brightness")
        self._brightness = brightness
        # Brightness above zero implies the light is on
        self._is_on = brightness > 0
        logger.info(f"{self.name} brightness set to {brightness}%")
        self.notify_observers()

    def get_status(self) -> str:
        return f"{self.name} is {'ON' if self._is_on else 'OFF'}, Brightness: {self._brightness}%"

    def attributes(self) -> Dict[str, Any]:
        return {"brightness": self._brightness}

    def as_dimmable(self) -> Optional["Light"]:
        return self
