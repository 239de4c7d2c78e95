from typing import Any, Dict, Optional
from .base import SmartDevice, check_range
from ..models.device import DeviceKind
from ..utils.logging import get_logger

logger = get_logger(__name__)

class Speaker(SmartDevice):
    """Implementation for speaker devices"""
    kind = DeviceKind.SPEAKER
    ON_VOLUME = 50

    def __init__(self, name: str):
        super().__init__(name)
        self._volume = 0
        self._now_playing: Optional[str] = None

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def now_playing(self) -> Optional[str]:
        return self._now_playing

    def turn_on(self) -> None:
        self._power_on()
        logger.info(f"{self.name} turned ON - Volume: {self._volume}%")
        self.notify_observers()

    def turn_off(self) -> None:
        self._is_on = False
        self._volume = 0
        self._now_playing = None
        logger.info(f"{self.name} turned OFF")
        self.notify_observers()

    def set_volume(self, volume: int) -> None:
        check_range(volume, 0, 100, "Volume")
        self._volume = volume
        if volume > 0:
            self._is_on = True
        logger.info(f"{self.name} volume set to {volume}%")
        self.notify_observers()

    def play(self, content: str) -> None:
        if not self._is_on:
            self._power_on()
        self._now_playing = content
        logger.info(f"{self.name} now playing: {content}")
        self.notify_observers()

    def stop(self) -> None:
        self._now_playing = None
        logger.info(f"{self.name} playback stopped")
        self.notify_observers()

    def _power_on(self) -> None:
        self._is_on = True
        self._volume = self.ON_VOLUME

    def get_status(self) -> str:
        return (
            f"{self.name} is {'ON' if self._is_on else 'OFF'}, "
            f"Volume: {self._volume}%, "
            f"Playing: {self._now_playing or 'Nothing'}"
        )

    def attributes(self) -> Dict[str, Any]:
        return {"volume": self._volume, "now_playing": self._now_playing}
