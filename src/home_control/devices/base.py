# Abstract base class for all controllable devices
# Concrete kinds live in separate modules (light.py, thermostat.py, ...)

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..core.observer import Observer
from ..models.device import DeviceKind, DeviceState
from ..utils.exceptions import ValidationError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def check_range(value, low, high, label: str) -> None:
    """Raise ValidationError unless low <= value <= high"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number, got {value!r}")
    if value < low or value > high:
        raise ValidationError(f"{label} must be between {low} and {high}, got {value}")


class SmartDevice(ABC):
    """Base class for all device implementations"""
    kind: DeviceKind

    def __init__(self, name: str):
        self._name = name
        self._is_on = False
        self._observers: List[Observer] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_on(self) -> bool:
        return self._is_on

    @abstractmethod
    def turn_on(self) -> None:
        pass

    @abstractmethod
    def turn_off(self) -> None:
        pass

    @abstractmethod
    def get_status(self) -> str:
        """Human readable one-line status"""
        pass

    def attributes(self) -> Dict[str, Any]:
        """Kind-specific values included in get_state(). Override if needed."""
        return {}

    def get_state(self) -> DeviceState:
        return DeviceState(
            name=self.name,
            kind=self.kind,
            is_on=self.is_on,
            attributes=self.attributes()
        )

    # Capability queries, overridden by the kinds that support them
    def as_dimmable(self) -> Optional["SmartDevice"]:
        return None

    def as_climate_controlled(self) -> Optional["SmartDevice"]:
        return None

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> bool:
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
