# Composite: a named, ordered collection of devices controlled as one unit
from typing import Any, Dict, List, Tuple
from .base import SmartDevice
from ..models.device import DeviceKind
from ..utils.exceptions import GroupOperationError, HomeControlError
from ..utils.logging import get_logger

logger = get_logger(__name__)

class DeviceGroup(SmartDevice):
    """
    Members are held by reference, in insertion order. is_on reflects the
    last cascade issued to the group, not the members' current state.

    A failing member does not stop a cascade: every member is tried, and
    the collected failures are raised as GroupOperationError afterwards.
    """
    kind = DeviceKind.GROUP

    def __init__(self, name: str):
        super().__init__(name)
        self._devices: List[SmartDevice] = []
        logger.info(f"Group created: {name}")

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        logger.info(f"Group renamed to: {value}")

    @property
    def device_count(self) -> int:
        return len(self._devices)

    @property
    def is_empty(self) -> bool:
        return not self._devices

    def add_device(self, device: SmartDevice) -> None:
        self._devices.append(device)
        logger.info(f"Device added to {self.name}: {device.name} (Total devices: {len(self._devices)})")
        self.notify_observers()

    def remove_device(self, device: SmartDevice) -> bool:
        try:
            self._devices.remove(device)
        except ValueError:
            return False
        logger.info(f"Device removed from {self.name}: {device.name}")
        self.notify_observers()
        return True

    def get_devices(self) -> List[SmartDevice]:
        return list(self._devices)

    def turn_on(self) -> None:
        logger.info(f"Turning on all devices in {self.name}...")
        self._cascade("turn_on", True)

    def turn_off(self) -> None:
        logger.info(f"Turning off all devices in {self.name}...")
        self._cascade("turn_off", False)

    def _cascade(self, operation: str, is_on: bool) -> None:
        failures: List[Tuple[str, Exception]] = []
        for device in list(self._devices):
            try:
                getattr(device, operation)()
            except HomeControlError as e:
                logger.error(f"{operation} failed for {device.name} in {self.name}: {e}")
                failures.append((device.name, e))
        self._is_on = is_on
        self.notify_observers()
        if failures:
            raise GroupOperationError(self.name, failures)

    def get_status(self) -> str:
        lines = [f"Room: {self.name} ({len(self._devices)} devices)"]
        if not self._devices:
            lines.append("  - No devices")
        for device in self._devices:
            lines.append(f"  - {device.get_status()}")
        return "\n".join(lines)

    def display_tree(self) -> str:
        lines = [self.name]
        for i, device in enumerate(self._devices):
            prefix = "└── " if i == len(self._devices) - 1 else "├── "
            lines.append(f"   {prefix}{device.name}")
        return "\n".join(lines)

    def attributes(self) -> Dict[str, Any]:
        return {"devices": [device.name for device in self._devices]}
