# Device registry, command history and active control strategy
from typing import Callable, List, Optional
from .commands import Command
from .observer import Observer
from ..devices.base import SmartDevice
from ..devices.decorators import DeviceDecorator
from ..models.device import DeviceState
from ..utils.logging import get_logger

logger = get_logger(__name__)

class Controller(Observer):
    '''
    Central controller for a home. Construct one and pass it to whatever
    needs it; reset() returns it to the freshly built state.

    The controller subscribes itself to every device it registers, so each
    device mutation reaches update() and is relayed to subscribed listeners.
    Not internally synchronized: only one writer may issue commands at a time.
    '''

    def __init__(self):
        self._devices: List[SmartDevice] = []
        self._done: List[Command] = []
        self._undone: List[Command] = []
        self._strategy = None
        self._listeners: List[Callable[[SmartDevice], None]] = []
        logger.info("Controller initialized")

    def reset(self) -> None:
        for device in self._devices:
            device.remove_observer(self)
        self._devices.clear()
        self._done.clear()
        self._undone.clear()
        self._strategy = None
        self._listeners.clear()
        logger.info("Controller reset")

    # Registry

    def add_device(self, device: SmartDevice) -> None:
        self._devices.append(device)
        device.add_observer(self)
        logger.info(f"Device added: {device.name} (Total devices: {len(self._devices)})")

    def remove_device(self, device: SmartDevice) -> bool:
        try:
            self._devices.remove(device)
        except ValueError:
            return False
        device.remove_observer(self)
        logger.info(f"Device removed: {device.name}")
        return True

    def get_device(self, name: str) -> Optional[SmartDevice]:
        """First registered device whose name matches, ignoring case"""
        wanted = name.lower()
        for device in self._devices:
            if device.name.lower() == wanted:
                return device
        return None

    def get_all_devices(self) -> List[SmartDevice]:
        return list(self._devices)

    @property
    def device_count(self) -> int:
        return len(self._devices)

    def turn_on_all_devices(self) -> None:
        logger.info("Turning on all devices...")
        for device in list(self._devices):
            device.turn_on()

    def turn_off_all_devices(self) -> None:
        logger.info("Turning off all devices...")
        for device in list(self._devices):
            device.turn_off()

    def status_report(self) -> List[str]:
        return [f"{i}. {device.get_status()}" for i, device in enumerate(self._devices, start=1)]

    def snapshot(self) -> List[DeviceState]:
        return [device.get_state() for device in self._devices]

    # Observer

    def subscribe(self, listener: Callable[[SmartDevice], None]) -> None:
        """
        Register a callable invoked with every device update the controller sees.
        Listeners get the device as registered (decorators included); reset() drops them.
        """
        self._listeners.append(listener)

    def _registered_for(self, device: SmartDevice) -> SmartDevice:
        """Map a notifying device back to the registered one, decorators included"""
        for registered in self._devices:
            candidate = registered
            while candidate is not None:
                if candidate is device:
                    return registered
                candidate = candidate.wrapped_device if isinstance(candidate, DeviceDecorator) else None
        return device

    def update(self, device: SmartDevice) -> None:
        device = self._registered_for(device)
        logger.debug(f"Notification received - {device.name}: {device.get_status()}")
        for listener in list(self._listeners):
            listener(device)

    # Command history

    def execute_command(self, command: Command) -> None:
        logger.info(f"Executing command: {command.description}")
        command.execute()
        self._done.append(command)
        # A new command invalidates anything that could have been redone
        self._undone.clear()
        logger.debug(f"Command history size: {len(self._done)}")

    def undo_last_command(self) -> bool:
        if not self._done:
            logger.info("No commands to undo")
            return False
        command = self._done.pop()
        logger.info(f"Undoing command: {command.description}")
        command.undo()
        self._undone.append(command)
        return True

    def redo_last_command(self) -> bool:
        if not self._undone:
            logger.info("No commands to redo")
            return False
        command = self._undone.pop()
        logger.info(f"Redoing command: {command.description}")
        command.execute()
        self._done.append(command)
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def get_command_history(self) -> List[str]:
        """Descriptions of executed commands, oldest first"""
        return [command.description for command in self._done]

    def clear_history(self) -> None:
        self._done.clear()
        self._undone.clear()
        logger.info("Command history cleared")

    # Control strategy

    @property
    def control_strategy(self):
        return self._strategy

    def set_control_strategy(self, strategy) -> None:
        self._strategy = strategy
        logger.info(f"Control strategy changed to: {strategy.name} - {strategy.description}")

    def activate_control_strategy(self) -> bool:
        if self._strategy is None:
            logger.warning("No control strategy set, devices stay under manual control")
            return False
        logger.info(f"Activating: {self._strategy.name}")
        self._strategy.control_devices(self.get_all_devices())
        return True
