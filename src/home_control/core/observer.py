# Synchronous observer interface and the activity-log observer
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from ..utils.logging import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    """Receives a call after every state-mutating operation on a device"""

    @abstractmethod
    def update(self, device) -> None:
        pass


class DeviceLogger(Observer):
    """Keeps a timestamped activity log of every device it observes"""
    def __init__(self, logger_name: str):
        self.logger_name = logger_name
        self._logs: List[str] = []
        logger.info(f"DeviceLogger created: {logger_name}")

    def update(self, device) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self._logs.append(f"[{timestamp}] {device.name} - {device.get_status()}")
        logger.debug(f"[{self.logger_name}] Logged: {device.name}")

    @property
    def log_count(self) -> int:
        return len(self._logs)

    def get_logs(self) -> List[str]:
        return list(self._logs)

    def clear_logs(self) -> None:
        self._logs.clear()
        logger.info(f"[{self.logger_name}] Logs cleared")
