# Background loop that toggles a randomly chosen device at a fixed interval
from typing import Callable, List, Optional, Sequence
import asyncio
import random
from ..devices.base import SmartDevice
from ..utils.logging import get_logger

logger = get_logger(__name__)

ChangeCallback = Callable[[SmartDevice, bool], None]

class RandomAutomation:
    """
    One cancellable asyncio task per instance. start() refuses a second
    concurrent loop; stop() cancels the sleep and waits (bounded by
    stop_timeout) for the task to exit, so no toggle runs after it returns.
    """
    def __init__(self, interval: float = 5.0, stop_timeout: float = 2.0,
                 rng: Optional[random.Random] = None,
                 on_change: Optional[ChangeCallback] = None):
        self.interval = interval
        self.stop_timeout = stop_timeout
        self.on_change = on_change
        self._random = rng or random.Random()
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self.toggle_count = 0

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self, devices: Sequence[SmartDevice]) -> bool:
        if self._running:
            logger.warning("Random automation already running")
            return False
        self._running = True
        self._task = asyncio.create_task(self._run(list(devices)))
        logger.info(f"Random automation started ({len(devices)} devices, every {self.interval}s)")
        return True

    async def stop(self) -> bool:
        if not self._running:
            logger.info("Random automation is not running")
            return False
        self._running = False
        task, self._task = self._task, None
        if task:
            task.cancel()
            try:
                await asyncio.wait_for(task, timeout=self.stop_timeout)
            except asyncio.CancelledError:
                pass
            except asyncio.TimeoutError:
                logger.error(f"Random automation did not exit within {self.stop_timeout}s")
        logger.info(f"Random automation stopped after {self.toggle_count} toggles")
        return True

    async def _run(self, devices: List[SmartDevice]) -> None:
        while self._running:
            try:
                await asyncio.sleep(self.interval)
            except asyncio.CancelledError:
                break
            if not self._running:
                break
            try:
                self.toggle_once(devices)
            except Exception as e:
                logger.error(f"Error in random automation loop: {e}")

    def toggle_once(self, devices: Sequence[SmartDevice]) -> Optional[SmartDevice]:
        """Flip the power state of one randomly chosen device"""
        if not devices:
            return None
        device = self._random.choice(list(devices))
        if device.is_on:
            device.turn_off()
        else:
            device.turn_on()
        self.toggle_count += 1
        logger.info(f"Random automation toggled {device.name} {'ON' if device.is_on else 'OFF'}")
        if self.on_change:
            self.on_change(device, device.is_on)
        return device
