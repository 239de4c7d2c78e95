# Swappable control strategies applied by Controller.activate_control_strategy()
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence
import random
from .automation import RandomAutomation, ChangeCallback
from ..devices.base import SmartDevice
from ..models.config import AutomationConfig
from ..utils.exceptions import ConfigurationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class ControlStrategy(ABC):
    name: str = ""
    description: str = ""

    @abstractmethod
    def control_devices(self, devices: Sequence[SmartDevice]) -> None:
        pass


class ManualControl(ControlStrategy):
    name = "Manual Control"
    description = "User controls all devices manually. No automation."

    def control_devices(self, devices: Sequence[SmartDevice]) -> None:
        logger.info(f"Manual mode: {len(devices)} devices waiting for manual commands")


class ScheduleWindow(str, Enum):
    MORNING = "morning"
    DAYTIME = "daytime"
    EVENING = "evening"
    NIGHT = "night"


def _name_has(device: SmartDevice, *rooms: str) -> bool:
    lowered = device.name.lower()
    return any(room in lowered for room in rooms)


class ScheduledControl(ControlStrategy):
    """
    Applies a fixed rule set for the current time-of-day window.
    Rooms are matched by substring of the device name.
    """
    name = "Scheduled Control"
    description = "Automated control based on time schedules. Perfect for daily routines."

    DEFAULT_SCHEDULE = {
        "06:00": "Morning routine - Turn on bedroom lights",
        "07:00": "Breakfast time - Turn on kitchen devices",
        "08:00": "Leave for work - Turn off unnecessary devices",
        "18:00": "Evening return - Turn on living room",
        "22:00": "Bedtime - Dim all lights",
        "23:00": "Sleep mode - Turn off all devices",
    }

    def __init__(self, clock: Clock = datetime.now):
        self._clock = clock
        self._schedule: Dict[str, str] = dict(self.DEFAULT_SCHEDULE)
        self.last_window: Optional[ScheduleWindow] = None

    @staticmethod
    def window_for(hour: int) -> ScheduleWindow:
        if 6 <= hour < 8:
            return ScheduleWindow.MORNING
        if 8 <= hour < 18:
            return ScheduleWindow.DAYTIME
        if 18 <= hour < 22:
            return ScheduleWindow.EVENING
        return ScheduleWindow.NIGHT

    def add_schedule(self, time: str, action: str) -> None:
        self._schedule[time] = action
        logger.info(f"Schedule added: {time} - {action}")

    def get_schedule(self) -> List[str]:
        return [f"{time} - {action}" for time, action in sorted(self._schedule.items())]

    def control_devices(self, devices: Sequence[SmartDevice]) -> None:
        now = self._clock()
        window = self.window_for(now.hour)
        self.last_window = window
        logger.info(f"Scheduled mode at {now:%H:%M}: {window.value} window, {len(devices)} devices")
        rules = {
            ScheduleWindow.MORNING: self._morning_routine,
            ScheduleWindow.DAYTIME: self._daytime_mode,
            ScheduleWindow.EVENING: self._evening_routine,
            ScheduleWindow.NIGHT: self._night_mode,
        }
        rules[window](devices)

    def _morning_routine(self, devices: Sequence[SmartDevice]) -> None:
        for device in devices:
            if _name_has(device, "bedroom"):
                device.turn_on()
                light = device.as_dimmable()
                if light is not None:
                    light.set_brightness(60)

    def _daytime_mode(self, devices: Sequence[SmartDevice]) -> None:
        for device in devices:
            if _name_has(device, "bedroom", "living room"):
                device.turn_off()

    def _evening_routine(self, devices: Sequence[SmartDevice]) -> None:
        for device in devices:
            if _name_has(device, "living room"):
                device.turn_on()
                light = device.as_dimmable()
                if light is not None:
                    light.set_brightness(70)
                thermostat = device.as_climate_controlled()
                if thermostat is not None:
                    thermostat.set_target_temp(70)

    def _night_mode(self, devices: Sequence[SmartDevice]) -> None:
        for device in devices:
            light = device.as_dimmable()
            if light is not None:
                light.set_brightness(10)
            thermostat = device.as_climate_controlled()
            if thermostat is not None:
                thermostat.set_target_temp(68)


class AutomatedControl(ControlStrategy):
    """
    Each activation samples occupancy (0-100) and outside temperature, then
    applies independent rules: low occupancy switches off a random subset,
    high occupancy optimizes comfort, late hours dim lights and lower
    thermostats, and a predictive nudge touches at most two thermostats.

    The random toggle loop is separate and driven by start/stop_random_automation.
    """
    name = "Automated Control"
    description = "Adjusts devices from simulated occupancy and temperature; can toggle devices in the background."

    LOW_OCCUPANCY = 20
    HIGH_OCCUPANCY = 80
    PREDICTIVE_LIMIT = 2

    def __init__(self, rng: Optional[random.Random] = None, clock: Clock = datetime.now,
                 interval: float = 5.0, stop_timeout: float = 2.0,
                 on_change: Optional[ChangeCallback] = None):
        self._random = rng or random.Random()
        self._clock = clock
        self.occupancy_level: Optional[int] = None
        self.outside_temp: Optional[int] = None
        self.automation = RandomAutomation(interval, stop_timeout, rng=self._random, on_change=on_change)

    def control_devices(self, devices: Sequence[SmartDevice]) -> None:
        hour = self._clock().hour
        self.occupancy_level = self._random.randint(0, 100)
        self.outside_temp = 60 + self._random.randrange(40)
        active = sum(1 for device in devices if device.is_on)
        logger.info(
            f"Automated mode: occupancy {self.occupancy_level}%, outside {self.outside_temp}°F, "
            f"{active}/{len(devices)} devices active"
        )

        if self.occupancy_level < self.LOW_OCCUPANCY:
            self._turn_off_unoccupied(devices)
        elif self.occupancy_level > self.HIGH_OCCUPANCY:
            self._optimize_for_comfort(devices)

        if hour >= 22 or hour < 6:
            self._enable_energy_saving(devices)

        self._predictive_adjustment(devices)

    def _turn_off_unoccupied(self, devices: Sequence[SmartDevice]) -> None:
        logger.info("Low occupancy detected, turning off devices in empty rooms")
        for device in devices:
            # Simulated room emptiness
            if self._random.random() < 0.5:
                device.turn_off()

    def _optimize_for_comfort(self, devices: Sequence[SmartDevice]) -> None:
        logger.info("High occupancy detected, optimizing comfort settings")
        for device in devices:
            light = device.as_dimmable()
            if light is not None:
                device.turn_on()
                light.set_brightness(80)
            thermostat = device.as_climate_controlled()
            if thermostat is not None:
                device.turn_on()
                thermostat.set_target_temp(72)

    def _enable_energy_saving(self, devices: Sequence[SmartDevice]) -> None:
        logger.info("Late night/early morning, enabling energy-saving mode")
        for device in devices:
            light = device.as_dimmable()
            if light is not None and light.brightness > 30:
                light.set_brightness(30)
            thermostat = device.as_climate_controlled()
            if thermostat is not None:
                thermostat.set_target_temp(68)

    def _predictive_adjustment(self, devices: Sequence[SmartDevice]) -> List[str]:
        """Nudge up to PREDICTIVE_LIMIT running thermostats one degree against the weather"""
        touched: List[str] = []
        for device in devices:
            if len(touched) >= self.PREDICTIVE_LIMIT:
                break
            thermostat = device.as_climate_controlled()
            if thermostat is None or not thermostat.is_on:
                continue
            target = thermostat.target_temp
            if self.outside_temp > 80 and target > thermostat.MIN_TARGET:
                thermostat.set_target_temp(target - 1)
            elif self.outside_temp < 65 and target < thermostat.MAX_TARGET:
                thermostat.set_target_temp(target + 1)
            else:
                continue
            touched.append(device.name)
        if touched:
            logger.info(f"Predictive adjustment applied to: {', '.join(touched)}")
        return touched

    @property
    def is_automation_running(self) -> bool:
        return self.automation.is_running

    async def start_random_automation(self, devices: Sequence[SmartDevice]) -> bool:
        return await self.automation.start(devices)

    async def stop_random_automation(self) -> bool:
        return await self.automation.stop()


def create_strategy(name: str, automation: Optional[AutomationConfig] = None,
                    on_change: Optional[ChangeCallback] = None) -> ControlStrategy:
    """Map a config strategy name to a strategy instance"""
    automation = automation or AutomationConfig()
    key = name.strip().lower()
    if key == "manual":
        return ManualControl()
    if key == "scheduled":
        return ScheduledControl()
    if key == "automated":
        return AutomatedControl(
            interval=automation.interval,
            stop_timeout=automation.stop_timeout,
            on_change=on_change
        )
    raise ConfigurationError(f"Unknown control strategy: {name}")
