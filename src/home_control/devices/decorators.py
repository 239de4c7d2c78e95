# Decorators layering extra behavior over a wrapped device
import time
from typing import Any, Callable, Dict, List, Optional
from .base import SmartDevice
from ..core.observer import Observer
from ..utils.logging import get_logger

logger = get_logger(__name__)

SECONDS_PER_HOUR = 3600.0


class DeviceDecorator(SmartDevice):
    """
    Forwards every device operation to the wrapped device.
    Subclasses run their own logic first and then delegate inward,
    so the outermost decorator acts first.
    """
    def __init__(self, device: SmartDevice):
        # No super().__init__: name, power state and observers belong to the wrapped device
        self.wrapped_device = device

    @property
    def kind(self):
        return self.wrapped_device.kind

    @property
    def name(self) -> str:
        return self.wrapped_device.name

    @property
    def is_on(self) -> bool:
        return self.wrapped_device.is_on

    def turn_on(self) -> None:
        self.wrapped_device.turn_on()

    def turn_off(self) -> None:
        self.wrapped_device.turn_off()

    def get_status(self) -> str:
        return self.wrapped_device.get_status()

    def attributes(self) -> Dict[str, Any]:
        return self.wrapped_device.attributes()

    def as_dimmable(self) -> Optional[SmartDevice]:
        return self.wrapped_device.as_dimmable()

    def as_climate_controlled(self) -> Optional[SmartDevice]:
        return self.wrapped_device.as_climate_controlled()

    def add_observer(self, observer: Observer) -> None:
        self.wrapped_device.add_observer(observer)

    def remove_observer(self, observer: Observer) -> bool:
        return self.wrapped_device.remove_observer(observer)

    def notify_observers(self) -> None:
        self.wrapped_device.notify_observers()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped_device!r})"


class EnergyMonitorDecorator(DeviceDecorator, Observer):
    """
    Accounts energy per on-session. Exactly one session is open while the
    wrapped device is on; energy accrues only while it is open, at a fixed
    assumed power draw.

    The decorator also observes the wrapped device, so power changes made
    past it (set_brightness through as_dimmable(), a group cascade) still
    open and close sessions.
    """
    def __init__(self, device: SmartDevice, cost_per_kwh: float = 0.12,
                 power_kw: float = 0.06, clock: Callable[[], float] = time.monotonic):
        super().__init__(device)
        self._cost_per_kwh = cost_per_kwh
        self.power_kw = power_kw
        self._clock = clock
        self._energy_usage = 0.0  # kWh
        self._total_on_time = 0.0  # seconds
        self._session_start: Optional[float] = None
        logger.info(f"Energy monitoring added to: {device.name} (Rate: ${cost_per_kwh}/kWh)")
        device.add_observer(self)
        if device.is_on:
            self._open_session()

    @property
    def energy_usage(self) -> float:
        return self._energy_usage

    @property
    def cost(self) -> float:
        return self._energy_usage * self._cost_per_kwh

    @property
    def total_on_time(self) -> float:
        return self._total_on_time

    @property
    def session_open(self) -> bool:
        return self._session_start is not None

    @property
    def cost_per_kwh(self) -> float:
        return self._cost_per_kwh

    @cost_per_kwh.setter
    def cost_per_kwh(self, value: float) -> None:
        self._cost_per_kwh = value
        logger.info(f"Cost rate updated to: ${value}/kWh")

    def _open_session(self) -> None:
        if self._session_start is None:
            self._session_start = self._clock()
            logger.info(f"Started tracking energy for: {self.name}")

    def _close_session(self) -> None:
        if self._session_start is not None:
            duration = max(0.0, self._clock() - self._session_start)
            session_energy = self.power_kw * (duration / SECONDS_PER_HOUR)
            self._total_on_time += duration
            self._energy_usage += session_energy
            self._session_start = None
            logger.info(f"Stopped tracking {self.name}. Session: {session_energy:.4f} kWh")

    def turn_on(self) -> None:
        self._open_session()
        super().turn_on()

    def turn_off(self) -> None:
        self._close_session()
        super().turn_off()

    def update(self, device) -> None:
        if self.wrapped_device.is_on:
            self._open_session()
        else:
            self._close_session()

    def reset_energy_tracking(self) -> None:
        self._energy_usage = 0.0
        self._total_on_time = 0.0
        logger.info(f"Energy tracking reset for: {self.name}")

    def energy_report(self) -> Dict[str, Any]:
        return {
            "device": self.name,
            "energy_kwh": round(self._energy_usage, 3),
            "cost": round(self.cost, 2),
            "runtime_hours": round(self._total_on_time / SECONDS_PER_HOUR, 2),
            "rate": self._cost_per_kwh,
            "currently_on": self.session_open
        }

    def get_status(self) -> str:
        return f"{super().get_status()} | Energy: {self._energy_usage:.3f} kWh | Cost: ${self.cost:.2f}"

    def attributes(self) -> Dict[str, Any]:
        attrs = dict(super().attributes())
        attrs["energy_kwh"] = self._energy_usage
        attrs["energy_cost"] = self.cost
        return attrs


class VoiceControlDecorator(DeviceDecorator):
    """Frames on/off with a simulated voice-assistant acknowledgement"""
    def __init__(self, device: SmartDevice, assistant: str = "Alexa"):
        super().__init__(device)
        self._voice_assistant = assistant
        self.voice_enabled = True
        self.acknowledgements: List[str] = []
        logger.info(f"Voice control added to: {device.name} (Assistant: {assistant})")

    @property
    def voice_assistant(self) -> str:
        return self._voice_assistant

    @voice_assistant.setter
    def voice_assistant(self, assistant: str) -> None:
        self._voice_assistant = assistant
        logger.info(f"Voice assistant changed to: {assistant}")

    def enable_voice(self) -> None:
        self.voice_enabled = True
        logger.info(f"Voice control enabled for: {self.name}")

    def disable_voice(self) -> None:
        self.voice_enabled = False
        logger.info(f"Voice control disabled for: {self.name}")

    def _acknowledge(self, action: str) -> None:
        if not self.voice_enabled:
            return
        phrase = f'"{self._voice_assistant}, {action} {self.name}"'
        self.acknowledgements.append(phrase)
        logger.info(f"[VOICE] {phrase} - command recognized")

    def turn_on(self) -> None:
        self._acknowledge("turn on")
        super().turn_on()

    def turn_off(self) -> None:
        self._acknowledge("turn off")
        super().turn_off()

    def get_status(self) -> str:
        flag = "enabled" if self.voice_enabled else "disabled"
        return f"{super().get_status()} | Voice: {self._voice_assistant} ({flag})"

    def attributes(self) -> Dict[str, Any]:
        attrs = dict(super().attributes())
        attrs["voice_assistant"] = self._voice_assistant
        attrs["voice_enabled"] = self.voice_enabled
        return attrs
