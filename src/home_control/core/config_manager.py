# Configuration management
from pathlib import Path
from typing import Dict, Union
import traceback
import yaml
from pydantic import ValidationError as ModelValidationError
from ..models.config import HomeConfig, DeviceSpec
from ..devices.base import SmartDevice
from ..devices.decorators import EnergyMonitorDecorator, VoiceControlDecorator
from ..devices.factory import DeviceFactory
from ..devices.group import DeviceGroup
from ..utils.exceptions import ConfigurationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG = """
strategy: "scheduled"

devices:
  - type: "light"
    name: "Living Room Light"
    decorators: ["energy"]
  - type: "light"
    name: "Bedroom Light"
    decorators: ["voice"]
  - type: "thermostat"
    name: "Living Room Thermostat"
    initial_temp: 70
  - type: "speaker"
    name: "Kitchen Speaker"
  - type: "fan"
    name: "Bedroom Fan"

rooms:
  - name: "Living Room"
    devices: ["Living Room Light", "Living Room Thermostat"]
  - name: "Bedroom"
    devices: ["Bedroom Light", "Bedroom Fan"]

automation:
  enabled: false
  interval: 5
  stop_timeout: 2

energy:
  power_kw: 0.06
  cost_per_kwh: 0.12

logging:
  level: "INFO"
  format: "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
"""

class ConfigManager:
    """Manages configuration loading and validation"""

    @staticmethod
    def load_config(config_path: Union[str, Path]) -> HomeConfig:
        """Load and validate configuration from YAML file"""
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError:
            raise ConfigurationError(f"Error parsing configuration file: {traceback.format_exc()}")
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        if config is None:
            raise ConfigurationError("Configuration file is empty or incorrectly formatted")
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration root must be a mapping")
        try:
            return HomeConfig(**config)
        except ModelValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @staticmethod
    def build_device(spec: DeviceSpec, config: HomeConfig) -> SmartDevice:
        """Create a device from its spec and wrap it in the listed decorators, innermost first"""
        if spec.type == "thermostat" and spec.initial_temp is not None:
            device = DeviceFactory.create_thermostat(spec.name, spec.initial_temp)
        else:
            device = DeviceFactory.create_device(spec.type, spec.name)

        for decorator in spec.decorators:
            if decorator == "energy":
                rate = spec.cost_per_kwh if spec.cost_per_kwh is not None else config.energy.cost_per_kwh
                device = EnergyMonitorDecorator(device, cost_per_kwh=rate, power_kw=config.energy.power_kw)
            elif decorator == "voice":
                device = VoiceControlDecorator(device, spec.assistant)
        return device

    @classmethod
    def build_rooms(cls, config: HomeConfig, devices: Dict[str, SmartDevice]) -> Dict[str, DeviceGroup]:
        rooms: Dict[str, DeviceGroup] = {}
        for room_spec in config.rooms:
            room = DeviceGroup(room_spec.name)
            for device_name in room_spec.devices:
                if device_name not in devices:
                    raise ConfigurationError(f"Room {room_spec.name} references unknown device: {device_name}")
                room.add_device(devices[device_name])
            rooms[room_spec.name] = room
        return rooms


def create_default_config(config_path: Path) -> bool:
    """Create default configuration file if it doesn't exist"""
    if config_path.exists():
        return False
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG)
    logger.info(f"Created default config at {config_path}")
    return True
