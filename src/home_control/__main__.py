# src/home_control/__main__.py
import argparse
import asyncio
import signal
import sys
import traceback
from pathlib import Path
from typing import Dict, Optional

from home_control.core.config_manager import ConfigManager, create_default_config
from home_control.core.controller import Controller
from home_control.core.strategies import AutomatedControl, create_strategy
from home_control.devices.base import SmartDevice
from home_control.devices.group import DeviceGroup
from home_control.models.config import HomeConfig
from home_control.utils.logging import setup_logging, get_logger
from home_control.utils.exceptions import ConfigurationError, HomeControlError

DEFAULT_CONFIG_PATH = Path("config/home.yml")


class HomeControlApp:
    """Wires configuration, devices, rooms and the control strategy together"""

    def __init__(self, config_path: str):
        self.logger = get_logger("Main App")
        try:
            self.config: HomeConfig = ConfigManager.load_config(config_path)
            setup_logging(self.config.logging)
        except ConfigurationError:
            self.logger.error(f"Configuration error: {traceback.format_exc()}")
            sys.exit(1)

        self.controller = Controller()
        self.devices: Dict[str, SmartDevice] = {}
        self.rooms: Dict[str, DeviceGroup] = {}
        self.shutdown_event: Optional[asyncio.Event] = None

    def initialize_components(self) -> None:
        """Build devices, rooms and strategy from the loaded configuration"""
        for spec in self.config.devices:
            device = ConfigManager.build_device(spec, self.config)
            self.devices[spec.name] = device
            self.controller.add_device(device)

        self.rooms = ConfigManager.build_rooms(self.config, self.devices)

        strategy = create_strategy(
            self.config.strategy,
            self.config.automation,
            on_change=self._on_automation_change
        )
        self.controller.set_control_strategy(strategy)
        self.logger.info(
            f"Initialized {len(self.devices)} devices in {len(self.rooms)} rooms "
            f"with {strategy.name}"
        )

    def _on_automation_change(self, device: SmartDevice, is_on: bool) -> None:
        self.logger.info(f"Automation changed {device.name} -> {'ON' if is_on else 'OFF'}")

    @property
    def automation_wanted(self) -> bool:
        return (
            self.config.automation.enabled
            and isinstance(self.controller.control_strategy, AutomatedControl)
        )

    def handle_signals(self) -> None:
        """Set up signal handlers for graceful shutdown"""
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try:
                loop.add_signal_handler(sig, self.shutdown_event.set)
            except NotImplementedError:
                # Windows event loops have no signal handler support
                signal.signal(sig, lambda signum, frame: self.shutdown_event.set())

    async def run(self) -> None:
        """Main application entry point"""
        self.shutdown_event = asyncio.Event()
        try:
            self.initialize_components()
            self.controller.activate_control_strategy()
            for line in self.controller.status_report():
                self.logger.info(line)

            if not self.automation_wanted:
                return

            strategy = self.controller.control_strategy
            self.handle_signals()
            await strategy.start_random_automation(self.controller.get_all_devices())
            await self.shutdown_event.wait()
            await strategy.stop_random_automation()
        except HomeControlError:
            self.logger.error(f"Initialization error: {traceback.format_exc()}")
            sys.exit(1)


def main(argv=None):
    """Application entry point"""
    parser = argparse.ArgumentParser(description="Home device control kernel")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="YAML configuration file")
    args = parser.parse_args(argv)

    create_default_config(args.config)
    app = HomeControlApp(str(args.config))
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
