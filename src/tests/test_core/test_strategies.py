import pytest
from datetime import datetime
from home_control.core.strategies import (
    AutomatedControl, ManualControl, ScheduledControl, ScheduleWindow, create_strategy
)
from home_control.devices.decorators import EnergyMonitorDecorator
from home_control.devices.factory import DeviceFactory
from home_control.models.config import AutomationConfig
from home_control.utils.exceptions import ConfigurationError


class StubRandom:
    """Deterministic stand-in for random.Random"""
    def __init__(self, occupancy=50, outside=20, coin=0.9):
        self.occupancy = occupancy
        self.outside = outside
        self.coin = coin

    def randint(self, a, b):
        return self.occupancy

    def randrange(self, n):
        return self.outside

    def random(self):
        return self.coin

    def choice(self, seq):
        return seq[0]


def at_hour(hour):
    return lambda: datetime(2024, 1, 1, hour, 30)


@pytest.fixture
def devices():
    return [
        DeviceFactory.create_device("light", "Bedroom Light"),
        DeviceFactory.create_device("light", "Living Room Light"),
        DeviceFactory.create_device("thermostat", "Living Room Thermostat"),
        DeviceFactory.create_device("speaker", "Kitchen Speaker"),
    ]


# Scheduled

@pytest.mark.parametrize("hour, window", [
    (6, ScheduleWindow.MORNING),
    (7, ScheduleWindow.MORNING),
    (8, ScheduleWindow.DAYTIME),
    (17, ScheduleWindow.DAYTIME),
    (18, ScheduleWindow.EVENING),
    (21, ScheduleWindow.EVENING),
    (22, ScheduleWindow.NIGHT),
    (0, ScheduleWindow.NIGHT),
    (5, ScheduleWindow.NIGHT),
])
def test_schedule_windows(hour, window):
    assert ScheduledControl.window_for(hour) == window

def test_morning_turns_on_bedroom(devices):
    bedroom, living, thermostat, speaker = devices
    ScheduledControl(clock=at_hour(7)).control_devices(devices)
    assert bedroom.is_on and bedroom.brightness == 60
    assert not living.is_on
    assert not speaker.is_on

def test_daytime_turns_off_rooms(devices):
    for device in devices:
        device.turn_on()
    ScheduledControl(clock=at_hour(12)).control_devices(devices)
    bedroom, living, thermostat, speaker = devices
    assert not bedroom.is_on
    assert not living.is_on
    assert not thermostat.is_on
    assert speaker.is_on

def test_evening_living_room(devices):
    bedroom, living, thermostat, speaker = devices
    ScheduledControl(clock=at_hour(19)).control_devices(devices)
    assert living.brightness == 70
    assert thermostat.is_on and thermostat.target_temp == 70
    assert not bedroom.is_on

def test_night_dims_everything(devices):
    bedroom, living, thermostat, speaker = devices
    strategy = ScheduledControl(clock=at_hour(23))
    strategy.control_devices(devices)
    assert bedroom.brightness == 10 and living.brightness == 10
    assert thermostat.target_temp == 68
    assert strategy.last_window == ScheduleWindow.NIGHT

def test_scheduled_rules_reach_decorated_lights():
    inner = DeviceFactory.create_device("light", "Bedroom Lamp")
    ScheduledControl(clock=at_hour(6)).control_devices([EnergyMonitorDecorator(inner)])
    assert inner.brightness == 60

def test_schedule_listing():
    strategy = ScheduledControl()
    strategy.add_schedule("05:30", "Coffee")
    assert strategy.get_schedule()[0] == "05:30 - Coffee"
    assert len(strategy.get_schedule()) == 7


# Automated

def test_automated_low_occupancy_turns_off(devices):
    for device in devices:
        device.turn_on()
    strategy = AutomatedControl(rng=StubRandom(occupancy=10, coin=0.1), clock=at_hour(12))
    strategy.control_devices(devices)
    assert strategy.occupancy_level == 10
    assert not any(device.is_on for device in devices)

def test_automated_high_occupancy_optimizes_comfort(devices):
    bedroom, living, thermostat, speaker = devices
    strategy = AutomatedControl(rng=StubRandom(occupancy=95, outside=10), clock=at_hour(12))
    strategy.control_devices(devices)
    assert bedroom.brightness == 80 and living.brightness == 80
    assert thermostat.is_on and thermostat.target_temp == 72
    assert not speaker.is_on
    assert strategy.outside_temp == 70

def test_automated_night_energy_saving(devices):
    bedroom, living, thermostat, speaker = devices
    bedroom.set_brightness(90)
    living.set_brightness(20)
    strategy = AutomatedControl(rng=StubRandom(occupancy=50, outside=10), clock=at_hour(23))
    strategy.control_devices(devices)
    assert bedroom.brightness == 30
    assert living.brightness == 20
    assert thermostat.target_temp == 68

def test_predictive_adjustment_touches_at_most_two():
    thermostats = [DeviceFactory.create_device("thermostat", f"T{i}") for i in range(4)]
    for thermostat in thermostats:
        thermostat.turn_on()
    # Hot outside: each running thermostat is lowered a degree
    strategy = AutomatedControl(rng=StubRandom(occupancy=50, outside=35), clock=at_hour(12))
    strategy.control_devices(thermostats)
    assert [t.target_temp for t in thermostats] == [71, 71, 72, 72]

def test_predictive_skips_idle_thermostats(thermostat):
    strategy = AutomatedControl(rng=StubRandom(occupancy=50, outside=0), clock=at_hour(12))
    strategy.control_devices([thermostat])
    assert thermostat.target_temp == 72


# Factory

@pytest.mark.parametrize("name, cls", [
    ("manual", ManualControl),
    ("Scheduled", ScheduledControl),
    ("automated", AutomatedControl),
])
def test_create_strategy(name, cls):
    assert isinstance(create_strategy(name), cls)

def test_create_strategy_uses_automation_config():
    strategy = create_strategy("automated", AutomationConfig(interval=0.5, stop_timeout=1))
    assert strategy.automation.interval == 0.5
    assert strategy.automation.stop_timeout == 1

def test_create_strategy_unknown():
    with pytest.raises(ConfigurationError):
        create_strategy("chaos")

def test_night_schedule_opens_energy_session_on_decorated_light():
    clock = [0.0]
    inner = DeviceFactory.create_device("light", "Hall Light")
    monitored = EnergyMonitorDecorator(inner, clock=lambda: clock[0])

    ScheduledControl(clock=at_hour(23)).control_devices([monitored])

    assert inner.is_on and inner.brightness == 10
    assert monitored.session_open
    clock[0] += 3600
    monitored.turn_off()
    assert monitored.energy_usage == pytest.approx(0.06)
