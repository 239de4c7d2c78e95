import pytest
from home_control.core.controller import Controller
from home_control.core.observer import Observer
from home_control.devices.factory import DeviceFactory


class RecordingObserver(Observer):
    def __init__(self):
        self.updates = []

    def update(self, device):
        self.updates.append(device.name)


class FakeClock:
    """Monotonic clock advanced by hand"""
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def controller():
    return Controller()

@pytest.fixture
def light():
    return DeviceFactory.create_device("light", "L")

@pytest.fixture
def thermostat():
    return DeviceFactory.create_device("thermostat", "Hall Thermostat")

@pytest.fixture
def speaker():
    return DeviceFactory.create_device("speaker", "Kitchen Speaker")

@pytest.fixture
def make_recorder():
    return RecordingObserver

@pytest.fixture
def recorder(make_recorder):
    return make_recorder()

@pytest.fixture
def fake_clock():
    return FakeClock()
