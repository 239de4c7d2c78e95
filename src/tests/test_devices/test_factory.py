import pytest
from home_control.devices.factory import DeviceFactory
from home_control.devices.fan import FanAdapter
from home_control.devices.light import Light
from home_control.devices.speaker import Speaker
from home_control.devices.thermostat import Thermostat
from home_control.utils.exceptions import UnknownDeviceType


@pytest.mark.parametrize("device_type, expected", [
    ("light", Light),
    ("thermostat", Thermostat),
    ("speaker", Speaker),
    ("LIGHT", Light),
    ("fan", FanAdapter),
])
def test_create_device(device_type, expected):
    device = DeviceFactory.create_device(device_type, "Test")
    assert isinstance(device, expected)
    assert device.name == "Test"
    assert not device.is_on

def test_unknown_device_type():
    with pytest.raises(UnknownDeviceType) as exc_info:
        DeviceFactory.create_device("toaster", "Breakfast")
    assert "toaster" in str(exc_info.value)

def test_factory_thermostat_default_temp():
    assert DeviceFactory.create_device("thermostat", "T").current_temp == 70.0

def test_create_thermostat_with_temperature():
    thermostat = DeviceFactory.create_thermostat("Office", 65.5)
    assert thermostat.current_temp == 65.5

def test_register_device_type():
    DeviceFactory.register_device_type("Lamp", Light)
    try:
        assert "lamp" in DeviceFactory.available_types()
        assert isinstance(DeviceFactory.create_device("lamp", "Desk"), Light)
    finally:
        DeviceFactory._device_types.pop("lamp")
