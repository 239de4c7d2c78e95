import pytest
from home_control.devices.fan import FanAdapter, LegacyFan
from home_control.devices.thermostat import Thermostat
from home_control.models.device import ThermostatMode
from home_control.utils.exceptions import ValidationError


# Thermostat

def test_thermostat_defaults(thermostat):
    assert thermostat.current_temp == 70.0
    assert thermostat.target_temp == 72.0
    assert thermostat.mode == ThermostatMode.OFF
    assert not thermostat.is_on

def test_thermostat_mode_follows_target(thermostat):
    thermostat.turn_on()
    assert thermostat.mode == ThermostatMode.HEATING

    thermostat.set_target_temp(60)
    assert thermostat.mode == ThermostatMode.COOLING

    thermostat.set_target_temp(70)
    assert thermostat.mode == ThermostatMode.MAINTAINING

def test_thermostat_turn_off_idles_mode(thermostat):
    thermostat.turn_on()
    thermostat.set_target_temp(80)
    thermostat.turn_off()
    assert thermostat.mode == ThermostatMode.OFF
    assert thermostat.target_temp == 80.0
    assert "OFF" in thermostat.get_status()

@pytest.mark.parametrize("value", [49, 49.9, 90.5, 120])
def test_thermostat_rejects_out_of_range(thermostat, value):
    with pytest.raises(ValidationError):
        thermostat.set_target_temp(value)
    assert thermostat.target_temp == 72.0

@pytest.mark.parametrize("value", [50, 90])
def test_thermostat_accepts_bounds(thermostat, value):
    thermostat.set_target_temp(value)
    assert thermostat.target_temp == value

def test_thermostat_settle(thermostat, recorder):
    thermostat.turn_on()
    thermostat.set_target_temp(75)
    thermostat.add_observer(recorder)
    thermostat.settle()
    assert thermostat.current_temp == 75.0
    assert thermostat.mode == ThermostatMode.MAINTAINING
    assert len(recorder.updates) == 1

def test_thermostat_set_mode(thermostat):
    thermostat.set_mode("cooling")
    assert thermostat.mode == ThermostatMode.COOLING
    with pytest.raises(ValidationError):
        thermostat.set_mode("turbo")

def test_thermostat_custom_start_temp():
    thermostat = Thermostat("Attic", 85)
    thermostat.turn_on()
    assert thermostat.mode == ThermostatMode.COOLING
    assert thermostat.as_climate_controlled() is thermostat


# Speaker

def test_speaker_turn_on_default_volume(speaker):
    speaker.turn_on()
    assert speaker.volume == 50
    assert speaker.now_playing is None

def test_speaker_play_powers_on_with_one_notification(speaker, recorder):
    speaker.add_observer(recorder)
    speaker.play("Jazz")
    assert speaker.is_on
    assert speaker.volume == 50
    assert speaker.now_playing == "Jazz"
    assert len(recorder.updates) == 1
    assert speaker.get_status() == "Kitchen Speaker is ON, Volume: 50%, Playing: Jazz"

def test_speaker_stop_and_turn_off(speaker):
    speaker.play("News")
    speaker.stop()
    assert speaker.now_playing is None
    assert speaker.is_on

    speaker.play("News")
    speaker.turn_off()
    assert speaker.volume == 0
    assert speaker.now_playing is None
    assert "Playing: Nothing" in speaker.get_status()

def test_speaker_volume(speaker):
    speaker.set_volume(30)
    assert speaker.is_on
    assert speaker.volume == 30
    with pytest.raises(ValidationError):
        speaker.set_volume(101)
    assert speaker.volume == 30


# Fan adapter

@pytest.fixture
def fan():
    return FanAdapter(LegacyFan("Bedroom Fan"))

def test_fan_adapter_translates_power(fan):
    fan.turn_on()
    assert fan.is_on
    assert fan.fan_speed == 1
    assert fan.get_status() == "Bedroom Fan is RUNNING at speed: LOW"

    fan.turn_off()
    assert not fan.is_on
    assert fan.fan_speed == 0

def test_fan_speed_zero_stops_fan(fan):
    assert fan.set_fan_speed(3)
    assert fan.is_on
    assert fan.set_fan_speed(0)
    assert not fan.is_on

@pytest.mark.parametrize("speed", [-1, 4, 10])
def test_fan_rejects_invalid_speed(fan, recorder, speed, caplog):
    fan.set_fan_speed(2)
    fan.add_observer(recorder)

    assert fan.set_fan_speed(speed) is False

    assert fan.fan_speed == 2
    assert recorder.updates == []
    assert "Invalid speed" in caplog.text

@pytest.mark.parametrize("speed", [2.0, "2", [2], None])
def test_fan_rejects_non_integer_speed(fan, recorder, speed):
    fan.set_fan_speed(1)
    fan.add_observer(recorder)

    assert fan.set_fan_speed(speed) is False

    assert fan.fan_speed == 1
    assert isinstance(fan.fan_speed, int)
    assert recorder.updates == []
