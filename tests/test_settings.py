import dataclasses
import ipaddress

import pytest

from rotorsettings.settings import (
    CalibrationTable,
    DisplayPosition,
    EthernetSettings,
    PinState,
    Settings,
    button_states,
    default_settings,
)


def test_default_rotation_values():
    settings = default_settings()
    assert settings.azimuth_starting_point == 0
    assert settings.azimuth_rotation_capability == 360
    assert settings.elevation_maximum_degrees == 180
    assert settings.operation_timeout_ms == 120000


def test_default_pwm_levels():
    assert default_settings().pwm_speed_voltages == (64, 128, 191, 253)


def test_default_lcd_layout():
    settings = default_settings()
    assert settings.lcd_columns == 20
    assert settings.lcd_rows == 4
    assert settings.lcd_constant_hhmmss_clock_and_maidenhead_position is DisplayPosition.CENTER
    assert settings.lcd_gps_indicator_position is DisplayPosition.RIGHT


def test_default_calibration_tables():
    settings = default_settings()
    assert settings.azimuth_calibration.pairs() == ((180, 180), (630, 630))
    assert settings.elevation_calibration.pairs() == ((-360, -360), (0, 0), (360, 360))


def test_default_location():
    settings = default_settings()
    assert settings.default_latitude == 40.889958
    assert settings.default_longitude == -75.585972


def test_default_strings():
    settings = default_settings()
    assert settings.lcd_display_degrees_string == "\xdf"
    assert settings.nextion_display_degrees_string == "\xb0"
    assert settings.control_port_initializing_string == "test\n\r"


def test_default_magnetometer_calibration():
    settings = default_settings()
    assert settings.pololu_lsm303_min == (59, 19, -731)
    assert settings.pololu_lsm303_max == (909, 491, 14)


def test_button_states_default_is_active_low():
    assert button_states(False) == (PinState.LOW, PinState.HIGH)


def test_button_states_ea4tx_is_active_high():
    assert button_states(True) == (PinState.HIGH, PinState.LOW)


def test_settings_buttons_follow_default_hardware():
    settings = default_settings()
    assert (settings.button_active_state, settings.button_inactive_state) == button_states()


def test_pin_state_values():
    active, inactive = button_states(True)
    assert int(active) == 1
    assert int(inactive) == 0


def test_pin_state_coerced_from_int():
    settings = Settings(brake_active_state=0)
    assert settings.brake_active_state is PinState.LOW


def test_calibration_table_pairs_round_trip():
    table = CalibrationTable([0, 359], [359, 0])
    assert table.pairs() == ((0, 359), (359, 0))
    assert table.from_points == (0, 359)


def test_calibration_table_length_mismatch():
    with pytest.raises(ValueError):
        CalibrationTable((0, 180, 360), (180, 0))


def test_calibration_table_empty():
    with pytest.raises(ValueError):
        CalibrationTable((), ())


def test_ethernet_defaults():
    eth = EthernetSettings()
    assert eth.ip_address == ipaddress.IPv4Address("192.168.1.172")
    assert str(eth.gateway) == "192.168.1.1"
    assert str(eth.subnet_mask) == "255.255.255.0"
    assert eth.tcp_ports == (23, 24)
    assert eth.preamble == "K3NG"
    assert str(eth.slave_ip_address) == "192.168.1.173"


def test_ethernet_addresses_converted_from_strings():
    eth = EthernetSettings(ip_address="10.0.0.5")
    assert eth.ip_address == ipaddress.IPv4Address("10.0.0.5")


def test_ethernet_bad_mac_length():
    with pytest.raises(ValueError):
        EthernetSettings(mac_address=(0x02, 0x00, 0x00))


def test_ethernet_bad_mac_byte():
    with pytest.raises(ValueError):
        EthernetSettings(mac_address=(0x02, 0, 0, 0, 0, 256))


def test_ethernet_bad_port():
    with pytest.raises(ValueError):
        EthernetSettings(slave_tcp_port=0)


def test_ethernet_bad_ip():
    with pytest.raises(ValueError):
        EthernetSettings(gateway="not-an-address")


@pytest.mark.parametrize(
    "name",
    ["az_slow_down_pwm_start", "el_slow_start_steps", "speed_pot_high_map"],
)
def test_pwm_fields_must_fit_a_byte(name):
    with pytest.raises(ValueError):
        Settings(**{name: 256})


def test_pwm_speed_voltage_out_of_range():
    with pytest.raises(ValueError):
        Settings(pwm_speed_voltages=(64, 128, 191, 300))


def test_initially_in_slow_down_pwm_must_be_positive():
    with pytest.raises(ValueError):
        Settings(az_initially_in_slow_down_pwm=0)


def test_smoothing_factor_range():
    with pytest.raises(ValueError):
        Settings(azimuth_smoothing_factor=100)


def test_encoder_zero_position_limit():
    assert Settings(az_incremental_encoder_zero_pulse_position=8000).az_incremental_encoder_zero_pulse_position == 8000
    with pytest.raises(ValueError):
        Settings(az_incremental_encoder_zero_pulse_position=8001)


def test_audible_alert_type_must_be_known():
    with pytest.raises(ValueError):
        Settings(audible_alert_type=3)


def test_latitude_range():
    with pytest.raises(ValueError):
        Settings(default_latitude=91.0)


def test_invalid_display_position():
    with pytest.raises(ValueError):
        Settings(lcd_hhmm_clock_position="middle")


def test_replace_keeps_other_values():
    changed = dataclasses.replace(default_settings(), lcd_columns=16, lcd_rows=2)
    assert changed.lcd_columns == 16
    assert changed.lcd_rows == 2
    assert changed.operation_timeout_ms == default_settings().operation_timeout_ms


def test_replace_validates():
    with pytest.raises(ValueError):
        dataclasses.replace(default_settings(), elevation_smoothing_factor=-1)


def test_settings_are_frozen():
    settings = default_settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.lcd_columns = 16
    assert settings.lcd_columns == 20


def test_default_settings_equal_each_call():
    first = default_settings()
    second = default_settings()
    assert first == second
    assert second.lcd_columns == 20
    assert second.pwm_speed_voltages == (64, 128, 191, 253)