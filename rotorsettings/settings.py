"""Default configuration of an antenna rotator controller."""

from __future__ import annotations

import enum
import ipaddress
from collections.abc import Iterable
from dataclasses import dataclass, field, fields

_BYTE_MAX = 255


class PinState(enum.IntEnum):
    """Logic level of a digital pin."""

    LOW = 0
    HIGH = 1


class DisplayPosition(enum.Enum):
    """Horizontal placement of an item on a character display."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _require_byte(name: str, value: int, minimum: int = 0) -> None:
    _require(
        minimum <= value <= _BYTE_MAX,
        f"{name} must be between {minimum} and {_BYTE_MAX}, got {value}",
    )


@dataclass(frozen=True)
class CalibrationTable:
    """Piecewise-linear mapping from measured to corrected degrees.

    Both point lists must hold the same number of entries.
    """

    from_points: tuple[float, ...]
    to_points: tuple[float, ...]

    def __post_init__(self) -> None:
        from_points = tuple(self.from_points)
        to_points = tuple(self.to_points)
        _require(len(from_points) > 0, "calibration table must not be empty")
        _require(
            len(from_points) == len(to_points),
            f"calibration table needs as many 'from' as 'to' points "
            f"({len(from_points)} != {len(to_points)})",
        )
        object.__setattr__(self, "from_points", from_points)
        object.__setattr__(self, "to_points", to_points)

    def pairs(self) -> tuple[tuple[float, float], ...]:
        """The table as (from, to) pairs."""
        return tuple(zip(self.from_points, self.to_points))


def _ipv4(value: object) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(value)


@dataclass(frozen=True)
class EthernetSettings:
    """Network settings for the controller and its remote (slave) unit."""

    mac_address: tuple[int, ...] = (0xDE, 0xAD, 0xBE, 0xEF, 0xFE, 0xEE)
    ip_address: ipaddress.IPv4Address = ipaddress.IPv4Address("192.168.1.172")
    gateway: ipaddress.IPv4Address = ipaddress.IPv4Address("192.168.1.1")
    subnet_mask: ipaddress.IPv4Address = ipaddress.IPv4Address("255.255.255.0")
    tcp_ports: tuple[int, ...] = (23, 24)
    message_timeout_ms: int = 5000
    preamble: str = "K3NG"
    slave_ip_address: ipaddress.IPv4Address = ipaddress.IPv4Address("192.168.1.173")
    slave_tcp_port: int = 23
    slave_reconnect_time_ms: int = 250

    def __post_init__(self) -> None:
        mac = tuple(self.mac_address)
        _require(len(mac) == 6, f"MAC address needs 6 bytes, got {len(mac)}")
        for octet in mac:
            _require_byte("MAC address byte", octet)
        object.__setattr__(self, "mac_address", mac)
        for name in ("ip_address", "gateway", "subnet_mask", "slave_ip_address"):
            object.__setattr__(self, name, _ipv4(getattr(self, name)))
        ports = tuple(self.tcp_ports)
        object.__setattr__(self, "tcp_ports", ports)
        for port in (*ports, self.slave_tcp_port):
            _require(1 <= port <= 65535, f"invalid TCP port {port}")


def button_states(ea4tx_ars_usb: bool = False) -> tuple[PinState, PinState]:
    """Active and inactive button levels; EA4TX ARS USB hardware is active high."""
    if ea4tx_ars_usb:
        return PinState.HIGH, PinState.LOW
    return PinState.LOW, PinState.HIGH


def _positions(values: Iterable[DisplayPosition]) -> None:
    for value in values:
        _require(
            isinstance(value, DisplayPosition), f"not a display position: {value!r}"
        )


@dataclass(frozen=True)
class Settings:
    """Every tunable value of the controller, with its factory default."""

    # Rotation
    azimuth_starting_point: int = 0
    azimuth_rotation_capability: int = 360
    elevation_maximum_degrees: int = 180

    # Analog voltage calibration
    analog_az_full_ccw: int = 1
    analog_az_full_cw: int = 1023
    analog_el_full_down: int = 1
    analog_el_full_up: int = 1023
    analog_az_overlap_degrees: float | None = 540
    overlap_led_blink_ms: int = 100

    # PWM speed voltages, slowest to fastest
    pwm_speed_voltages: tuple[int, ...] = (64, 128, 191, 253)

    # Azimuth slow start / slow down
    az_slowstart_default: bool = False
    az_slowdown_default: bool = False
    az_slow_start_up_time_ms: int = 2000
    az_slow_start_starting_pwm: int = 5
    az_slow_start_steps: int = 255
    slow_down_before_target_az: float = 5.0
    az_slow_down_pwm_start: int = 255
    az_slow_down_pwm_stop: int = 0
    az_slow_down_steps: int = 255
    az_initially_in_slow_down_pwm: int = 50

    # Elevation slow start / slow down
    el_slowstart_default: bool = False
    el_slowdown_default: bool = False
    el_slow_start_up_time_ms: int = 5000
    el_slow_start_starting_pwm: int = 3
    el_slow_start_steps: int = 255
    slow_down_before_target_el: float = 10.0
    el_slow_down_pwm_start: int = 255
    el_slow_down_pwm_stop: int = 4
    el_slow_down_steps: int = 255
    el_initially_in_slow_down_pwm: int = 20

    timed_slow_down_time_ms: int = 2000

    # Variable frequency outputs and stepper motors, in hertz
    az_variable_freq_output_low: int = 20
    az_variable_freq_output_high: int = 500
    el_variable_freq_output_low: int = 20
    el_variable_freq_output_high: int = 250

    # Manual rotation limits
    az_manual_rotate_ccw_limit: int = 0
    az_manual_rotate_cw_limit: int = 535
    el_manual_rotate_down_limit: int = -1
    el_manual_rotate_up_limit: int = 181

    # Speed pot
    speed_pot_low: int = 0
    speed_pot_high: int = 850
    speed_pot_low_map: int = 1
    speed_pot_high_map: int = 255

    # Azimuth preset pot
    az_preset_pot_full_cw: int = 0
    az_preset_pot_full_ccw: int = 1023
    az_preset_pot_full_cw_map: int = 180
    az_preset_pot_full_ccw_map: int = 630

    encoder_preset_timeout_ms: int = 5000

    # General behaviour
    azimuth_tolerance: float = 0.01
    elevation_tolerance: float = 0.01
    operation_timeout_ms: int = 120000
    remote_unit_rotation_timeout_ms: int = 5000
    remote_unit_rotation_command_repeat_ms: int = 500
    timed_interval_array_size: int = 20

    # Character LCD
    lcd_columns: int = 20
    lcd_rows: int = 4
    lcd_update_time_ms: int = 1000
    lcd_hhmm_clock_position: DisplayPosition = DisplayPosition.LEFT
    lcd_hhmmss_clock_position: DisplayPosition = DisplayPosition.LEFT
    lcd_alt_hhmm_clock_and_maidenhead_position: DisplayPosition = DisplayPosition.LEFT
    lcd_alt_hhmm_clock_and_maidenhead_row: int = 1
    lcd_constant_hhmmss_clock_and_maidenhead_position: DisplayPosition = (
        DisplayPosition.CENTER
    )
    lcd_constant_hhmmss_clock_and_maidenhead_row: int = 3
    lcd_big_clock_row: int = 4
    lcd_gps_indicator_position: DisplayPosition = DisplayPosition.RIGHT
    lcd_gps_indicator_row: int = 1
    lcd_moon_tracking_row: int = 3
    lcd_moon_tracking_update_interval_ms: int = 5000
    lcd_sun_tracking_row: int = 4
    lcd_sun_tracking_update_interval_ms: int = 5000
    lcd_moon_or_sun_or_sat_tracking_conditional_row: int = 3
    splash_screen_time_ms: int = 3000
    lcd_periodic_redraw_time_secs: int = 0
    lcd_clear_before_redraw: bool = True
    lcd_redraw_upon_commands: bool = False
    lcd_heading_row: int = 2
    lcd_heading_field_size: int = 20
    lcd_az_only_heading_row: int = 1
    lcd_az_only_heading_field_size: int = 20
    lcd_el_only_heading_row: int = 2
    lcd_el_only_heading_field_size: int = 20
    lcd_status_row: int = 1
    lcd_status_field_size: int = 20
    lcd_direction_row: int = 1
    lcd_hhmmss_clock_row: int = 1
    lcd_hhmm_clock_row: int = 1
    parking_status_display_time_ms: int = 5000

    # Brakes
    az_brake_delay_ms: int = 3000
    el_brake_delay_ms: int = 3000
    brake_active_state: PinState = PinState.HIGH
    brake_inactive_state: PinState = PinState.LOW

    eeprom_write_dirty_config_time_s: int = 30
    display_decimal_places: int = 1

    # Position sensors
    az_position_rotary_encoder_deg_per_pulse: float = 0.5
    el_position_rotary_encoder_deg_per_pulse: float = 0.5
    az_position_pulse_deg_per_pulse: float = 0.5
    el_position_pulse_deg_per_pulse: float = 0.5

    not_parked_detect_time_ms: int = 1000
    command_buffer_size: int = 50

    # Remote unit link
    remote_buffer_timeout_ms: int = 250
    remote_unit_command_timeout_ms: int = 2000
    az_remote_unit_query_time_ms: int = 150
    el_remote_unit_query_time_ms: int = 150

    # Measurement
    azimuth_smoothing_factor: float = 0.0
    elevation_smoothing_factor: float = 0.0
    azimuth_measurement_frequency_ms: int = 100
    elevation_measurement_frequency_ms: int = 100

    joystick_wait_time_ms: int = 100

    # Rotation indicator pin
    rotation_indicator_pin_active_state: PinState = PinState.HIGH
    rotation_indicator_pin_inactive_state: PinState = PinState.LOW
    rotation_indicator_pin_time_delay_seconds: int = 0
    rotation_indicator_pin_time_delay_minutes: int = 0

    # Incremental encoders
    az_position_incremental_encoder_pulses_per_rev: int = 2000
    el_position_incremental_encoder_pulses_per_rev: int = 2000
    az_incremental_encoder_zero_pulse_position: int = 0
    el_incremental_encoder_zero_pulse_position: int = 0

    serial_led_time_ms: int = 250

    # Location
    default_latitude: float = 40.889958
    default_longitude: float = -75.585972
    default_altitude_m: int = 50

    # Moon and sun tracking
    moon_tracking_check_interval_ms: int = 5000
    moon_aos_azimuth_min: int = 0
    moon_aos_azimuth_max: int = 360
    moon_aos_elevation_min: int = 0
    moon_aos_elevation_max: int = 180
    sun_tracking_check_interval_ms: int = 5000
    sun_aos_azimuth_min: int = 0
    sun_aos_azimuth_max: int = 360
    sun_aos_elevation_min: int = 0
    sun_aos_elevation_max: int = 180
    sun_update_position_interval_ms: int = 5000
    moon_update_position_interval_ms: int = 5000

    lcd_display_degrees_string: str = "\xdf"
    nextion_display_degrees_string: str = "\xb0"

    # Clock and GPS
    internal_clock_correction: float = 0.00145
    sync_time_with_gps: bool = True
    sync_coordinates_with_gps: bool = True
    gps_sync_period_seconds: int = 10
    gps_valid_fix_age_ms: int = 10000
    gps_update_latency_compensation_ms: int = 200
    sync_with_rtc_seconds: int = 59
    sync_rtc_to_gps_seconds: int = 12
    sync_master_clock_to_slave_clock_secs: int = 10
    sync_master_coordinates_to_slave_secs: int = 20

    ethernet: EthernetSettings = field(default_factory=EthernetSettings)

    power_switch_idle_timeout_min: int = 15

    button_active_state: PinState = field(default_factory=lambda: button_states()[0])
    button_inactive_state: PinState = field(
        default_factory=lambda: button_states()[1]
    )

    # Calibration tables, in raw degrees
    azimuth_calibration: CalibrationTable = field(
        default_factory=lambda: CalibrationTable((180, 630), (180, 630))
    )
    elevation_calibration: CalibrationTable = field(
        default_factory=lambda: CalibrationTable((-360, 0, 360), (-360, 0, 360))
    )
    calibration_points: int = 8

    analog_output_max_el_degrees: int = 180
    el_position_pulse_debounce_ms: int = 500

    # Magnetometer calibration, per axis
    pololu_lsm303_min: tuple[int, int, int] = (59, 19, -731)
    pololu_lsm303_max: tuple[int, int, int] = (909, 491, 14)

    autocorrect_time_ms_az: int = 1000
    autocorrect_time_ms_el: int = 1000

    pin_led_active_state: PinState = PinState.HIGH
    pin_led_inactive_state: PinState = PinState.LOW

    # Audible alert: type 1 drives a logic level, type 2 a tone
    audible_alert_type: int = 1
    audible_alert_duration_ms: int = 250
    audible_pin_active_state: PinState = PinState.HIGH
    audible_pin_inactive_state: PinState = PinState.LOW
    audible_pin_tone_freq: int = 1000
    audible_alert_at_startup: bool = True
    audible_alert_at_az_target: bool = True
    audible_alert_at_el_target: bool = True

    overlap_led_active_state: PinState = PinState.HIGH
    overlap_led_inactive_state: PinState = PinState.LOW

    preset_encoder_change_time_ms: int = 2000

    # Stall detection
    stall_check_frequency_ms_az: int = 2000
    stall_check_degrees_threshold_az: int = 2
    stall_check_frequency_ms_el: int = 2000
    stall_check_degrees_threshold_el: int = 2

    rotational_and_configuration_cmd_ignore_time_ms: int = 100

    # Rotation pins
    rotate_pin_az_inactive_value: PinState = PinState.LOW
    rotate_pin_az_active_value: PinState = PinState.HIGH
    rotate_pin_el_inactive_value: PinState = PinState.LOW
    rotate_pin_el_active_value: PinState = PinState.HIGH

    # Serial ports
    control_port: str = "Serial3"
    control_port_baud_rate: int = 9600
    remote_port: str = "Serial3"
    remote_unit_port_baud_rate: int = 9600
    gps_port: str = "Serial2"
    gps_port_baud_rate: int = 9600
    nextion_serial_port: str = "Serial3"
    nextion_serial_baud: int = 115200
    control_port_initializing_string: str = "test\n\r"

    # Satellite tracking
    satellite_update_array_order_interval_ms: int = 5000
    satellite_tracking_update_interval_ms: int = 5000
    lcd_satellite_tracking_row: int = 4
    satellite_tle_char_size: int = 71
    satellite_tracking_alternating_time_ms: int = 5000
    lcd_display_satellite_visible_not_tracked_char: str = "~"
    lcd_display_satellite_visible_tracked_char: str = "*"
    lcd_display_satellite_not_visible_tracked_char: str = "."
    lcd_display_moon_tracking_active_char: str = "*"
    lcd_display_moon_tracking_inactive_char: str = "-"
    lcd_display_sun_tracking_active_char: str = "*"
    lcd_display_sun_tracking_inactive_char: str = "-"
    nextion_number_of_next_satellites: int = 6
    satellite_calc_timeout_ms: int = 10000
    satellite_aos_elevation_min: float = 0.0
    satellite_calc_stage_1_resolution_secs: int = 120
    satellite_calc_stage_2_resolution_secs: int = 10
    satellite_calc_stage_3_resolution_secs: int = 1

    nextion_gsc_startup_delay: int = 0

    def __post_init__(self) -> None:
        pwm_levels = tuple(self.pwm_speed_voltages)
        object.__setattr__(self, "pwm_speed_voltages", pwm_levels)
        for level in pwm_levels:
            _require_byte("pwm_speed_voltages entry", level)

        for name in (
            "az_slow_start_starting_pwm",
            "az_slow_start_steps",
            "az_slow_down_pwm_start",
            "az_slow_down_pwm_stop",
            "az_slow_down_steps",
            "el_slow_start_starting_pwm",
            "el_slow_start_steps",
            "el_slow_down_pwm_start",
            "el_slow_down_pwm_stop",
            "el_slow_down_steps",
            "speed_pot_low_map",
            "speed_pot_high_map",
        ):
            _require_byte(name, getattr(self, name))
        for name in ("az_initially_in_slow_down_pwm", "el_initially_in_slow_down_pwm"):
            _require_byte(name, getattr(self, name), minimum=1)

        for name in ("azimuth_smoothing_factor", "elevation_smoothing_factor"):
            value = getattr(self, name)
            _require(0 <= value <= 99.9, f"{name} must be 0 to 99.9, got {value}")

        for axis in ("az", "el"):
            pulses = getattr(self, f"{axis}_position_incremental_encoder_pulses_per_rev")
            zero = getattr(self, f"{axis}_incremental_encoder_zero_pulse_position")
            _require(pulses > 0, f"{axis} encoder pulses per revolution must be positive")
            _require(
                0 <= zero <= 4 * pulses,
                f"{axis} encoder zero pulse position must be 0 to {4 * pulses}",
            )

        _require(
            self.audible_alert_type in (1, 2),
            f"audible_alert_type must be 1 or 2, got {self.audible_alert_type}",
        )
        _require(
            -90.0 <= self.default_latitude <= 90.0,
            f"latitude out of range: {self.default_latitude}",
        )
        _require(
            -180.0 <= self.default_longitude <= 180.0,
            f"longitude out of range: {self.default_longitude}",
        )
        _require(
            self.lcd_columns > 0 and self.lcd_rows > 0,
            "LCD must have at least one row and column",
        )
        _require(self.command_buffer_size > 0, "command_buffer_size must be positive")

        for name in ("pololu_lsm303_min", "pololu_lsm303_max"):
            axes = tuple(getattr(self, name))
            _require(len(axes) == 3, f"{name} needs one value per axis")
            object.__setattr__(self, name, axes)

        for f in fields(self):
            value = getattr(self, f.name)
            if f.type == "PinState" and not isinstance(value, PinState):
                object.__setattr__(self, f.name, PinState(value))
        _positions(
            getattr(self, f.name) for f in fields(self) if f.type == "DisplayPosition"
        )


def default_settings() -> Settings:
    """The factory default configuration."""
    return Settings()