# rotorsettings

Building blocks for an azimuth/elevation antenna rotator controller. The
package needs only the standard library.

- `rotorsettings.sunpos` gives the sun's azimuth and zenith angle for a
  time and a place on Earth.
- `rotorsettings.pinmap` maps Arduino pin numbers to AVR port, DDR and
  input registers and to bit positions for the supported boards. It also
  has small bit helpers.
- `rotorsettings.settings` holds the controller's default configuration,
  such as rotation limits, calibration tables, PWM ramps, display layout,
  serial ports and network settings.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Sun position

```python
from datetime import datetime, timezone
from rotorsettings.sunpos import Location, sun_position

here = Location(longitude=-75.585972, latitude=40.889958)
sun = sun_position(datetime(2024, 6, 21, 17, 0, tzinfo=timezone.utc), here)
print(sun.azimuth, sun.zenith_angle, sun.elevation)
```

`Location` takes degrees, and longitude is positive to the east.
`SunCoordinates` holds `zenith_angle` and `azimuth` in degrees. The
azimuth is measured clockwise from north, in the range 0 to 360. The
zenith angle includes a parallax correction. The `elevation` property is
`90 - zenith_angle`.

Aware datetimes are converted to UTC. Naive datetimes are taken to be in
UTC already. `elapsed_julian_days(when)` returns the number of days since
JD 2451545.0, which is noon on 1 January 2000 UT.

## Pin mapping

```python
from rotorsettings.pinmap import Board, pin_location, special_pins, bit_write

loc = pin_location(Board.MEGA, 13)   # loc.port_register == "PORTB", loc.bit == 7
pins = special_pins(Board.UNO)       # UART, I2C and SPI pin numbers
value = bit_write(0, loc.bit, True)  # 0b10000000
```

`port_register`, `ddr_register` and `input_register` return register
names such as `"PORTB"`, `"DDRB"` and `"PINB"`. `pin_bit` returns the bit
position of a pin within its register. `pin_location` returns all four
values together as a `PinLocation`.

Register mapping is available for `Board.MEGA`, `Board.ATMEGA644`,
`Board.LEONARDO` and `Board.UNO`. `special_pins` also knows `Board.DUE` and
`Board.ZERO`. For any other board the functions raise
`UnsupportedBoardError`, which is a `ValueError`. A negative pin number
raises `ValueError`.

The functions `bit_read`, `bit_set`, `bit_clear` and `bit_write` work on
plain integers and return the new value.

## Settings

```python
import dataclasses
from rotorsettings.settings import default_settings, button_states

settings = default_settings()
for raw, corrected in settings.azimuth_calibration.pairs():
    print(raw, corrected)

slower = dataclasses.replace(settings, operation_timeout_ms=60000)
active, inactive = button_states(ea4tx_ars_usb=False)
```

`Settings` is a frozen dataclass that holds every value with its factory
default. Use `dataclasses.replace` to make a variant with some values
changed. Out-of-range values raise `ValueError`. Examples are PWM values
above 255, smoothing factors outside 0 to 99.9, an unknown audible alert
type, and an invalid latitude or longitude.

The following types are used in `Settings`:

- `CalibrationTable`: a pair of point lists of equal length.
- `EthernetSettings`: MAC and IPv4 addresses, TCP ports and timeouts.
- `PinState`: the logic levels `LOW` and `HIGH`.
- `DisplayPosition`: the positions `LEFT`, `RIGHT` and `CENTER` on the display.

## What this package does not do

The package has no command-line program. It does not drive a rotator, and
it does not speak a serial or network control protocol. It does not store
settings persistently. It provides the settings, the pin mapping and the
sun calculation, which such a controller can build on.