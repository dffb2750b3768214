"""Digital pin to I/O register mapping for common microcontroller boards."""

from __future__ import annotations

import enum
from collections.abc import Callable, Container
from dataclasses import dataclass

ERROR_SEQUENCE = 0b10101010


class UnsupportedBoardError(ValueError):
    """Raised when a board has no direct register mapping."""


class Board(enum.Enum):
    DUE = "due"
    ZERO = "zero"
    MEGA = "mega"
    ATMEGA644 = "atmega644"
    LEONARDO = "leonardo"
    UNO = "uno"
    OTHER = "other"


@dataclass(frozen=True)
class PinLocation:
    """Registers and bit number that control one digital pin."""

    port_register: str
    ddr_register: str
    input_register: str
    bit: int


@dataclass(frozen=True)
class SpecialPins:
    """Pin numbers of a board's hardware serial, I2C and SPI lines."""

    uart_rx: int
    uart_tx: int
    i2c_sda: int
    i2c_scl: int
    spi_ss: int
    spi_mosi: int
    spi_miso: int
    spi_sck: int


SOFTWARE_SPI_SS_PIN = 10
SOFTWARE_SPI_MOSI_PIN = 11
SOFTWARE_SPI_MISO_PIN = 12
SOFTWARE_SPI_SCK_PIN = 13

_SPECIAL_PINS = {
    Board.DUE: SpecialPins(0, 1, 20, 21, 78, 75, 74, 76),
    Board.ZERO: SpecialPins(0, 1, 16, 17, 14, 21, 18, 20),
    Board.MEGA: SpecialPins(0, 1, 20, 21, 53, 51, 50, 52),
    Board.ATMEGA644: SpecialPins(8, 9, 17, 16, 4, 5, 6, 7),
    Board.LEONARDO: SpecialPins(0, 1, 2, 3, 17, 16, 14, 15),
    Board.UNO: SpecialPins(0, 1, 18, 19, 10, 11, 12, 13),
}

_Rules = tuple[tuple[Container[int], str], ...]

_PORT_LETTERS: dict[Board, tuple[_Rules, str]] = {
    Board.MEGA: (
        (
            (range(22, 30), "A"),
            ({*range(10, 14), *range(50, 54)}, "B"),
            (range(30, 38), "C"),
            ({*range(18, 22), 38}, "D"),
            ({*range(0, 4), 5}, "E"),
            (range(54, 62), "F"),
            ({*range(39, 42), 4}, "G"),
            ({*range(6, 10), 16, 17}, "H"),
            ({14, 15}, "J"),
            (range(62, 70), "K"),
        ),
        "L",
    ),
    Board.ATMEGA644: (
        ((range(0, 8), "B"), (range(8, 16), "D"), (range(16, 24), "C")),
        "A",
    ),
    Board.LEONARDO: (
        (
            ({*range(0, 5), 6, 12, 24, 25, 29}, "D"),
            ({5, 13}, "C"),
            (range(18, 24), "F"),
            ({7}, "E"),
        ),
        "B",
    ),
    Board.UNO: (
        ((range(0, 8), "D"), (range(8, 14), "B")),
        "C",
    ),
}

# The ATmega644 direction and input registers skip port C: pins 16-23
# resolve to port A for DDR and PIN while the output register is PORTC.
_DIRECTION_LETTERS: dict[Board, tuple[_Rules, str]] = {
    Board.ATMEGA644: (
        ((range(0, 8), "B"), (range(8, 16), "D")),
        "A",
    ),
}

_BitRules = tuple[tuple[Container[int], Callable[[int], int]], ...]


def _const(value: int) -> Callable[[int], int]:
    return lambda _pin: value


_BIT_RULES: dict[Board, tuple[_BitRules, Callable[[int], int]]] = {
    Board.MEGA: (
        (
            (range(7, 10), lambda p: p - 3),
            (range(10, 14), lambda p: p - 6),
            (range(22, 30), lambda p: p - 22),
            (range(30, 38), lambda p: 37 - p),
            (range(39, 42), lambda p: 41 - p),
            (range(42, 50), lambda p: 49 - p),
            (range(50, 54), lambda p: 53 - p),
            (range(54, 62), lambda p: p - 54),
            (range(62, 70), lambda p: p - 62),
            ({0, 15, 17, 21}, _const(0)),
            ({1, 14, 16, 20}, _const(1)),
            ({19}, _const(2)),
            ({5, 6, 18}, _const(3)),
            ({2}, _const(4)),
            ({3, 4}, _const(5)),
        ),
        _const(7),
    ),
    Board.ATMEGA644: (
        (
            (range(0, 8), lambda p: p),
            (range(8, 16), lambda p: p - 8),
            (range(16, 24), lambda p: p - 16),
        ),
        lambda p: p - 24,
    ),
    Board.LEONARDO: (
        (
            (range(8, 12), lambda p: p - 4),
            (range(18, 22), lambda p: 25 - p),
            *(
                ({pin}, _const(bit))
                for pin, bit in {
                    0: 2, 1: 3, 2: 1, 3: 0, 4: 4, 6: 7, 13: 7, 14: 3, 15: 1,
                    16: 2, 17: 0, 22: 1, 23: 0, 24: 4, 25: 7, 26: 4, 27: 5,
                }.items()
            ),
        ),
        _const(6),
    ),
    Board.UNO: (
        (
            (range(0, 8), lambda p: p),
            (range(8, 14), lambda p: p - 8),
        ),
        lambda p: p - 14,
    ),
}


def _check(board: Board, pin: int) -> None:
    if board not in _PORT_LETTERS:
        raise UnsupportedBoardError(f"no direct register access on {board.name}")
    if pin < 0:
        raise ValueError(f"pin number must not be negative: {pin}")


def _letter(table: tuple[_Rules, str], pin: int) -> str:
    rules, default = table
    return next((letter for pins, letter in rules if pin in pins), default)


def port_register(board: Board, pin: int) -> str:
    """Name of the output register (PORTx) driving ``pin``."""
    _check(board, pin)
    return "PORT" + _letter(_PORT_LETTERS[board], pin)


def ddr_register(board: Board, pin: int) -> str:
    """Name of the data direction register (DDRx) for ``pin``."""
    _check(board, pin)
    return "DDR" + _letter(_DIRECTION_LETTERS.get(board, _PORT_LETTERS[board]), pin)


def input_register(board: Board, pin: int) -> str:
    """Name of the input register (PINx) read for ``pin``."""
    _check(board, pin)
    return "PIN" + _letter(_DIRECTION_LETTERS.get(board, _PORT_LETTERS[board]), pin)


def pin_bit(board: Board, pin: int) -> int:
    """Bit number of ``pin`` within its register."""
    _check(board, pin)
    rules, default = _BIT_RULES[board]
    return next((fn(pin) for pins, fn in rules if pin in pins), default(pin))


def pin_location(board: Board, pin: int) -> PinLocation:
    """All registers and the bit number for ``pin``."""
    return PinLocation(
        port_register=port_register(board, pin),
        ddr_register=ddr_register(board, pin),
        input_register=input_register(board, pin),
        bit=pin_bit(board, pin),
    )


def special_pins(board: Board) -> SpecialPins:
    """Hardware UART, I2C and SPI pin numbers of ``board``."""
    try:
        return _SPECIAL_PINS[board]
    except KeyError:
        raise UnsupportedBoardError(f"no known special pins for {board.name}") from None


def bit_read(value: int, bit: int) -> int:
    """``value`` masked to the single bit ``bit`` (zero or ``1 << bit``)."""
    return value & (1 << bit)


def bit_set(value: int, bit: int) -> int:
    """``value`` with bit ``bit`` set."""
    return value | (1 << bit)


def bit_clear(value: int, bit: int) -> int:
    """``value`` with bit ``bit`` cleared."""
    return value & ~(1 << bit)


def bit_write(value: int, bit: int, bit_value: object) -> int:
    """``value`` with bit ``bit`` set if ``bit_value`` is true, else cleared."""
    return bit_set(value, bit) if bit_value else bit_clear(value, bit)