import pytest

from rotorsettings.pinmap import (
    Board,
    PinLocation,
    SpecialPins,
    UnsupportedBoardError,
    bit_clear,
    bit_read,
    bit_set,
    bit_write,
    ddr_register,
    input_register,
    pin_bit,
    pin_location,
    port_register,
    special_pins,
)

AVR_BOARDS = [Board.MEGA, Board.ATMEGA644, Board.LEONARDO, Board.UNO]


def _locations(board, pins):
    return {(port_register(board, p), pin_bit(board, p)) for p in pins}


def test_mega_pins_map_to_distinct_register_bits():
    assert len(_locations(Board.MEGA, range(70))) == 70


def test_uno_pins_map_to_distinct_register_bits():
    assert len(_locations(Board.UNO, range(20))) == 20


def test_atmega644_output_registers_are_distinct():
    assert len(_locations(Board.ATMEGA644, range(32))) == 32


@pytest.mark.parametrize("board", AVR_BOARDS)
def test_bits_fit_in_a_byte(board):
    assert all(0 <= pin_bit(board, p) <= 7 for p in range(20))


@pytest.mark.parametrize("board", [Board.MEGA, Board.LEONARDO, Board.UNO])
def test_register_letters_agree(board):
    for pin in range(20):
        letter = port_register(board, pin).removeprefix("PORT")
        assert ddr_register(board, pin) == "DDR" + letter
        assert input_register(board, pin) == "PIN" + letter


def test_uno_ports():
    assert port_register(Board.UNO, 3) == "PORTD"
    assert port_register(Board.UNO, 13) == "PORTB"
    assert port_register(Board.UNO, 14) == "PORTC"
    assert pin_bit(Board.UNO, 3) == 3


def test_atmega644_direction_registers_skip_port_c():
    assert port_register(Board.ATMEGA644, 16) == "PORTC"
    assert ddr_register(Board.ATMEGA644, 16) == "DDRA"
    assert input_register(Board.ATMEGA644, 16) == "PINA"


def test_mega_fallback_is_port_l():
    assert port_register(Board.MEGA, 45) == "PORTL"
    assert ddr_register(Board.MEGA, 45) == "DDRL"


def test_pin_location_matches_individual_lookups():
    for pin in range(30):
        loc = pin_location(Board.LEONARDO, pin)
        assert loc == PinLocation(
            port_register(Board.LEONARDO, pin),
            ddr_register(Board.LEONARDO, pin),
            input_register(Board.LEONARDO, pin),
            pin_bit(Board.LEONARDO, pin),
        )


@pytest.mark.parametrize("board", [Board.DUE, Board.ZERO, Board.OTHER])
def test_non_avr_boards_have_no_registers(board):
    with pytest.raises(UnsupportedBoardError):
        port_register(board, 5)
    with pytest.raises(UnsupportedBoardError):
        pin_location(board, 5)


def test_negative_pin_rejected():
    with pytest.raises(ValueError):
        pin_bit(Board.UNO, -1)


def test_special_pins_of_uno_and_mega():
    assert special_pins(Board.UNO) == SpecialPins(0, 1, 18, 19, 10, 11, 12, 13)
    assert special_pins(Board.MEGA).spi_ss == 53
    assert special_pins(Board.DUE).spi_ss == 78


def test_special_pins_unknown_for_other_board():
    with pytest.raises(UnsupportedBoardError):
        special_pins(Board.OTHER)


@pytest.mark.parametrize("value", [0, 0b10101010, 0xFF, 0x1234])
@pytest.mark.parametrize("bit", range(16))
def test_bit_operations_round_trip(value, bit):
    mask = 1 << bit
    assert bit_read(bit_set(value, bit), bit) == mask
    assert bit_read(bit_clear(value, bit), bit) == 0
    assert bit_clear(bit_set(value, bit), bit) == value & ~mask
    assert bit_write(value, bit, True) == bit_set(value, bit)
    assert bit_write(value, bit, 0) == bit_clear(value, bit)
    assert bit_set(value, bit) | bit_clear(value, bit) == value | mask


def test_bit_operations_reject_negative_bit():
    with pytest.raises(ValueError):
        bit_set(0, -1)