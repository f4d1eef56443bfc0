import pytest

from algopack.bits import (
    bit_distance,
    bits_length,
    clear_bit,
    count_ones,
    divide_by_two,
    get_bit,
    is_even,
    is_positive,
    is_power_of_two,
    multiply_by_two,
    multiply_signed,
    multiply_unsigned,
    set_bit,
    twos_complement,
    update_bit,
)


def test_get_bit():
    bits = 0b0101_0101
    assert get_bit(bits, 7) == 0
    assert get_bit(bits, 6) == 1
    assert get_bit(bits, 0) == 1


def test_get_bit_sign_bit_of_negative():
    assert get_bit(-1, 7) == 1


def test_set_bit():
    bits = 0b101_0101
    assert set_bit(bits, 1) == 0b101_0111
    assert set_bit(bits, 3) == 0b101_1101


def test_set_sign_bit_wraps():
    assert set_bit(0, 7) == -128


def test_clear_bit():
    bits = 0b101_0101
    assert clear_bit(bits, 0) == 0b101_0100
    assert clear_bit(bits, 2) == 0b101_0001


def test_update_bit():
    bits = 0b101_0101
    assert update_bit(bits, 0, False) == 0b101_0100
    assert update_bit(bits, 2, False) == 0b101_0001
    assert update_bit(bits, 1, True) == 0b101_0111
    assert update_bit(bits, 3, True) == 0b101_1101
    assert update_bit(bits, 0, True) == bits
    assert update_bit(bits, 2, True) == bits
    assert update_bit(bits, 1, False) == bits
    assert update_bit(bits, 3, False) == bits


@pytest.mark.parametrize("value", [2, 0, 6, 36])
def test_is_even(value):
    assert is_even(value) is True


@pytest.mark.parametrize("value", [33, 1, 17, 127])
def test_is_not_even(value):
    assert is_even(value) is False


@pytest.mark.parametrize("value", [5, 1, 100, 127])
def test_is_positive(value):
    assert is_positive(value) is True


@pytest.mark.parametrize("value", [-1, -45, -128, 0])
def test_is_not_positive(value):
    assert is_positive(value) is False


def test_multiply_by_two():
    assert multiply_by_two(2) == 4
    assert multiply_by_two(6) == 12
    assert multiply_by_two(0) == 0
    assert multiply_by_two(1) == 2


def test_divide_by_two():
    assert divide_by_two(4) == 2
    assert divide_by_two(24) == 12
    assert divide_by_two(0) == 0
    assert divide_by_two(1) == 0


def test_twos_complement():
    assert twos_complement(1) == -1
    assert twos_complement(0) == 0
    assert twos_complement(127) == -127
    assert twos_complement(twos_complement(0)) == 0
    assert twos_complement(twos_complement(10)) == 10


def test_twos_complement_of_minimum_wraps():
    assert twos_complement(-128) == -128


def test_multiply_signed():
    assert multiply_signed(-6, 2) == -12
    assert multiply_signed(2, -4) == -8
    assert multiply_signed(2, -6) == -12
    assert multiply_signed(30, 4) == 120
    assert multiply_signed(-30, -4) == 120
    assert multiply_signed(36, 1) == 36
    assert multiply_signed(1, 36) == 36


def test_multiply_unsigned():
    assert multiply_unsigned(30, 4) == 120
    assert multiply_unsigned(4, 30) == 120
    assert multiply_unsigned(36, 1) == 36
    assert multiply_unsigned(1, 36) == 36
    assert multiply_unsigned(1, 0) == 0
    assert multiply_unsigned(0, 1) == 0
    assert multiply_unsigned(0, 0) == 0
    assert multiply_unsigned(32, 2) == 64
    assert multiply_unsigned(5, 5) == 25


def test_multiply_unsigned_overflow():
    with pytest.raises(OverflowError):
        multiply_unsigned(100, 100)


def test_count_ones():
    assert count_ones(0) == 0
    assert count_ones(1) == 1
    assert count_ones(0b101_0100) == 3
    assert count_ones(0b000_0100) == 1
    assert count_ones(0b111_1111) == 7


def test_bit_distance():
    assert bit_distance(0, 0) == 0
    assert bit_distance(127, 127) == 0
    assert bit_distance(55, 55) == 0
    assert bit_distance(0b111_1111, 0b000_0100) == 6
    assert bit_distance(0b101_1011, 0b000_0100) == 6
    assert bit_distance(0b111_1111, 0b000_0000) == 7


def test_bits_length():
    assert bits_length(0) == 0
    assert bits_length(1) == 1
    assert bits_length(5) == 3
    assert bits_length(63) == 6


def test_bits_length_negative_is_zero():
    assert bits_length(-5) == 0


def test_bits_length_overflow():
    with pytest.raises(OverflowError):
        bits_length(64)


@pytest.mark.parametrize("value", [0, 2, 16, 64])
def test_is_power_of_two(value):
    assert is_power_of_two(value) is True


@pytest.mark.parametrize("value", [33, 124, -13])
def test_is_not_power_of_two(value):
    assert is_power_of_two(value) is False


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        get_bit(200, 0)


def test_out_of_range_position_rejected():
    with pytest.raises(ValueError):
        set_bit(1, 8)