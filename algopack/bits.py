"""Bit tricks on signed 8-bit integers.

Every value is treated as a two's complement byte in the range -128..127.
Results wrap around the way an 8-bit register would.
"""

_MIN = -128
_MAX = 127
_WIDTH = 8


def _check(value: int) -> int:
    if not _MIN <= value <= _MAX:
        raise ValueError(f"{value} is not a signed 8-bit value")
    return value


def _check_position(n: int) -> int:
    if not 0 <= n < _WIDTH:
        raise ValueError(f"bit position {n} is outside 0..{_WIDTH - 1}")
    return n


def _wrap(value: int) -> int:
    """Reduce an integer to its signed 8-bit two's complement value."""
    value &= 0xFF
    return value - 0x100 if value > _MAX else value


def get_bit(bits: int, n: int) -> int:
    """Return bit ``n`` of ``bits`` as 0 or 1."""
    return (_check(bits) >> _check_position(n)) & 1


def set_bit(bits: int, n: int) -> int:
    """Return ``bits`` with bit ``n`` set."""
    return _wrap(_check(bits) | (1 << _check_position(n)))


def clear_bit(bits: int, n: int) -> int:
    """Return ``bits`` with bit ``n`` cleared."""
    return _wrap(_check(bits) & ~(1 << _check_position(n)))


def update_bit(bits: int, n: int, set_it: bool) -> int:
    """Return ``bits`` with bit ``n`` set if ``set_it`` is true, cleared otherwise."""
    cleared = clear_bit(bits, n)
    return set_bit(cleared, n) if set_it else cleared


def is_even(bits: int) -> bool:
    """True when the lowest bit is clear."""
    return get_bit(bits, 0) == 0


def is_positive(bits: int) -> bool:
    """True when ``bits`` is strictly greater than zero (sign bit clear)."""
    if _check(bits) == 0:
        return False
    return get_bit(bits, 7) == 0


def multiply_by_two(bits: int) -> int:
    """Shift left by one, wrapping at eight bits."""
    return _wrap(_check(bits) << 1)


def divide_by_two(bits: int) -> int:
    """Arithmetic shift right by one."""
    return _check(bits) >> 1


def twos_complement(bits: int) -> int:
    """Negate ``bits`` by inverting and adding one, wrapping at eight bits."""
    return _wrap(~_check(bits) + 1)


def multiply_signed(a: int, b: int) -> int:
    """Multiply two signed bytes with shifts and additions, wrapping at eight bits."""
    _check(a)
    _check(b)
    if a == 0 or b == 0:
        return 0
    if is_even(b):
        return multiply_signed(multiply_by_two(a), divide_by_two(b))
    if is_positive(b):
        rest = multiply_signed(multiply_by_two(a), divide_by_two(_wrap(b - 1)))
        return _wrap(rest + a)
    rest = multiply_signed(multiply_by_two(a), divide_by_two(_wrap(b + 1)))
    return _wrap(rest - a)


def multiply_unsigned(a: int, b: int) -> int:
    """Multiply using the lower seven bits of ``b``.

    Raises OverflowError when a partial product or the sum leaves the
    signed 8-bit range.
    """
    _check(a)
    _check(b)
    result = 0
    for i in range(_WIDTH - 1):
        if get_bit(b, i) == 1:
            partial = a * (1 << i)
            if not _MIN <= partial <= _MAX:
                raise OverflowError(f"{a} * {1 << i} overflows a signed byte")
            result += partial
            if not _MIN <= result <= _MAX:
                raise OverflowError("product overflows a signed byte")
    return result


def count_ones(bits: int) -> int:
    """Count the set bits among the lower seven bits."""
    _check(bits)
    return sum((bits >> i) & 1 for i in range(_WIDTH - 1))


def bit_distance(a: int, b: int) -> int:
    """Number of differing bits among the lower seven bits of ``a`` and ``b``."""
    return count_ones(_check(a) ^ _check(b))


def bits_length(bits: int) -> int:
    """Number of bits needed to hold a non-negative value; 0 for values <= 0.

    Raises OverflowError for values of 64 and above, whose length would
    require shifting into the sign bit.
    """
    _check(bits)
    if bits <= 0:
        return 0
    length = bits.bit_length()
    if length >= _WIDTH - 1:
        raise OverflowError(f"the length of {bits} does not fit below the sign bit")
    return length


def is_power_of_two(bits: int) -> bool:
    """True when at most one bit is set (zero counts as a power of two)."""
    return _check(bits) & _wrap(bits - 1) == 0