"""
Standardize integer-like amounts before formatting.

Amounts of Wei arrive from many places: Python ints, NumPy integer scalars,
Decimal values read from JSON or a database. Formatting works on exact
Python ints only, so everything is narrowed here first.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

# Digits per chunk, well below the default int/str conversion limit of 4300
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


# Methods --------------------------------------------------------------------------------------------------------------

def std_amount(value) -> int | None:
    """
    Convert an integer-like amount to a standard Python int, or None.

    Parameters
    ----------
    value : various
        Amount to convert. Supports Python int and None, types implementing
        __index__ (NumPy integers), and integer-valued Decimal or Fraction.

    Returns
    -------
    int
        Exact value with arbitrary precision, never overflows.
    None
        For None input.

    Raises
    ------
    TypeError
        For bool, float, str and any other type without an exact integer value.
        Floats are refused because they cannot carry 18 decimal places of Ether.
    ValueError
        For Decimal or Fraction values with a fractional part, or non-finite Decimals.

    Examples
    --------
    >>> std_amount(10**18)
    1000000000000000000
    >>> std_amount(Decimal("21000000000"))
    21000000000
    >>> std_amount(None) is None
    True
    >>> std_amount(1.5)
    Traceback (most recent call last):
        ...
    TypeError: amount must be an integer, got <type: float>
    """
    if value is None:
        return None

    # bool is an int subclass, almost always a bug here
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, int):
        return value

    if isinstance(value, (Decimal, Fraction)):
        if isinstance(value, Decimal) and not value.is_finite():
            raise ValueError(f"amount must be finite, got {fmt_value(value)}")
        if value != int(value):
            raise ValueError(f"amount must be a whole number of Wei, got {fmt_value(value)}")
        return int(value)

    # NumPy integers and other exact integer types implement this
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    raise TypeError(f"amount must be an integer, got {fmt_type(value)}")


def int_to_digits(value: int) -> str:
    """
    Decimal digits of a non-negative int, whatever its length.

    str() refuses ints beyond the interpreter's int/str digit limit, so large
    values are converted in fixed-size chunks instead.

    Examples
    --------
    >>> int_to_digits(1234)
    '1234'
    >>> len(int_to_digits(10 ** 5000))
    5001
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {fmt_value(value)}")
    if value < _CHUNK:
        return str(value)

    chunks = []
    while value >= _CHUNK:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def digits_to_int(literal: str) -> int:
    """
    Exact int from an ASCII decimal literal with an optional leading minus, whatever its length.

    Raises
    ------
    ValueError
        If literal has no digits or contains anything but a leading "-" and ASCII digits.

    Examples
    --------
    >>> digits_to_int("-0042")
    -42
    >>> digits_to_int("1" + "0" * 5000) == 10 ** 5000
    True
    """
    digits = literal.removeprefix("-")
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid decimal literal: {fmt_value(literal)}")

    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if literal.startswith("-") else value
