"""
Parse human-readable amounts such as "0.05 Ether" or "21 Gwei" into an exact number of Wei.

Input is a number with an optional unit, e.g. "1000000000000000", "10 ether",
"1_000_000 Ether" or ".5 finney". Spaces and underscores are removed before
matching, the decimal separator is always the period, and unit names are
case-insensitive. Arithmetic is done on Python ints only, so no precision is lost.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import (
    EmptyValueError,
    FractionalError,
    InvalidFormatError,
    NegativeError,
    ParseFailureError,
    UnitsError,
    UnknownUnitError,
)
from .numeric import digits_to_int
from .tools import fmt_type
from .units import UnitsConf, unit_multiplier

__all__ = [
    'ParsedAmount',
    'string_to_gwei',
    'string_to_wei',
]

logger = logging.getLogger(__name__)

# Numeric literal followed by an optional alphabetic unit name
_VALUE_PATTERN = re.compile(r"(-?[0-9]*(?:\.[0-9]*)?)([A-Za-z]+)?")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedAmount:
    """
    Input string split into its numeric literal and unit text.

    Both parts come from the separator-stripped input, so "2 mega wei"
    becomes literal "2" and unit "megawei".
    """

    literal: str
    unit: str = ""

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Strip separators and split value into literal and unit.

        Raises:
            InvalidFormatError: If value is not a number followed by an optional unit name.
        """
        for separator in UnitsConf.SEPARATORS:
            value = value.replace(separator, "")

        match = _VALUE_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidFormatError()

        return cls(literal=match.group(1), unit=match.group(2) or "")

    @property
    def is_decimal(self) -> bool:
        return "." in self.literal

    @property
    def integer_part(self) -> str:
        """Digits before the period, with the sign if any."""
        return self.literal.partition(".")[0]

    @property
    def fraction_part(self) -> str:
        """Digits after the period, empty if there is none."""
        return self.literal.partition(".")[2]


# Methods --------------------------------------------------------------------------------------------------------------

def string_to_wei(value: str) -> int:
    """
    Turn a string into a number of Wei.

    The string can be a plain number of Wei, e.g. "1000000000000000", or a number
    followed by a unit, e.g. "10 ether". Unit names can be given names ("finney")
    or metric names ("milliether"), see ethunits.units.unit_multiplier().

    Raises:
        TypeError: If value is not a str.
        EmptyValueError: If value is an empty string.
        InvalidFormatError: If value is not a number with an optional unit.
        ParseFailureError: If the number or the unit cannot be understood.
        FractionalError: If the value needs a fraction of a Wei.
        NegativeError: If the value is below zero.

    Examples:
        >>> string_to_wei("0.024ether")
        24000000000000000
        >>> string_to_wei("21 Gwei")
        21000000000
        >>> string_to_wei("0.1 wei")
        Traceback (most recent call last):
            ...
        ethunits.errors.FractionalError: value resulted in fractional number of Wei
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be a str, got {fmt_type(value)}")

    try:
        return _string_to_wei(value)
    except UnitsError as e:
        logger.debug("Rejected amount %r: %s: %s", value, type(e).__name__, e)
        raise


def string_to_gwei(value: str) -> int:
    """
    Turn a string into a number of GWei.

    See string_to_wei() for the accepted input. Any part of the value below
    1 GWei is dropped, and the result is truncated to an unsigned 64-bit integer.

    Examples:
        >>> string_to_gwei("1.5 ether")
        1500000000
        >>> string_to_gwei("999 wei")
        0
    """
    wei = string_to_wei(value)
    return (wei // UnitsConf.WEI_PER_GWEI) & UnitsConf.UINT64_MAX


# Private Methods ------------------------------------------------------------------------------------------------------

def _string_to_wei(value: str) -> int:
    if value == "":
        raise EmptyValueError()

    parsed = ParsedAmount.from_string(value)
    if parsed.is_decimal:
        result = _decimal_string_to_wei(parsed)
    else:
        result = _integer_string_to_wei(parsed.literal, parsed.unit)

    if result < 0:
        raise NegativeError()

    return result


def _integer_string_to_wei(literal: str, unit: str) -> int:
    """Signed integer literal times the unit multiplier."""
    try:
        number = digits_to_int(literal)
        multiplier = unit_multiplier(unit)
    except ValueError as e:
        raise ParseFailureError(literal, unit) from e

    return number * multiplier


def _decimal_string_to_wei(parsed: ParsedAmount) -> int:
    """
    Decimal literal times the unit multiplier, without floating point.

    The signed integer part is converted on its own, an empty one counting as
    zero. The multiplier is then divided by ten once per significant fraction
    digit and multiplied by the fraction digits read as an integer. A multiplier
    reaching zero means the fraction is finer than one Wei.

    The fraction is always added, so "-0.5 ether" is half an Ether while
    "-1.5 ether" is negative. A lone "." is zero.
    """
    integer_part, fraction_part = parsed.integer_part, parsed.fraction_part

    try:
        multiplier = unit_multiplier(parsed.unit)
        result = _integer_string_to_wei(integer_part, parsed.unit) if integer_part else 0
    except UnknownUnitError as e:
        raise ParseFailureError(parsed.literal, parsed.unit) from e
    except ParseFailureError as e:
        raise ParseFailureError(parsed.literal, parsed.unit) from e.__cause__

    fraction_digits = fraction_part.rstrip("0")
    if fraction_digits:
        for _ in fraction_digits:
            multiplier //= 10
            if multiplier == 0:
                raise FractionalError()
        result += multiplier * int(fraction_digits)

    return result
