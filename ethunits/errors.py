"""
Exceptions raised while parsing unit strings.

All of them derive from UnitsError, itself a ValueError, so callers can catch
a single type or the builtin they already expect from malformed input.
"""

__all__ = [
    'UnitsError',
    'EmptyValueError',
    'InvalidFormatError',
    'UnknownUnitError',
    'FractionalError',
    'NegativeError',
    'ParseFailureError',
]


# Classes --------------------------------------------------------------------------------------------------------------

class UnitsError(ValueError):
    """Base class for unit parsing errors."""

    message = "unit conversion error"

    def __init__(self, *details: str) -> None:
        text = " ".join([self.message, *details])
        super().__init__(text)


class EmptyValueError(UnitsError):
    message = "failed to parse empty value"


class InvalidFormatError(UnitsError):
    message = "invalid format"


class UnknownUnitError(UnitsError):
    """Unit name not found in the unit table."""

    message = "unknown unit"

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(unit)


class FractionalError(UnitsError):
    message = "value resulted in fractional number of Wei"


class NegativeError(UnitsError):
    message = "value resulted in negative number of Wei"


class ParseFailureError(UnitsError):
    """
    A numeric literal and unit text could not be turned into Wei.

    Attributes:
        literal: The numeric part of the input after separator stripping.
        unit: The unit text after separator stripping, possibly several words merged.

    The underlying error, if any, is available as __cause__.
    """

    message = "failed to parse"

    def __init__(self, literal: str, unit: str) -> None:
        self.literal = literal
        self.unit = unit
        super().__init__(literal, unit)
