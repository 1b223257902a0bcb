#
# Ethunits Formatters
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import int_to_digits, std_amount
from .tools import fmt_type, fmt_value
from .units import MetricUnit, UnitsConf, metric_units

__all__ = [
    'FormatPlan',
    'gwei_to_string',
    'wei_to_gwei_string',
    'wei_to_string',
]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class FormatPlan:
    """
    Working state of a single wei_to_string() call.

    Attributes:
        digits: Whole-number value in the unit at unit_pos, as a decimal string.
        unit_pos: Ladder position the digits are currently expressed in.
        target_pos: Ladder position the output will be displayed in.
        decimal_place: Index in digits where the decimal point goes, may be <= 0 or past the end.
    """
    digits: str
    unit_pos: int
    target_pos: int
    decimal_place: int


# Methods --------------------------------------------------------------------------------------------------------------

def wei_to_string(amount: int | None, standard: bool = False) -> str:
    """
    Turn a number of Wei into a string in the most readable unit.

    The value is shown in the largest unit that keeps at most three digits before
    the decimal point, e.g. 2034 -> "2.034 KWei". With standard=True only the
    Wei family (up to GWei) and Ether are used: anything up to 0.001 Ether stays
    in GWei, larger values are shown in Ether.

    Args:
        amount: Number of Wei, any exact integer type (see ethunits.numeric.std_amount), or None.
        standard: Restrict the output to Wei, KWei, MWei, GWei and Ether.

    Returns:
        "<value> <Unit>", "0" for zero or None, or "overflow" when the value is too
        large for Teraether. Negative amounts are shown with a leading "-".

    Examples:
        >>> wei_to_string(1234567890)
        '1.23456789 GWei'
        >>> wei_to_string(10**12)
        '1 Microether'
        >>> wei_to_string(10**12, standard=True)
        '1000 GWei'
        >>> wei_to_string(10**33)
        'overflow'
    """
    value = std_amount(amount)
    if not value:
        return UnitsConf.ZERO

    sign = "-" if value < 0 else ""

    # Anything from 1000 Teraether up has no unit outside standard mode
    if not standard and abs(value) >= UnitsConf.GROUP_BASE ** len(metric_units):
        return UnitsConf.OVERFLOW

    # Decimal placement is done on strings, floats cannot hold 18+ exact decimals
    value, unit_pos = _descale(abs(value))
    plan = _plan(value, unit_pos, standard)
    digits, unit_pos = _render(plan)

    if unit_pos >= len(metric_units):
        return UnitsConf.OVERFLOW

    return f"{sign}{digits} {metric_units[unit_pos]}"


def gwei_to_string(amount: int, standard: bool = False) -> str:
    """
    Turn a number of GWei into a string, see wei_to_string().

    Raises:
        TypeError: If amount is not an integer.
        ValueError: If amount does not fit in an unsigned 64-bit integer.
    """
    value = std_amount(amount)
    if value is None:
        raise TypeError(f"amount must be an integer, got {fmt_type(amount)}")
    if not 0 <= value <= UnitsConf.UINT64_MAX:
        raise ValueError(f"amount must be an unsigned 64-bit integer, got {fmt_value(value)}")

    return wei_to_string(value * UnitsConf.WEI_PER_GWEI, standard)


def wei_to_gwei_string(amount: int | None) -> str:
    """
    Turn a number of Wei into a GWei string, whatever its magnitude.

    Examples:
        >>> wei_to_gwei_string(1)
        '0.000000001 GWei'
        >>> wei_to_gwei_string(999000050000)
        '999.00005 GWei'
        >>> wei_to_gwei_string(None)
        '0'
    """
    value = std_amount(amount)
    if value is None:
        return UnitsConf.ZERO

    sign = "-" if value < 0 else ""
    whole, remainder = divmod(abs(value), UnitsConf.WEI_PER_GWEI)
    if remainder == 0:
        return f"{sign}{int_to_digits(whole)} {MetricUnit.GWEI}"

    fraction = f"{remainder:0{UnitsConf.GWEI_DIGITS}d}".rstrip("0")
    return f"{sign}{int_to_digits(whole)}.{fraction} {MetricUnit.GWEI}"


# Private Methods ------------------------------------------------------------------------------------------------------

def _descale(value: int) -> tuple[int, int]:
    """
    Step a positive value up the ladder while it stays a whole number.

    Returns the value in the largest such unit together with that unit's position.
    """
    unit_pos = 0
    while value >= UnitsConf.GROUP_BASE and value % UnitsConf.GROUP_BASE == 0:
        value //= UnitsConf.GROUP_BASE
        unit_pos += 1

    return value, unit_pos


def _plan(value: int, unit_pos: int, standard: bool) -> FormatPlan:
    """Pick the display unit and where the decimal point goes."""
    digits = int_to_digits(value)

    # Each group of three digits beyond the first moves one unit up
    target_pos = unit_pos
    if len(digits) > UnitsConf.GROUP_DIGITS:
        groups, rest = divmod(len(digits), UnitsConf.GROUP_DIGITS)
        target_pos += groups - 1 if rest == 0 else groups

    if standard and target_pos > UnitsConf.GWEI_POS:
        # GWei covers a wide range, keep anything below 0.001 Ether in it
        if target_pos == UnitsConf.MICROETHER_POS:
            target_pos = UnitsConf.GWEI_POS
        else:
            target_pos = UnitsConf.ETHER_POS

    decimal_place = len(digits)
    if unit_pos < target_pos:
        decimal_place -= UnitsConf.GROUP_DIGITS * (target_pos - unit_pos)
        unit_pos = target_pos

    return FormatPlan(digits=digits, unit_pos=unit_pos, target_pos=target_pos, decimal_place=decimal_place)


def _render(plan: FormatPlan) -> tuple[str, int]:
    """Apply a FormatPlan, returning the trimmed number string and its unit position."""
    digits = plan.digits
    decimal_place = plan.decimal_place

    # Value sits above the target unit, pad zeros down to it
    steps_down = plan.unit_pos - plan.target_pos
    if steps_down > 0:
        digits += "0" * (UnitsConf.GROUP_DIGITS * steps_down)
        decimal_place += UnitsConf.GROUP_DIGITS * steps_down

    if decimal_place <= 0:
        digits = "0." + "0" * -decimal_place + digits
    elif decimal_place < len(digits):
        digits = f"{digits[:decimal_place]}.{digits[decimal_place:]}"

    if "." in digits:
        digits = digits.rstrip("0")

    return digits, plan.target_pos
