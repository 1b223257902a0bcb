#
# Ethunits Unit Table
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .errors import UnknownUnitError
from .tools import fmt_type


# @formatter:off

class UnitsConf:
    """
    Read-only tunables shared by the parser and the formatters.

    Attributes:
        SEPARATORS (tuple)   : Characters removed from input strings before matching
        GROUP_BASE (int)     : Ratio between neighbouring units on the ladder
        GROUP_DIGITS (int)   : Decimal digits per ladder step
        GWEI_POS (int)       : Ladder position of GWei, the top of the Wei family in standard mode
        MICROETHER_POS (int) : Ladder position folded back into GWei in standard mode
        ETHER_POS (int)      : Ladder position used for everything above GWei in standard mode
        WEI_PER_GWEI (int)   : Wei in one GWei
        GWEI_DIGITS (int)    : Fraction digits of a GWei expressed in Wei
        UINT64_MAX (int)     : Largest GWei amount accepted and returned by the GWei helpers
        OVERFLOW (str)       : Formatter output above the largest known unit
        ZERO (str)           : Formatter output for zero and None
    """
    SEPARATORS = (" ", "_")
    GROUP_BASE = 1000
    GROUP_DIGITS = 3
    GWEI_POS = 3
    MICROETHER_POS = 4
    ETHER_POS = 6
    WEI_PER_GWEI = 10**9
    GWEI_DIGITS = 9
    UINT64_MAX = 2**64 - 1
    OVERFLOW = "overflow"
    ZERO = "0"


@unique
class MetricUnit(StrEnum):
    """Canonical display names, in ladder order from Wei upwards."""
    WEI = "Wei"
    KWEI = "KWei"
    MWEI = "MWei"
    GWEI = "GWei"
    MICROETHER = "Microether"
    MILLIETHER = "Milliether"
    ETHER = "Ether"
    KILOETHER = "Kiloether"
    MEGAETHER = "Megaether"
    GIGAETHER = "Gigaether"
    TERAETHER = "Teraether"


# Ladder position (power of 1000) -> canonical unit
metric_units = BiDirectionalMap(enumerate(MetricUnit))

# Lower-case unit name or alias -> ladder position
unit_positions = frozendict({
    "": 0, "wei": 0,
    "ada": 1, "kwei": 1, "kilowei": 1,
    "babbage": 2, "mwei": 2, "megawei": 2,
    "shannon": 3, "gwei": 3, "gigawei": 3,
    "szazbo": 4, "micro": 4, "microether": 4,
    "finney": 5, "milli": 5, "milliether": 5,
    "eth": 6, "ether": 6,
    "einstein": 7, "kilo": 7, "kiloether": 7,
    "mega": 8, "megaether": 8,
    "giga": 9, "gigaether": 9,
    "tera": 10, "teraether": 10,
})

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def unit_position(unit: str | MetricUnit) -> int:
    """
    Ladder position of a unit name or alias, case-insensitive.

    The position is the power of 1000 the unit stands for, and the index of
    its canonical name in MetricUnit: unit_position("Ether") == 6.
    MetricUnit members resolve through the ladder directly.

    Raises:
        TypeError: If unit is not a str.
        UnknownUnitError: If unit is not in the unit table.
    """
    if not isinstance(unit, str):
        raise TypeError(f"unit must be a str, got {fmt_type(unit)}")
    if isinstance(unit, MetricUnit):
        return metric_units.get_key(unit)
    try:
        return unit_positions[unit.lower()]
    except KeyError:
        raise UnknownUnitError(unit) from None


def unit_multiplier(unit: str) -> int:
    """
    Number of Wei in one unit.

    Unit names are case-insensitive and can be given names (e.g. "finney") or
    metric names (e.g. "milliether"). The empty string means Wei. No other
    normalization is applied, so plurals such as "ethers" are unknown.

    Raises:
        TypeError: If unit is not a str.
        UnknownUnitError: If unit is not in the unit table.

    Examples:
        >>> unit_multiplier("ether")
        1000000000000000000
        >>> unit_multiplier("Shannon")
        1000000000
    """
    return UnitsConf.GROUP_BASE ** unit_position(unit)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every canonical name must resolve back to its own ladder position.
if any(unit_positions.get(unit.lower()) != pos for pos, unit in metric_units.items()):
    raise AssertionError(
        "Configuration Error: canonical unit names and unit aliases disagree on ladder positions."
    )
