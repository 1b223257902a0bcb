#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from ethunits.units import unit_positions

# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def parse_log(caplog):
    """Capture DEBUG records from the parser logger."""
    caplog.set_level(logging.DEBUG, logger="ethunits.parse")
    return caplog


@pytest.fixture(params=sorted(unit_positions))
def unit_alias(request) -> str:
    """Every unit name and alias in the unit table, including the empty Wei alias."""
    return request.param
