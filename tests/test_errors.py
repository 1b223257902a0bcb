#
# Ethunits - Errors Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from ethunits.errors import (
    EmptyValueError,
    FractionalError,
    InvalidFormatError,
    NegativeError,
    ParseFailureError,
    UnitsError,
    UnknownUnitError,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestErrors:

    @pytest.mark.parametrize(
        "error, expected",
        [
            pytest.param(EmptyValueError(), "failed to parse empty value", id="empty"),
            pytest.param(InvalidFormatError(), "invalid format", id="format"),
            pytest.param(UnknownUnitError("foo"), "unknown unit foo", id="unit"),
            pytest.param(FractionalError(), "value resulted in fractional number of Wei", id="fractional"),
            pytest.param(NegativeError(), "value resulted in negative number of Wei", id="negative"),
            pytest.param(ParseFailureError("1000", "foo"), "failed to parse 1000 foo", id="failure"),
            pytest.param(ParseFailureError("", "foo"), "failed to parse  foo", id="failure-empty-literal"),
        ],
    )
    def test_messages(self, error, expected):
        assert str(error) == expected
        assert isinstance(error, UnitsError)
        assert isinstance(error, ValueError)

    def test_attributes(self):
        assert UnknownUnitError("foo").unit == "foo"
        failure = ParseFailureError("1.5", "weiwei")
        assert (failure.literal, failure.unit) == ("1.5", "weiwei")

    def test_catch_as_value_error(self):
        with pytest.raises(ValueError):
            raise NegativeError()
