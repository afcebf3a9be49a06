"""Tests for the numeric guards."""

import pytest

from volume_fader import InvalidArgument
from volume_fader.core.validation import (
    check_callback,
    check_positive,
    check_volume,
    is_number,
    valid_positive,
    valid_zero_to_one,
)


class TestValidation:
    """Tests for validation helpers."""

    def test_is_number(self):
        assert is_number(1)
        assert is_number(0.5)
        assert not is_number(True)
        assert not is_number(float("nan"))
        assert not is_number("1")
        assert not is_number(None)

    def test_valid_zero_to_one(self):
        assert valid_zero_to_one(0)
        assert valid_zero_to_one(1)
        assert valid_zero_to_one(0.5)
        assert not valid_zero_to_one(1.5)
        assert not valid_zero_to_one(-0.1)
        assert not valid_zero_to_one(float("nan"))

    def test_valid_positive(self):
        assert valid_positive(0.001)
        assert not valid_positive(0)
        assert not valid_positive(-1)
        assert not valid_positive(float("inf"))

    def test_check_volume(self):
        """Test that check_volume returns floats and names the parameter."""
        assert check_volume(1) == 1.0
        assert isinstance(check_volume(1), float)
        with pytest.raises(InvalidArgument, match="target_volume"):
            check_volume(2, "target_volume")

    def test_check_positive(self):
        assert check_positive(250) == 250.0
        with pytest.raises(InvalidArgument, match="update_interval"):
            check_positive(0, "update_interval")

    def test_check_callback(self):
        assert check_callback(None) is None
        assert check_callback(print) is print
        with pytest.raises(InvalidArgument):
            check_callback(42)

    def test_invalid_argument_is_value_and_type_error(self):
        """Test that callers can catch either builtin error."""
        with pytest.raises(ValueError):
            check_volume(5)
        with pytest.raises(TypeError):
            check_volume("loud")
