"""Unit tests for tracking code and password generation."""

import pytest

from shs_enrollment.exceptions import InvalidInputError
from shs_enrollment.utils.credentials import (
    generate_credentials,
    generate_password,
    generate_tracking_code,
)


class TestTrackingCode:
    def test_uses_last_six_digits(self):
        assert generate_tracking_code("123456789012") == "SV8BSHS-789012"

    def test_surrounding_whitespace_is_ignored(self):
        assert generate_tracking_code("  123456789012 ") == "SV8BSHS-789012"

    def test_custom_prefix(self):
        assert generate_tracking_code("123456789012", prefix="ABC") == "ABC-789012"

    @pytest.mark.parametrize("lrn", [None, "", "   ", "12345"])
    def test_rejects_missing_or_short_lrn(self, lrn):
        with pytest.raises(InvalidInputError):
            generate_tracking_code(lrn)


class TestPassword:
    def test_lastname_and_last_four_digits(self):
        assert generate_password("Cruz", "123456789012") == "SV8B-Cruz9012"

    def test_lastname_is_trimmed_but_keeps_case(self):
        assert generate_password("  dela Cruz ", "123456789012") == "SV8B-dela Cruz9012"

    def test_rejects_blank_lastname(self):
        with pytest.raises(InvalidInputError):
            generate_password("  ", "123456789012")

    def test_rejects_short_lrn(self):
        with pytest.raises(InvalidInputError):
            generate_password("Cruz", "123")


def test_generation_is_deterministic():
    first = generate_credentials("Cruz", "123456789012")
    second = generate_credentials("Cruz", "123456789012")

    assert first == second
    assert first.tracking_code == "SV8BSHS-789012"
    assert first.password == "SV8B-Cruz9012"
