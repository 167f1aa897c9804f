"""Tests for the --eyes / --water interval parser."""

import pytest

from duration import DurationParseError, MAX_MAGNITUDE, parse_duration


class TestValidIntervals:
    def test_minutes(self):
        assert parse_duration("20m", "eyes") == 1200
        assert parse_duration("45m", "water") == 45 * 60

    def test_hours(self):
        assert parse_duration("1h", "water") == 3600
        assert parse_duration("2h", "eyes") == 7200

    def test_zero_is_allowed(self):
        assert parse_duration("0m", "eyes") == 0
        assert parse_duration("0h", "water") == 0

    def test_leading_zeros(self):
        assert parse_duration("007m", "eyes") == 7 * 60

    def test_largest_magnitude(self):
        assert parse_duration(f"{MAX_MAGNITUDE}m", "eyes") == MAX_MAGNITUDE * 60
        assert parse_duration(f"{MAX_MAGNITUDE}h", "water") == MAX_MAGNITUDE * 3600


class TestInvalidUnit:
    @pytest.mark.parametrize("raw", ["20x", "20", "90s", "1h30", "20M", "", "m20"])
    def test_rejects_unknown_suffix(self, raw):
        with pytest.raises(DurationParseError) as exc_info:
            parse_duration(raw, "eyes")
        assert exc_info.value.reason == "invalid unit"

    def test_message_names_field_and_value(self):
        with pytest.raises(DurationParseError) as exc_info:
            parse_duration("20x", "eyes")
        err = exc_info.value
        assert err.field_name == "eyes"
        assert err.raw == "20x"
        assert str(err) == (
            "Invalid value for --eyes='20x': "
            "only 'm' (minutes) or 'h' (hours) are allowed"
        )


class TestInvalidNumber:
    @pytest.mark.parametrize(
        "raw",
        ["abcm", "m", "h", "1.5h", "-5m", "+5m", " 5m", "1_000m", "1h30m", "٣m"],
    )
    def test_rejects_bad_prefix(self, raw):
        with pytest.raises(DurationParseError) as exc_info:
            parse_duration(raw, "water")
        assert exc_info.value.reason == "invalid number"

    def test_overflow(self):
        with pytest.raises(DurationParseError) as exc_info:
            parse_duration(f"{MAX_MAGNITUDE + 1}m", "eyes")
        assert exc_info.value.reason == "invalid number"

    def test_message_names_field_and_value(self):
        with pytest.raises(DurationParseError) as exc_info:
            parse_duration("abcm", "water")
        err = exc_info.value
        assert "water" in str(err)
        assert "abcm" in str(err)
        assert str(err) == "Could not parse --water='abcm': invalid number"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_duration("abch", "water")
