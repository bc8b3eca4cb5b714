"""Tests for phase 2 field resolution.

Validates resolve_fields() under STRICT, SMART and LENIENT styles: range
checks, SMART clamping and end-of-day, LENIENT carries, hour sources,
and the weekday cross-check.
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from timelexengine.constants import MAX_YEAR
from timelexengine.diagnostics import DiagnosticCode, ResolutionError
from timelexengine.enums import FieldKind, ResolverStyle
from timelexengine.runtime.resolver import resolve_fields
from timelexengine.runtime.value_types import DateTimeValue

Y, M, D = FieldKind.YEAR, FieldKind.MONTH, FieldKind.DAY_OF_MONTH
H, MIN, SEC = FieldKind.HOUR_OF_DAY, FieldKind.MINUTE_OF_HOUR, FieldKind.SECOND_OF_MINUTE
NANO = FieldKind.NANO_OF_SECOND
CLOCK, AMPM, DOW = FieldKind.CLOCK_HOUR_OF_AMPM, FieldKind.AMPM_OF_DAY, FieldKind.DAY_OF_WEEK

SEPT_31 = {M: 9, D: 31, Y: 2022, H: 12, MIN: 0}


def _code(error: ResolutionError) -> DiagnosticCode:
    assert error.diagnostic is not None
    return error.diagnostic.code


class TestStrict:
    """Test STRICT resolution."""

    def test_rejects_day_beyond_month(self) -> None:
        """September 31 is invalid."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields(SEPT_31, ResolverStyle.STRICT)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_VALUE_INVALID
        assert exc_info.value.field_kind == "day-of-month"
        assert "Invalid field value" in str(exc_info.value)

    def test_leap_day(self) -> None:
        """February 29 is valid only in leap years."""
        value = resolve_fields({Y: 2024, M: 2, D: 29}, ResolverStyle.STRICT)
        assert (value.year, value.month, value.day) == (2024, 2, 29)
        with pytest.raises(ResolutionError):
            resolve_fields({Y: 2023, M: 2, D: 29}, ResolverStyle.STRICT)
        with pytest.raises(ResolutionError):
            resolve_fields({Y: 1900, M: 2, D: 29}, ResolverStyle.STRICT)

    def test_february_29_without_year(self) -> None:
        """Without a year February allows 29 days."""
        value = resolve_fields({M: 2, D: 29}, ResolverStyle.STRICT)
        assert (value.month, value.day) == (2, 29)

    @pytest.mark.parametrize(
        "raw",
        [
            {M: 13},
            {M: 0},
            {D: 32},
            {H: 24},
            {MIN: 60},
            {SEC: 60},
        ],
    )
    def test_nominal_ranges(self, raw: dict[FieldKind, int]) -> None:
        """Out-of-range single fields are rejected."""
        with pytest.raises(ResolutionError):
            resolve_fields(raw, ResolverStyle.STRICT)

    def test_valid_value(self) -> None:
        """Valid fields resolve unchanged."""
        value = resolve_fields({Y: 2022, M: 9, D: 30, H: 12, MIN: 0}, ResolverStyle.STRICT)
        assert value == DateTimeValue(2022, 9, 30, 12, 0)


class TestSmart:
    """Test SMART resolution."""

    def test_clamps_day_to_month_length(self) -> None:
        """September 31 becomes September 30."""
        value = resolve_fields(SEPT_31, ResolverStyle.SMART)
        assert value.to_datetime().isoformat() == "2022-09-30T12:00:00"

    def test_clamps_february(self) -> None:
        """February 30 clamps to 28 or 29 depending on the year."""
        assert resolve_fields({Y: 2023, M: 2, D: 30}, ResolverStyle.SMART).day == 28
        assert resolve_fields({Y: 2024, M: 2, D: 31}, ResolverStyle.SMART).day == 29
        assert resolve_fields({M: 2, D: 31}, ResolverStyle.SMART).day == 29

    def test_rejects_nominal_violations(self) -> None:
        """Day 32 and month 13 are still errors."""
        with pytest.raises(ResolutionError):
            resolve_fields({Y: 2022, M: 1, D: 32}, ResolverStyle.SMART)
        with pytest.raises(ResolutionError):
            resolve_fields({Y: 2022, M: 13, D: 1}, ResolverStyle.SMART)
        with pytest.raises(ResolutionError):
            resolve_fields({H: 12, MIN: 60}, ResolverStyle.SMART)

    def test_end_of_day(self) -> None:
        """24:00 is midnight of the following day."""
        value = resolve_fields({Y: 2022, M: 12, D: 31, H: 24, MIN: 0}, ResolverStyle.SMART)
        assert value == DateTimeValue(2023, 1, 1, 0, 0)

    def test_end_of_day_without_date(self) -> None:
        """24:00 with no date is plain midnight."""
        assert resolve_fields({H: 24, MIN: 0}, ResolverStyle.SMART) == DateTimeValue(
            hour=0, minute=0
        )

    def test_end_of_day_past_max_year(self) -> None:
        """Rolling 24:00 past the last supported year is a ResolutionError."""
        raw = {Y: MAX_YEAR, M: 12, D: 31, H: 24, MIN: 0}
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields(raw, ResolverStyle.SMART)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_VALUE_INVALID
        assert exc_info.value.field_kind == "year"

    def test_hour_24_with_minutes_rejected(self) -> None:
        """24:01 is not end of day."""
        with pytest.raises(ResolutionError):
            resolve_fields({H: 24, MIN: 1}, ResolverStyle.SMART)

    def test_end_of_day_partial_date(self) -> None:
        """24:00 with day but no month cannot roll over."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({D: 5, H: 24, MIN: 0}, ResolverStyle.SMART)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_CARRY_UNSUPPORTED

    def test_clamp_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Clamping is recorded at debug level."""
        with caplog.at_level(logging.DEBUG, logger="timelexengine.runtime.resolver"):
            resolve_fields(SEPT_31, ResolverStyle.SMART)
        assert any("Clamped day 31 to 30" in r.getMessage() for r in caplog.records)


class TestLenient:
    """Test LENIENT resolution."""

    def test_day_rolls_into_next_month(self) -> None:
        """September 31 becomes October 1."""
        value = resolve_fields(SEPT_31, ResolverStyle.LENIENT)
        assert value.to_datetime().isoformat() == "2022-10-01T12:00:00"

    def test_month_folds_into_year(self) -> None:
        """Month 13 is January of the next year."""
        value = resolve_fields({Y: 2022, M: 13, D: 1}, ResolverStyle.LENIENT)
        assert (value.year, value.month, value.day) == (2023, 1, 1)

    def test_time_cascade(self) -> None:
        """Excess seconds, minutes and hours carry up into the date."""
        raw = {Y: 2022, M: 12, D: 31, H: 23, MIN: 59, SEC: 60}
        value = resolve_fields(raw, ResolverStyle.LENIENT)
        assert value == DateTimeValue(2023, 1, 1, 0, 0, 0)

    def test_hour_25(self) -> None:
        """Hour 25 is 01:00 the next day."""
        value = resolve_fields({Y: 2022, M: 2, D: 28, H: 25, MIN: 0}, ResolverStyle.LENIENT)
        assert value == DateTimeValue(2022, 3, 1, 1, 0)

    def test_day_zero(self) -> None:
        """Day 0 is the last day of the previous month."""
        value = resolve_fields({Y: 2024, M: 3, D: 0}, ResolverStyle.LENIENT)
        assert (value.year, value.month, value.day) == (2024, 2, 29)

    def test_time_only_within_range(self) -> None:
        """Minute excess carries into a present hour without a date."""
        value = resolve_fields({H: 10, MIN: 75}, ResolverStyle.LENIENT)
        assert value == DateTimeValue(hour=11, minute=15)

    def test_carry_into_absent_hour(self) -> None:
        """Minute excess without an hour field is an error."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({MIN: 75, SEC: 0}, ResolverStyle.LENIENT)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_CARRY_UNSUPPORTED
        assert exc_info.value.field_kind == "minute-of-hour"

    def test_carry_into_absent_date(self) -> None:
        """Hour excess without a date is an error."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({H: 25, MIN: 0}, ResolverStyle.LENIENT)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_CARRY_UNSUPPORTED

    def test_month_carry_without_year(self) -> None:
        """Month excess without a year is an error."""
        with pytest.raises(ResolutionError):
            resolve_fields({M: 13, D: 1}, ResolverStyle.LENIENT)

    def test_day_carry_without_year(self) -> None:
        """Day excess beyond the month without a year is an error."""
        with pytest.raises(ResolutionError):
            resolve_fields({M: 9, D: 31}, ResolverStyle.LENIENT)

    def test_in_range_values_unchanged(self) -> None:
        """LENIENT leaves valid values alone."""
        value = resolve_fields({M: 2, D: 29}, ResolverStyle.LENIENT)
        assert (value.month, value.day) == (2, 29)


class TestHourSources:
    """Test H, h and a combination."""

    @pytest.mark.parametrize(
        ("clock", "ampm", "hour"),
        [(12, 0, 0), (1, 0, 1), (11, 0, 11), (12, 1, 12), (4, 1, 16), (11, 1, 23)],
    )
    def test_clock_hour_with_ampm(self, clock: int, ampm: int, hour: int) -> None:
        """hour = h % 12 + 12 * ampm."""
        for style in ResolverStyle:
            value = resolve_fields({CLOCK: clock, AMPM: ampm, MIN: 0}, style)
            assert value.hour == hour

    def test_clock_hour_without_ampm_strict(self) -> None:
        """STRICT refuses to guess AM or PM."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({CLOCK: 4, MIN: 0}, ResolverStyle.STRICT)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_FIELD_MISSING

    def test_clock_hour_without_ampm_smart(self) -> None:
        """SMART assumes AM."""
        assert resolve_fields({CLOCK: 4, MIN: 0}, ResolverStyle.SMART).hour == 4
        assert resolve_fields({CLOCK: 12, MIN: 0}, ResolverStyle.SMART).hour == 0

    def test_clock_hour_range(self) -> None:
        """Clock hour 13 is invalid outside LENIENT."""
        with pytest.raises(ResolutionError):
            resolve_fields({CLOCK: 13, AMPM: 0}, ResolverStyle.SMART)

    @pytest.mark.parametrize("style", list(ResolverStyle))
    def test_ampm_conflicts_with_hour(self, style: ResolverStyle) -> None:
        """HH 16 with AM is a conflict in every style."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({H: 16, AMPM: 0, MIN: 0}, style)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_FIELD_CONFLICT

    @pytest.mark.parametrize("style", list(ResolverStyle))
    def test_clock_conflicts_with_hour(self, style: ResolverStyle) -> None:
        """HH 16 with h 5 PM is a conflict in every style."""
        with pytest.raises(ResolutionError):
            resolve_fields({H: 16, CLOCK: 5, AMPM: 1}, style)

    def test_agreeing_sources(self) -> None:
        """H and h+a that agree resolve normally."""
        value = resolve_fields({H: 16, CLOCK: 4, AMPM: 1, MIN: 0}, ResolverStyle.STRICT)
        assert value.hour == 16


class TestWeekday:
    """Test the weekday cross-check."""

    @pytest.mark.parametrize("style", list(ResolverStyle))
    def test_matching_weekday(self, style: ResolverStyle) -> None:
        """2022-09-30 was a Friday."""
        value = resolve_fields({Y: 2022, M: 9, D: 30, DOW: 5}, style)
        assert value.day_of_week == 5

    @pytest.mark.parametrize("style", list(ResolverStyle))
    def test_mismatched_weekday(self, style: ResolverStyle) -> None:
        """A Monday label on a Friday is rejected in every style."""
        with pytest.raises(ResolutionError) as exc_info:
            resolve_fields({Y: 2022, M: 9, D: 30, DOW: 1}, style)
        assert _code(exc_info.value) is DiagnosticCode.RESOLUTION_WEEKDAY_MISMATCH

    def test_weekday_checked_after_smart_clamp(self) -> None:
        """The check uses the resolved (clamped) date."""
        value = resolve_fields({Y: 2022, M: 9, D: 31, DOW: 5}, ResolverStyle.SMART)
        assert value.day == 30

    def test_weekday_ignored_without_full_date(self) -> None:
        """Without year, month and day the weekday is not checked."""
        value = resolve_fields({M: 9, D: 30, DOW: 1}, ResolverStyle.STRICT)
        assert value.year is None


class TestAbsentFields:
    """Absent fields stay unset."""

    def test_time_only(self) -> None:
        """Time fields alone give a time-only value."""
        value = resolve_fields({H: 16, MIN: 21}, ResolverStyle.STRICT)
        assert value.has_time
        assert not value.has_date
        assert value.year is None

    def test_empty(self) -> None:
        """No fields give an empty value."""
        assert resolve_fields({}, ResolverStyle.SMART) == DateTimeValue()


class TestResolverProperties:
    """Property-based tests for resolution."""

    @given(
        st.integers(min_value=1, max_value=9999),
        st.integers(min_value=1, max_value=12),
        st.integers(min_value=1, max_value=31),
    )
    def test_styles_agree_on_valid_dates(self, year: int, month: int, day: int) -> None:
        """All styles give the same result when STRICT accepts."""
        raw = {Y: year, M: month, D: day}
        try:
            strict = resolve_fields(raw, ResolverStyle.STRICT)
        except ResolutionError:
            smart = resolve_fields(raw, ResolverStyle.SMART)
            assert smart.day is not None and smart.day < day
            return
        assert resolve_fields(raw, ResolverStyle.SMART) == strict
        assert resolve_fields(raw, ResolverStyle.LENIENT) == strict

    @given(
        st.integers(min_value=0, max_value=99),
        st.integers(min_value=0, max_value=99),
        st.integers(min_value=0, max_value=99),
    )
    def test_lenient_preserves_total_seconds(self, hour: int, minute: int, second: int) -> None:
        """LENIENT carries never change the absolute instant."""
        raw = {Y: 2022, M: 1, D: 1, H: hour, MIN: minute, SEC: second}
        value = resolve_fields(raw, ResolverStyle.LENIENT).to_datetime()
        total = hour * 3600 + minute * 60 + second
        delta = value - value.replace(year=2022, month=1, day=1, hour=0, minute=0, second=0)
        assert delta.total_seconds() == total
