"""
Tests for day-part partitioning
"""
from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.business import (
    CoverageGapError, CoverageOverlapError, DayPartSet, DuplicateEntityError,
    InvalidDayPartError, validate_day_parts
)
from src.models.catalog import DayPart


def dp(name, start, end):
    return DayPart(name=name, start=start, end=end)


class TestDayPartContains:
    """Тесты попадания времени в интервал"""

    def test_wraparound_interval(self):
        """[17:00, 02:00) содержит 23:59, 00:00, 01:59 и не содержит 02:00, 16:59"""
        dinner = dp("Dinner", time(17), time(2))

        assert dinner.contains(time(23, 59))
        assert dinner.contains(time(0, 0))
        assert dinner.contains(time(1, 59))
        assert not dinner.contains(time(2, 0))
        assert not dinner.contains(time(16, 59))

    def test_start_inclusive_end_exclusive(self):
        lunch = dp("Lunch", time(11), time(17))

        assert lunch.contains(time(11))
        assert not lunch.contains(time(17))

    def test_full_cycle(self):
        all_day = dp("All Day", time(0), time(0))

        assert all_day.is_full_cycle
        assert all_day.contains(time(0))
        assert all_day.contains(time(23, 59, 59, 999999))


class TestValidateDayParts:
    """Тесты проверки покрытия суток"""

    def test_empty_set_is_valid(self):
        validate_day_parts([])

    def test_full_partition_is_valid(self, fidi_day_parts):
        validate_day_parts(fidi_day_parts)

    def test_single_full_cycle_is_valid(self):
        validate_day_parts([dp("All Day", time(0), time(0))])

    def test_partition_touching_midnight(self):
        validate_day_parts([
            dp("Night", time(0), time(12)),
            dp("Day", time(12), time(0)),
        ])

    def test_gap_in_the_middle(self):
        with pytest.raises(CoverageGapError) as exc_info:
            validate_day_parts([
                dp("Breakfast", time(0), time(11)),
                dp("Dinner", time(12), time(0)),
            ])

        assert exc_info.value.start == time(11)
        assert exc_info.value.end == time(12)

    def test_gap_across_midnight(self):
        """Пробел [17:00, 02:00) сообщается целиком"""
        with pytest.raises(CoverageGapError) as exc_info:
            validate_day_parts([
                dp("Breakfast", time(2), time(11)),
                dp("Lunch", time(11), time(17)),
            ])

        assert exc_info.value.start == time(17)
        assert exc_info.value.end == time(2)

    def test_gap_at_end_of_day(self):
        with pytest.raises(CoverageGapError) as exc_info:
            validate_day_parts([dp("Day", time(0), time(22))])

        assert exc_info.value.start == time(22)
        assert exc_info.value.end == time(0)

    def test_overlap_reports_both_parts(self):
        with pytest.raises(CoverageOverlapError) as exc_info:
            validate_day_parts([
                dp("Breakfast", time(2), time(11)),
                dp("Lunch", time(10), time(17)),
                dp("Dinner", time(17), time(2)),
            ])

        error = exc_info.value
        assert (error.start, error.end) == (time(10), time(11))
        assert {error.first, error.second} == {"Breakfast", "Lunch"}

    def test_overlap_with_wraparound_part(self):
        with pytest.raises(CoverageOverlapError) as exc_info:
            validate_day_parts([
                dp("Breakfast", time(1), time(11)),
                dp("Lunch", time(11), time(17)),
                dp("Dinner", time(17), time(2)),
            ])

        assert (exc_info.value.start, exc_info.value.end) == (time(1), time(2))
        assert {exc_info.value.first, exc_info.value.second} == {"Breakfast", "Dinner"}

    def test_overlap_reported_before_later_gap(self):
        """Первая проблема слева направо - пересечение [04:00, 05:00)"""
        with pytest.raises(CoverageOverlapError) as exc_info:
            validate_day_parts([
                dp("Night", time(0), time(5)),
                dp("Morning", time(4), time(10)),
                dp("Evening", time(12), time(0)),
            ])

        assert (exc_info.value.start, exc_info.value.end) == (time(4), time(5))

    def test_gap_reported_before_later_overlap(self):
        """Первая проблема слева направо - пробел [05:00, 06:00)"""
        with pytest.raises(CoverageGapError) as exc_info:
            validate_day_parts([
                dp("Night", time(0), time(5)),
                dp("Morning", time(6), time(12)),
                dp("Evening", time(11), time(0)),
            ])

        assert exc_info.value.start == time(5)
        assert exc_info.value.end == time(6)

    def test_full_cycle_overlaps_any_other_part(self):
        with pytest.raises(CoverageOverlapError):
            validate_day_parts([
                dp("All Day", time(0), time(0)),
                dp("Lunch", time(11), time(17)),
            ])

    def test_degenerate_interval_rejected(self):
        with pytest.raises(InvalidDayPartError):
            validate_day_parts([dp("Broken", time(6), time(6))])

    def test_duplicate_names_rejected(self):
        with pytest.raises(DuplicateEntityError):
            validate_day_parts([
                dp("Shift", time(0), time(12)),
                dp("Shift", time(12), time(0)),
            ])


class TestDayPartSet:
    """Тесты определения активной части дня"""

    def test_construction_validates(self):
        with pytest.raises(CoverageGapError):
            DayPartSet([dp("Lunch", time(11), time(17))])

    def test_no_day_parts_resolves_to_none(self):
        assert DayPartSet([]).active_day_part(datetime(2025, 1, 1, 12, 0)) is None

    @pytest.mark.parametrize("moment, expected", [
        (time(2, 0), "Breakfast"),
        (time(10, 59, 59), "Breakfast"),
        (time(11, 0), "Lunch"),
        (time(16, 59), "Lunch"),
        (time(17, 0), "Dinner"),
        (time(23, 59), "Dinner"),
        (time(0, 0), "Dinner"),
        (time(1, 59, 59, 999999), "Dinner"),
    ])
    def test_active_day_part(self, fidi_day_parts, moment, expected):
        day_parts = DayPartSet(fidi_day_parts)

        assert day_parts.active_day_part(moment).name == expected

    def test_every_minute_has_exactly_one_part(self, fidi_day_parts):
        day_parts = DayPartSet(fidi_day_parts)
        start = datetime(2025, 3, 1)

        for minute in range(24 * 60):
            moment = (start + timedelta(minutes=minute)).time()
            active = day_parts.active_day_part(moment)
            matches = [p for p in fidi_day_parts if p.contains(moment)]
            assert matches == [active]

    def test_date_is_ignored(self, fidi_day_parts):
        day_parts = DayPartSet(fidi_day_parts)

        assert day_parts.active_day_part(datetime(2025, 1, 1, 18, 0)).name == "Dinner"
        assert day_parts.active_day_part(datetime(2030, 7, 15, 18, 0)).name == "Dinner"

    def test_aware_instant_converted_to_location_timezone(self, fidi_day_parts):
        day_parts = DayPartSet(fidi_day_parts, tz=ZoneInfo("America/New_York"))
        # 16:00 UTC = 12:00 EDT
        instant = datetime(2025, 6, 2, 16, 0, tzinfo=timezone.utc)

        assert day_parts.active_day_part(instant).name == "Lunch"

    def test_naive_instant_is_local_time(self, fidi_day_parts):
        day_parts = DayPartSet(fidi_day_parts, tz=ZoneInfo("America/New_York"))

        assert day_parts.active_day_part(datetime(2025, 6, 2, 16, 0)).name == "Lunch"

    def test_aware_time_of_day_rejected(self, fidi_day_parts):
        """Время суток с tzinfo нельзя перевести в tz локации без даты"""
        day_parts = DayPartSet(fidi_day_parts, tz=ZoneInfo("America/New_York"))

        with pytest.raises(ValueError):
            day_parts.active_day_part(time(14, 0, tzinfo=timezone.utc))

    def test_lookup_by_name(self, fidi_day_parts):
        day_parts = DayPartSet(fidi_day_parts)

        assert len(day_parts) == 3
        assert "Dinner" in day_parts
        assert day_parts.get("Dinner").start == time(17)
        assert day_parts.get("Brunch") is None
