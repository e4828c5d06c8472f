"""Unit tests for the date -> members holiday index (no database required)."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from app.services.holiday_index import build_index, date_key, has_holiday


@dataclass
class _Holiday:
    team_member_id: int
    holiday_date: date


class TestDateKey:
    def test_date(self):
        assert date_key(date(2024, 1, 1)) == "2024-01-01"

    def test_datetime_truncated_to_its_own_date(self):
        """Late evening with an offset stays on the same calendar day."""
        value = datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)
        assert date_key(value) == "2024-01-01"


class TestBuildIndex:
    def test_groups_members_by_day(self):
        index = build_index([
            _Holiday(1, date(2024, 1, 1)),
            _Holiday(2, date(2024, 1, 1)),
            _Holiday(2, date(2024, 1, 3)),
        ])
        assert index == {"2024-01-01": {1, 2}, "2024-01-03": {2}}

    def test_duplicates_collapse(self):
        index = build_index([_Holiday(1, date(2024, 1, 1)), _Holiday(1, date(2024, 1, 1))])
        assert index == {"2024-01-01": {1}}

    def test_date_and_datetime_collide(self):
        index = build_index([
            _Holiday(1, date(2024, 1, 1)),
            _Holiday(2, datetime(2024, 1, 1, 0, 0)),
        ])
        assert index == {"2024-01-01": {1, 2}}

    def test_empty(self):
        assert build_index([]) == {}


class TestHasHoliday:
    def test_present(self):
        index = build_index([_Holiday(1, date(2024, 1, 1))])
        assert has_holiday(index, date(2024, 1, 1), 1) is True

    def test_other_member_same_day(self):
        index = build_index([_Holiday(1, date(2024, 1, 1))])
        assert has_holiday(index, date(2024, 1, 1), 2) is False

    def test_missing_day(self):
        index = build_index([_Holiday(1, date(2024, 1, 1))])
        assert has_holiday(index, date(2024, 1, 2), 1) is False

    def test_single_and_duplicate_insertions_agree(self):
        once = build_index([_Holiday(1, date(2024, 1, 1))])
        twice = build_index([_Holiday(1, date(2024, 1, 1))] * 2)
        assert has_holiday(once, date(2024, 1, 1), 1) == has_holiday(twice, date(2024, 1, 1), 1)
