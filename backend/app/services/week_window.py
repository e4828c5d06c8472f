"""Week Window.

Monday-through-Sunday week boundaries for an arbitrary reference date.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from app.core.exceptions import ValidationError

DAYS_PER_WEEK = 7

# Sunday of the last week that ends on or before date.max (9999-12-26).
LAST_SUPPORTED_DAY = date.max - timedelta(days=date.max.weekday() + 1)

# Reference dates whose previous and next weeks are representable too.
FIRST_NAVIGABLE_DAY = date.min + timedelta(days=DAYS_PER_WEEK)
LAST_NAVIGABLE_DAY = LAST_SUPPORTED_DAY - timedelta(days=DAYS_PER_WEEK)


@dataclass(frozen=True)
class WeekWindow:
    start_date: date  # Monday
    end_date: date  # Sunday

    def days(self) -> list[date]:
        """Return the 7 dates of the window, Monday first."""
        return [self.start_date + timedelta(days=i) for i in range(DAYS_PER_WEEK)]

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


def compute_week_window(reference_date: date) -> WeekWindow:
    """Return the week containing *reference_date*.

    Sunday belongs to the week that started the Monday before it.

    Raises:
        ValidationError: If the week would end after ``date.max``.
    """
    if reference_date > LAST_SUPPORTED_DAY:
        raise ValidationError(
            f"Week of {reference_date.isoformat()} ends after the last supported date"
        )
    start = reference_date - timedelta(days=reference_date.weekday())
    return WeekWindow(start_date=start, end_date=start + timedelta(days=DAYS_PER_WEEK - 1))


def previous_week(window: WeekWindow) -> WeekWindow:
    if window.start_date < FIRST_NAVIGABLE_DAY:
        raise ValidationError("No week precedes the first supported week")
    return compute_week_window(window.start_date - timedelta(days=DAYS_PER_WEEK))


def next_week(window: WeekWindow) -> WeekWindow:
    return compute_week_window(window.start_date + timedelta(days=DAYS_PER_WEEK))


def current_week(today: date | None = None) -> WeekWindow:
    return compute_week_window(today or date.today())
