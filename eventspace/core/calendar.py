"""Calendar engine: month grids, day classification, and booking validation.

The engine's only state is the view month. Grid derivation and day
classification are pure functions of the month, the clock's today, and a
venue's booked dates.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from .models import Booking, DayCell, MonthGrid, MonthView, normalize_date
from .ports import ClockPort

logger = logging.getLogger(__name__)


def booked_date_set(bookings: Iterable[Booking]) -> frozenset[date]:
    """Normalized dates of a venue's bookings."""
    return frozenset(normalize_date(booking.date) for booking in bookings)


def classify_day(day: date, today: date, booked: frozenset[date]) -> DayCell:
    """Classify one date relative to today and a booked-date set."""
    day = normalize_date(day)
    return DayCell(
        date=day,
        is_booked=day in booked,
        is_past=day < today,
        is_today=day == today,
    )


def build_month_grid(
    month: MonthView, today: date, booked: frozenset[date] = frozenset()
) -> MonthGrid:
    """Lay out a month as leading blanks followed by one cell per day."""
    first = month.first_day
    days = tuple(
        classify_day(first + timedelta(days=offset), today, booked)
        for offset in range(month.days_in_month)
    )
    return MonthGrid(month=month, leading_blanks=month.first_weekday, days=days)


class CalendarEngine:
    """Navigable month view and the validation gate for new bookings."""

    def __init__(self, clock: ClockPort, view_month: MonthView | None = None):
        """Initialize the calendar engine.

        Args:
            clock: ClockPort used to determine today.
            view_month: Initial month to display. Defaults to the month
                containing the clock's today.
        """
        self.clock = clock
        self.view_month = view_month or MonthView.containing(clock.today())

    def today(self) -> date:
        return normalize_date(self.clock.today())

    def next_month(self) -> MonthView:
        self.view_month = self.view_month.next()
        return self.view_month

    def previous_month(self) -> MonthView:
        self.view_month = self.view_month.previous()
        return self.view_month

    def reset_to_today(self) -> MonthView:
        self.view_month = MonthView.containing(self.today())
        return self.view_month

    def grid(
        self, bookings: Iterable[Booking] = (), month: MonthView | None = None
    ) -> MonthGrid:
        """Classified grid for the given month (default: the view month)."""
        return build_month_grid(
            month or self.view_month, self.today(), booked_date_set(bookings)
        )

    def classify(self, day: date | datetime, bookings: Iterable[Booking]) -> DayCell:
        return classify_day(normalize_date(day), self.today(), booked_date_set(bookings))

    def can_book(self, day: date | datetime, bookings: Iterable[Booking]) -> bool:
        """Return True iff the day is neither in the past nor already booked."""
        cell = self.classify(day, bookings)
        if cell.is_past:
            logger.info(
                f"Rejected booking for past date {cell.date.isoformat()}",
                extra={"date": cell.date.isoformat(), "today": self.today().isoformat()},
            )
        elif cell.is_booked:
            logger.info(
                f"Rejected booking for already booked date {cell.date.isoformat()}",
                extra={"date": cell.date.isoformat()},
            )
        return cell.is_selectable
