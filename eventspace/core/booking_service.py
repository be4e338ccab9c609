"""Booking service: implements BookingPort for user-initiated operations.

This is the core service the UI layer talks to. It coordinates the venue
store, the calendar engine, and the description generator, and is the
only place bookings are created.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime

from .calendar import CalendarEngine
from .models import Booking, MonthGrid, MonthView, Venue, VenueDraft, normalize_date
from .ports import BookingPort, DescriptionPort, IdGeneratorPort
from .venue_store import VenueStore

logger = logging.getLogger(__name__)


class BookingService(BookingPort):
    """Core implementation of BookingPort.

    Rejected operations are logged and return None/False; they never
    raise and never leave a venue partially modified.
    """

    def __init__(
        self,
        store: VenueStore,
        calendar: CalendarEngine,
        id_generator: IdGeneratorPort,
        description_generator: DescriptionPort,
    ):
        """Initialize the booking service.

        Args:
            store: VenueStore holding venues and the selection.
            calendar: CalendarEngine for the view month and date validation.
            id_generator: IdGeneratorPort used for booking ids.
            description_generator: DescriptionPort for form suggestions.
        """
        self.store = store
        self.calendar = calendar
        self.id_generator = id_generator
        self.description_generator = description_generator

    def list_venues(self, filter_text: str | None = None) -> Sequence[Venue]:
        venues = self.store.list(filter_text)

        logger.debug(
            "Listed venues" + (f" matching {filter_text!r}" if filter_text else ""),
            extra={"count": len(venues)},
        )

        return venues

    def get_venue(self, venue_id: str) -> Venue | None:
        return self.store.get(venue_id)

    def selected_venue(self) -> Venue | None:
        return self.store.selected

    def select_venue(self, venue_id: str) -> Venue | None:
        return self.store.select(venue_id)

    def create_venue(self, draft: VenueDraft) -> Venue:
        return self.store.create(draft)

    def update_venue(self, venue_id: str, draft: VenueDraft) -> Venue | None:
        return self.store.update(venue_id, draft)

    def delete_venue(self, venue_id: str) -> bool:
        return self.store.delete(venue_id)

    def add_booking(self, venue_id: str, day: date | datetime) -> Booking | None:
        """Book a whole day for a venue.

        The date is normalized and validated against today and the venue's
        existing bookings before anything is mutated.

        Args:
            venue_id: Id of the venue to book.
            day: Date to book. Any time-of-day component is ignored.

        Returns:
            The new Booking, or None if the venue is unknown or the date
            is in the past or already booked.
        """
        venue = self.store.get(venue_id)
        if venue is None:
            logger.warning(
                f"Cannot book unknown venue {venue_id}",
                extra={"venue_id": venue_id},
            )
            return None

        day = normalize_date(day)
        if not self.calendar.can_book(day, venue.bookings):
            return None

        booking = Booking(id=self.id_generator.new_id(), date=day)
        self.store.append_booking(venue_id, booking)

        logger.info(
            f"Booked venue {venue_id} for {day.isoformat()}",
            extra={
                "venue_id": venue_id,
                "booking_id": booking.id,
                "date": day.isoformat(),
            },
        )

        return booking

    def month_grid(self, venue_id: str | None = None) -> MonthGrid:
        venue = self.store.get(venue_id) if venue_id else self.store.selected
        bookings = venue.bookings if venue is not None else ()
        return self.calendar.grid(bookings)

    def view_month(self) -> MonthView:
        return self.calendar.view_month

    def next_month(self) -> MonthView:
        return self.calendar.next_month()

    def previous_month(self) -> MonthView:
        return self.calendar.previous_month()

    async def suggest_description(self, keywords: str) -> str:
        return await self.description_generator.generate_description(keywords)
