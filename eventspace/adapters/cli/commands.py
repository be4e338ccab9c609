"""CLI command implementations for the booking tracker.

This adapter maps CLI commands (list, show, create, book, etc.) to
BookingPort operations. It handles CLI-specific formatting and error
reporting: every command returns a result dictionary with a "status" of
"success", "rejected" or "error".
"""

import logging
from datetime import date
from typing import Any

from eventspace.core.models import Booking, MonthGrid, Venue
from eventspace.core.ports import BookingPort, DescriptionPort, is_description_error
from eventspace.core.venue_form import (
    DEFAULT_CAPACITY,
    DEFAULT_PRICE_PER_DAY,
    VenueForm,
)

from .render import format_month_grid, format_venue_card, format_venue_details

logger = logging.getLogger(__name__)

FORM_FIELDS = (
    "name",
    "location",
    "capacity",
    "price_per_day",
    "amenities",
    "description",
    "image_url",
)


def venue_to_dict(venue: Venue) -> dict[str, Any]:
    return {
        "id": venue.id,
        "name": venue.name,
        "location": venue.location,
        "capacity": venue.capacity,
        "price_per_day": venue.price_per_day,
        "amenities": list(venue.amenities),
        "description": venue.description,
        "image_url": venue.image_url,
        "bookings": [booking_to_dict(b) for b in venue.bookings],
    }


def booking_to_dict(booking: Booking) -> dict[str, Any]:
    return {"id": booking.id, "date": booking.date.isoformat()}


def grid_to_dict(grid: MonthGrid) -> dict[str, Any]:
    return {
        "year": grid.month.year,
        "month": grid.month.month,
        "label": grid.month.label,
        "leading_blanks": grid.leading_blanks,
        "days": [
            {
                "date": cell.date.isoformat(),
                "status": cell.status.value,
                "is_today": cell.is_today,
                "is_selectable": cell.is_selectable,
            }
            for cell in grid.days
        ],
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to BookingPort.

    Venue creation and editing go through a VenueForm so that the CLI
    applies the same defaults and validation as any other UI.
    """

    def __init__(
        self,
        booking: BookingPort,
        description_generator: DescriptionPort,
        default_capacity: int = DEFAULT_CAPACITY,
        default_price_per_day: float = DEFAULT_PRICE_PER_DAY,
    ):
        """Initialize the CLI command handler.

        Args:
            booking: BookingPort implementation to execute commands.
            description_generator: DescriptionPort used by venue forms.
            default_capacity: Capacity pre-filled on new venue forms.
            default_price_per_day: Price pre-filled on new venue forms.
        """
        self.booking = booking
        self.description_generator = description_generator
        self.default_capacity = default_capacity
        self.default_price_per_day = default_price_per_day

    def _resolve_venue(self, venue_id: str | None) -> Venue | None:
        if venue_id:
            return self.booking.get_venue(venue_id)
        return self.booking.selected_venue()

    @staticmethod
    def _missing_venue(operation: str, venue_id: str | None) -> dict[str, Any]:
        message = f"Venue {venue_id} not found" if venue_id else "No venue selected"
        return {"status": "error", "operation": operation, "message": message}

    def list_venues(
        self, filter_text: str | None = None, output_format: str = "json"
    ) -> dict[str, Any]:
        """List venues, optionally filtered by name or location."""
        if filter_text is not None and not isinstance(filter_text, str):
            return {
                "status": "error",
                "operation": "list",
                "message": f"filter must be a string, got {type(filter_text).__name__}",
            }

        venues = self.booking.list_venues(filter_text)
        selected = self.booking.selected_venue()
        selected_id = selected.id if selected else None

        if output_format == "json":
            data: Any = [venue_to_dict(v) for v in venues]
        elif output_format == "text":
            data = "\n".join(
                format_venue_card(v, v.id == selected_id) for v in venues
            ) or "No spaces found."
        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": "list",
            "count": len(venues),
            "selected_id": selected_id,
            "data": data,
        }

    def show_venue(
        self, venue_id: str | None = None, output_format: str = "json"
    ) -> dict[str, Any]:
        """Show details for a venue (default: the selected one)."""
        venue = self._resolve_venue(venue_id)
        if venue is None:
            return self._missing_venue("show", venue_id)

        if output_format == "json":
            data: Any = venue_to_dict(venue)
        elif output_format == "text":
            data = format_venue_details(venue)
        else:
            return {
                "status": "error",
                "operation": "show",
                "message": f"Unsupported format: {output_format}",
            }

        return {"status": "success", "operation": "show", "data": data}

    def select_venue(self, venue_id: str) -> dict[str, Any]:
        venue = self.booking.select_venue(venue_id)
        if venue is None:
            return self._missing_venue("select", venue_id)
        return {
            "status": "success",
            "operation": "select",
            "venue_id": venue.id,
            "message": f"Selected {venue.name}",
        }

    async def _fill_form(self, form: VenueForm, fields: dict[str, Any]) -> None:
        for name in FORM_FIELDS:
            if name not in fields:
                continue
            value = fields[name]
            if name == "amenities" and isinstance(value, list):
                value = ", ".join(str(item) for item in value)
            setattr(form, name, value)

        keywords = fields.get("keywords")
        if keywords and "description" not in fields:
            if not isinstance(keywords, str):
                raise TypeError(f"keywords must be a string, got {type(keywords).__name__}")
            applied = await form.request_description(keywords)
            # The form is submitted right away, so a failure message must not be saved.
            if applied and is_description_error(form.description):
                raise ValueError(f"Description suggestion failed: {form.description}")

    async def create_venue(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Create a venue from form fields.

        If "keywords" is given without a "description", a description is
        generated before submitting.
        """
        form = VenueForm(
            self.description_generator,
            capacity=self.default_capacity,
            price_per_day=self.default_price_per_day,
        )
        try:
            await self._fill_form(form, fields)
            venue = form.submit(self.booking)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to create venue: {e}")
            return {"status": "error", "operation": "create", "message": str(e)}
        finally:
            form.close()

        assert venue is not None
        return {
            "status": "success",
            "operation": "create",
            "venue_id": venue.id,
            "message": f"Venue {venue.name} created",
            "data": venue_to_dict(venue),
        }

    async def update_venue(self, venue_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Edit an existing venue; unspecified fields keep their values."""
        venue = self.booking.get_venue(venue_id)
        if venue is None:
            return self._missing_venue("update", venue_id)

        form = VenueForm.for_venue(self.description_generator, venue)
        try:
            await self._fill_form(form, fields)
            updated = form.submit(self.booking)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to update venue: {e}")
            return {
                "status": "error",
                "operation": "update",
                "venue_id": venue_id,
                "message": str(e),
            }
        finally:
            form.close()

        if updated is None:
            return self._missing_venue("update", venue_id)
        return {
            "status": "success",
            "operation": "update",
            "venue_id": venue_id,
            "message": f"Venue {updated.name} updated",
            "data": venue_to_dict(updated),
        }

    def delete_venue(self, venue_id: str | None = None) -> dict[str, Any]:
        """Delete a venue (default: the selected one)."""
        venue = self._resolve_venue(venue_id)
        if venue is None or not self.booking.delete_venue(venue.id):
            return self._missing_venue("delete", venue_id)

        selected = self.booking.selected_venue()
        return {
            "status": "success",
            "operation": "delete",
            "venue_id": venue.id,
            "selected_id": selected.id if selected else None,
            "message": f"Venue {venue.name} deleted",
        }

    def show_calendar(
        self, venue_id: str | None = None, output_format: str = "text"
    ) -> dict[str, Any]:
        """Show the view month for a venue (default: the selected one)."""
        if venue_id and self.booking.get_venue(venue_id) is None:
            return self._missing_venue("calendar", venue_id)

        grid = self.booking.month_grid(venue_id)
        if output_format == "json":
            data: Any = grid_to_dict(grid)
        elif output_format == "text":
            data = format_month_grid(grid)
        else:
            return {
                "status": "error",
                "operation": "calendar",
                "message": f"Unsupported format: {output_format}",
            }
        return {"status": "success", "operation": "calendar", "data": data}

    def next_month(self) -> dict[str, Any]:
        month = self.booking.next_month()
        return {"status": "success", "operation": "next", "month": month.label}

    def previous_month(self) -> dict[str, Any]:
        month = self.booking.previous_month()
        return {"status": "success", "operation": "prev", "month": month.label}

    def book(self, day: str, venue_id: str | None = None) -> dict[str, Any]:
        """Book a date given as YYYY-MM-DD (default venue: the selected one)."""
        venue = self._resolve_venue(venue_id)
        if venue is None:
            return self._missing_venue("book", venue_id)

        try:
            requested = date.fromisoformat(day)
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid booking date {day!r}: {e}")
            return {
                "status": "error",
                "operation": "book",
                "message": f"Invalid date {day!r}, expected YYYY-MM-DD",
            }

        booking = self.booking.add_booking(venue.id, requested)
        if booking is None:
            return {
                "status": "rejected",
                "operation": "book",
                "venue_id": venue.id,
                "date": requested.isoformat(),
                "message": f"{requested.isoformat()} is in the past or already booked",
            }

        return {
            "status": "success",
            "operation": "book",
            "venue_id": venue.id,
            "booking": booking_to_dict(booking),
            "message": f"Booked {venue.name} for {booking.date.isoformat()}",
        }

    async def describe(self, keywords: str) -> dict[str, Any]:
        """Suggest a venue description from keywords."""
        if not isinstance(keywords, str):
            return {
                "status": "error",
                "operation": "describe",
                "message": f"keywords must be a string, got {type(keywords).__name__}",
            }

        description = await self.booking.suggest_description(keywords)
        if is_description_error(description):
            return {"status": "error", "operation": "describe", "message": description}
        return {"status": "success", "operation": "describe", "data": description}
