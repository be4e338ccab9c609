"""Plain-text rendering of venues and month grids for the terminal."""

from eventspace.core.models import DayCell, DayStatus, MonthGrid, Venue

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
CELL_WIDTH = 4
LEGEND = "[dd] booked   <dd> today   (dd) past"


def format_venue_card(venue: Venue, is_selected: bool = False) -> str:
    """One-line summary of a venue for list views."""
    marker = "*" if is_selected else " "
    return (
        f"{marker} {venue.name} | {venue.location} | "
        f"{venue.capacity} Guests | ${venue.price_per_day:g} / day | id={venue.id}"
    )


def format_venue_details(venue: Venue) -> str:
    """Multi-section detail view of a venue."""
    lines = [
        "=" * 60,
        venue.name,
        "=" * 60,
        f"Location: {venue.location}",
        f"Capacity: {venue.capacity} Guests",
        f"Price: ${venue.price_per_day:g} / day",
        f"Image: {venue.image_url}",
        "",
        "-" * 60,
        "ABOUT THIS SPACE",
        "-" * 60,
        venue.description or "(no description)",
        "",
        "Amenities: " + (", ".join(venue.amenities) if venue.amenities else "(none)"),
    ]

    if venue.bookings:
        lines.append("Bookings: " + ", ".join(b.date.isoformat() for b in venue.bookings))
    else:
        lines.append("Bookings: (none)")

    return "\n".join(lines)


def format_day_cell(cell: DayCell | None) -> str:
    """Render one grid cell at a fixed width."""
    if cell is None:
        return " " * CELL_WIDTH
    day = cell.date.day
    if cell.status is DayStatus.BOOKED:
        return f"[{day:2d}]"
    if cell.is_today:
        return f"<{day:2d}>"
    if cell.status is DayStatus.PAST:
        return f"({day:2d})"
    return f" {day:2d} "


def format_month_grid(grid: MonthGrid) -> str:
    """Render a month as a Sunday-first 7-column calendar with a legend."""
    width = CELL_WIDTH * 7
    lines = [
        grid.month.label.center(width).rstrip(),
        "".join(f"{name:^{CELL_WIDTH}}" for name in WEEKDAY_NAMES).rstrip(),
    ]
    for week in grid.weeks():
        lines.append("".join(format_day_cell(cell) for cell in week).rstrip())
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines)
