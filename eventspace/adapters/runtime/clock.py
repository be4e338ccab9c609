"""System clock adapter.

Implements ClockPort with the local calendar date of the host.
"""

from datetime import date

from eventspace.core.ports import ClockPort


class SystemClock(ClockPort):
    """Reads today's date from the local system clock."""

    def today(self) -> date:
        return date.today()
