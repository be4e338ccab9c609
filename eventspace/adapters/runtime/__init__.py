"""Runtime adapters for the clock and identifier ports."""

from .clock import SystemClock
from .ids import UUIDGenerator

__all__ = ["SystemClock", "UUIDGenerator"]
