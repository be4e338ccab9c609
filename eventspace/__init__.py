"""Single-user event space booking tracker."""

__version__ = "0.1.0"
