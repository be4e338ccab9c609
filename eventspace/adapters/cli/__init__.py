"""Command-line interface adapters.

Provides CLI commands for working with venues and bookings:
- list/show/select: Browse venues and their details
- create/update/delete: Manage venues through the venue form
- calendar/next/prev/book: Navigate the month view and book days
- describe: Suggest a description from keywords
"""
