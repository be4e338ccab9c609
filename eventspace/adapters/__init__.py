"""External adapters for the event space booking tracker.

This package contains all external dependencies (system clock, Gemini,
OpenAI, terminal I/O) and provides implementations of the core port
interfaces.

Adapter Organization:

- runtime/: Clock and identifier generation backed by the standard library
- description/: Adapters for AI-generated venue descriptions (Gemini, OpenAI)
- cli/: Interactive command handling and text rendering
"""
