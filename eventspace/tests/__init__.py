"""Test suite for the event space booking tracker.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - HTTP and SDK clients replaced with mock transports/clients
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - Fixed clock, sequential ids, scripted description generator
"""
