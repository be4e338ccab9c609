"""Tests for adapter implementations.

External services are replaced by mock transports and clients.
"""
