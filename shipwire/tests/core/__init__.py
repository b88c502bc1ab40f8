"""Unit tests for core request/response logic.

These tests exercise the core without network access. All external
ports are replaced with in-memory fakes from tests/fakes/.
"""
