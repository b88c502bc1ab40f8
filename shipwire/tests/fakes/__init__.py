"""Fake implementations of core ports for testing.

These in-memory implementations allow the core to be tested without
network access or country data:

- FakeTransport: Canned replies and captured requests
- FakeCountryLookup: Small fixed country table
"""

from .countries import FakeCountryLookup
from .transport import FakeTransport

__all__ = [
    "FakeCountryLookup",
    "FakeTransport",
]
