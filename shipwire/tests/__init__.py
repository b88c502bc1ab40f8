"""Test suite for the Shipwire client.

Organized into three categories:

1. core/: Unit tests for request building, reply parsing and dispatch
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - httpx transport against a mock transport
   - pycountry-backed country lookup

3. fakes/: Port implementations for testing
   - In-memory implementations of TransportPort and CountryLookupPort
"""
