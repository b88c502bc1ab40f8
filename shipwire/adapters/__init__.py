"""External adapters for the Shipwire client.

This package contains all external dependencies (httpx, pycountry,
command line) and provides implementations of the core port interfaces.

Adapter Organization:

- transport/: HTTP delivery of request documents (httpx)
- countries/: Country code and name resolution (pycountry)
- cli/: Command-line interface for the three operations
"""
