"""Port interfaces for the Shipwire client.

These abstract base classes define the boundaries between the core
request/response logic and its external collaborators. Implementations
live in the adapters/ package.

Driven Ports (core calls out to adapters):
   - TransportPort: POST a form body and return the raw reply text
   - CountryLookupPort: Resolve a country identifier to code and name
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from .models import Country


class TransportPort(ABC):
    """Port for delivering a request body to a provider endpoint.

    Implementations own TLS, timeouts and connection handling. The core
    performs no retry, so implementations should not hide failures.
    """

    @abstractmethod
    def post(self, url: str, body: str, headers: Mapping[str, str]) -> str | bytes:
        """POST ``body`` to ``url`` and return the reply body.

        Args:
            url: Absolute endpoint URL.
            body: Already encoded request body.
            headers: Extra request headers (e.g. Content-Type).

        Returns:
            The raw response body. Return undecoded bytes where possible
            so the reply's XML declaration selects the character encoding.

        Raises:
            Exception: Any transport-level failure, propagated unmodified.
        """

    def close(self) -> None:
        """Release any held resources."""


class CountryLookupPort(ABC):
    """Port for resolving country identifiers."""

    @abstractmethod
    def find(self, identifier: str) -> Country:
        """Resolve a country by alpha-2, alpha-3 code or name.

        Raises:
            InvalidCountryError: If the identifier is not a known country.
        """
