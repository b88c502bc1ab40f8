"""httpx transport adapter.

Implements TransportPort with a synchronous httpx client. HTTP status
errors and connection failures are logged and re-raised unchanged.
"""

import logging
from collections.abc import Mapping

import httpx

from shipwire.core.ports import TransportPort

logger = logging.getLogger(__name__)


class HttpxTransport(TransportPort):
    """Posts request bodies over HTTPS with httpx."""

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (e.g. with a mock transport).
        """
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> bytes:
        """POST ``body`` and return the undecoded reply body."""
        try:
            response = self._get_client().post(
                url,
                content=body.encode("utf-8"),
                headers=dict(headers),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Shipwire returned HTTP {e.response.status_code}",
                extra={"url": url},
            )
            raise
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Shipwire: {e}", extra={"url": url})
            raise

        logger.debug(
            f"Received {len(response.content)} bytes",
            extra={"url": url, "status_code": response.status_code},
        )
        return response.content
