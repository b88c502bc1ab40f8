"""Fake TransportPort implementation for testing."""

from collections.abc import Mapping
from urllib.parse import parse_qs

from shipwire.core.ports import TransportPort


class FakeTransport(TransportPort):
    """In-memory transport for testing.

    Returns a canned reply and captures every request for assertions.
    """

    def __init__(self, reply: str = ""):
        """Initialize with the reply returned by every post."""
        self.reply = reply
        self.requests: list[tuple[str, str, dict[str, str]]] = []
        self.should_fail: bool = False
        self.fail_error: Exception = ConnectionError("Transport failed")
        self.closed = False

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> str:
        """Record the request and return the canned reply."""
        self.requests.append((url, body, dict(headers)))

        if self.should_fail:
            raise self.fail_error

        return self.reply

    def close(self) -> None:
        self.closed = True

    def set_reply(self, reply: str) -> None:
        self.reply = reply

    def set_should_fail(self, should_fail: bool, error: Exception | None = None) -> None:
        """Configure the transport to fail on the next post."""
        self.should_fail = should_fail
        if error is not None:
            self.fail_error = error

    def get_last_request(self) -> tuple[str, str, dict[str, str]] | None:
        """Get the most recent request, if any."""
        if self.requests:
            return self.requests[-1]
        return None

    def get_last_document(self) -> str | None:
        """Decode the XML document from the most recent form body."""
        last = self.get_last_request()
        if last is None:
            return None
        form = parse_qs(last[1])
        (values,) = form.values()
        return values[0]

    def get_last_field_name(self) -> str | None:
        last = self.get_last_request()
        if last is None:
            return None
        return last[1].split("=", 1)[0]
