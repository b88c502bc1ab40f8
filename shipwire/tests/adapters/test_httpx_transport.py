"""Tests for HttpxTransport using httpx's mock transport."""

import httpx
import pytest

from shipwire.adapters.transport.httpx_transport import HttpxTransport
from shipwire.core.models import Action
from shipwire.core.parser import parse_response

URL = "https://www.shipwire.com/exec/TrackingServices.php"
HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def make_transport(handler) -> HttpxTransport:
    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_post_sends_body_and_headers():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="<TrackingUpdateResponse/>")

    transport = make_transport(handler)
    reply = transport.post(URL, "TrackingUpdateXML=%3Cx%2F%3E", HEADERS)

    assert reply == b"<TrackingUpdateResponse/>"
    (request,) = seen
    assert request.method == "POST"
    assert str(request.url) == URL
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.content == b"TrackingUpdateXML=%3Cx%2F%3E"


def test_http_error_status_propagates():
    transport = make_transport(lambda request: httpx.Response(500, text="oops"))

    with pytest.raises(httpx.HTTPStatusError):
        transport.post(URL, "", HEADERS)


def test_connection_error_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(handler)

    with pytest.raises(httpx.ConnectError):
        transport.post(URL, "", HEADERS)


def test_close_releases_client():
    transport = make_transport(lambda request: httpx.Response(200, text=""))
    transport.post(URL, "", HEADERS)

    transport.close()

    assert transport._client is None


def test_context_manager_closes():
    with make_transport(lambda request: httpx.Response(200, text="ok")) as transport:
        assert transport.post(URL, "", HEADERS) == b"ok"
    assert transport._client is None


def test_client_created_lazily():
    transport = HttpxTransport(timeout=5.0)
    assert transport._client is None

    client = transport._get_client()

    assert isinstance(client, httpx.Client)
    assert client.timeout == httpx.Timeout(5.0)
    transport.close()


def test_latin1_reply_keeps_accented_text():
    body = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<SubmitOrderResponse><Status>1</Status>"
        "<ErrorMessage>Adresse invalide: Montréal</ErrorMessage></SubmitOrderResponse>"
    ).encode("iso-8859-1")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=body,
            headers={"Content-Type": "text/xml; charset=ISO-8859-1"},
        )

    reply = make_transport(handler).post(URL, "", HEADERS)

    assert reply == body
    parsed = parse_response(Action.FULFILLMENT, reply)
    assert parsed.message == "Adresse invalide: Montréal"
