"""Unit tests for CLI commands.

Tests verify that the CLI commands correctly:
- Delegate to FulfillmentService
- Output JSON-serializable results
- Report provider failures and invalid input as error results
"""

import json

import pytest

from shipwire.adapters.cli.commands import CLICommandHandler, run_command
from shipwire.core.service import FulfillmentService
from shipwire.tests.fakes import FakeCountryLookup, FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def service(transport: FakeTransport) -> FulfillmentService:
    return FulfillmentService("me@example.com", "pw", transport, FakeCountryLookup(), test=True)


@pytest.fixture
def order() -> dict:
    return {
        "shipping_address": {"name": "Fred", "city": "Leeds", "country": "GB"},
        "line_items": [{"sku": "A1", "quantity": 1}],
        "options": {"warehouse": "01"},
    }


class TestCLICommandHandler:
    def test_fulfill_success(self, service, transport, order):
        transport.set_reply("<SubmitOrderResponse><Status>0</Status></SubmitOrderResponse>")

        result = CLICommandHandler(service).fulfill("42", order)

        assert result["status"] == "success"
        assert result["operation"] == "fulfill"
        assert result["order_id"] == "42"
        assert result["test"] is True
        json.dumps(result)

    def test_fulfill_provider_failure(self, service, transport, order):
        transport.set_reply(
            "<SubmitOrderResponse><Status>1</Status>"
            "<ErrorMessage>Bad order</ErrorMessage></SubmitOrderResponse>"
        )

        result = CLICommandHandler(service).fulfill("42", order)

        assert result["status"] == "error"
        assert result["message"] == "Bad order"

    def test_fulfill_invalid_country(self, service, transport, order):
        order["shipping_address"]["country"] = "Mordor"

        result = CLICommandHandler(service).fulfill("42", order)

        assert result["status"] == "error"
        assert "Mordor" in result["message"]
        assert transport.requests == []

    def test_stock(self, service, transport):
        transport.set_reply(
            '<InventoryUpdateResponse><Status>Test</Status>'
            '<Product code="A1" quantity="3"/></InventoryUpdateResponse>'
        )

        result = CLICommandHandler(service).fetch_stock_levels(sku="A1")

        assert result["status"] == "success"
        assert result["params"]["stock_levels"] == {"A1": 3}

    def test_tracking(self, service, transport):
        transport.set_reply(
            '<TrackingUpdateResponse><Status>Test</Status>'
            '<Order id="9" shipped="YES" trackingNumber="1Z"/></TrackingUpdateResponse>'
        )

        result = CLICommandHandler(service).fetch_tracking_numbers()

        assert result["params"]["tracking_numbers"] == {"9": "1Z"}

    def test_shipping_methods(self):
        result = CLICommandHandler.list_shipping_methods()

        assert result["shipping_methods"][0] == {"label": "1 Day Service", "code": "1D"}
        assert len(result["shipping_methods"]) == 4


class TestRunCommand:
    def test_dispatches_stock(self, service, transport):
        transport.set_reply("<InventoryUpdateResponse><Status>Test</Status></InventoryUpdateResponse>")

        result = run_command(service, "stock", {"sku": "A1", "warehouse": "02"})

        assert result["operation"] == "stock"
        assert "02 - Shipwire Los Angeles" in transport.get_last_document()

    def test_unknown_command(self, service):
        with pytest.raises(ValueError, match="Unknown command"):
            run_command(service, "cancel", {})
