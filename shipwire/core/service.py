"""Public entry point: the Shipwire fulfillment service.

Selects the endpoint, builder and parser for each action, sends the
request through the transport port and wraps the parsed reply.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

from .builder import RequestBuilder
from .errors import ConfigurationError
from .models import (
    POST_VARS,
    SERVICE_URLS,
    Action,
    Credentials,
    FulfillmentResponse,
    ServerMode,
)
from .normalizer import is_blank, normalize_address, normalize_line_items
from .parser import coerce_action, parse_response
from .ports import CountryLookupPort, TransportPort

logger = logging.getLogger(__name__)

FORM_HEADERS: Mapping[str, str] = {"Content-Type": "application/x-www-form-urlencoded"}


class FulfillmentService:
    """Client for the Shipwire fulfillment, inventory and tracking APIs.

    The instance holds no per-request state and may be shared between
    threads once constructed.

    Args:
        login: Shipwire account e-mail address.
        password: Shipwire account password.
        transport: Transport used to POST requests.
        countries: Country lookup used for shipping addresses.
        test: Send requests in Test server mode.

    Raises:
        ConfigurationError: If login or password is missing.
    """

    def __init__(
        self,
        login: str,
        password: str,
        transport: TransportPort,
        countries: CountryLookupPort,
        test: bool = False,
    ):
        missing = [
            name for name, value in (("login", login), ("password", password))
            if is_blank(value)
        ]
        if missing:
            raise ConfigurationError(f"Missing required parameter: {', '.join(missing)}")

        self.credentials = Credentials(login=login, password=password)
        self.test = test
        self.server_mode = ServerMode.from_test_flag(test)
        self.transport = transport
        self.countries = countries
        self.builder = RequestBuilder(self.credentials, self.server_mode)

    def fulfill(
        self,
        order_id: str,
        shipping_address: Mapping[str, Any],
        line_items: Any,
        options: Mapping[str, Any] | None = None,
    ) -> FulfillmentResponse:
        """Submit a single order for fulfillment.

        Args:
            order_id: Caller's order identifier.
            shipping_address: Mapping with name, company, address1, address2,
                city, state, country, zip and phone.
            line_items: Sequence of mappings with sku, quantity, description,
                length, width, height, weight and declared_value.
            options: Optional warehouse, shipping_method and email.
        """
        address = normalize_address(shipping_address, self.countries)
        items = normalize_line_items(line_items)
        request = self.builder.build_fulfillment_request(order_id, address, items, options)
        logger.info(
            f"Submitting order {order_id} with {len(items)} line item(s)",
            extra={"order_id": order_id, "server": self.server_mode.value},
        )
        return self.commit(Action.FULFILLMENT, request)

    def fetch_stock_levels(self, options: Mapping[str, Any] | None = None) -> FulfillmentResponse:
        """Query stock levels, optionally narrowed by warehouse and sku."""
        return self.commit(Action.INVENTORY, self.builder.build_inventory_request(options))

    def fetch_tracking_numbers(self, options: Mapping[str, Any] | None = None) -> FulfillmentResponse:
        """Fetch tracking numbers for shipped orders."""
        return self.commit(Action.TRACKING, self.builder.build_tracking_request(options))

    def commit(self, action: Action | str, request: str) -> FulfillmentResponse:
        """POST a built request and parse the reply.

        Raises:
            UnknownActionError: If ``action`` is not a known action.
            Exception: Transport failures propagate unmodified.
            lxml.etree.XMLSyntaxError: If the reply is not XML.
        """
        action = coerce_action(action)
        body = f"{POST_VARS[action]}={quote_plus(request)}"
        data = self.transport.post(SERVICE_URLS[action], body, FORM_HEADERS)

        reply = parse_response(action, data, self.test)
        if reply.success:
            logger.info(f"Shipwire {action.value} request succeeded")
        else:
            logger.warning(
                f"Shipwire {action.value} request failed: {reply.message}",
                extra={"status": reply.fields.get("status")},
            )
        return FulfillmentResponse(reply=reply, test=self.test)
