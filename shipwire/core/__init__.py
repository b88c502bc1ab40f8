"""Core request/response logic for the Shipwire client.

This package turns orders and queries into provider XML documents and
provider replies into normalized results. Its only third-party
dependency is lxml; HTTP transport and country data are reached
through the ports in ``ports.py``.
"""

from .errors import (
    AddressValidationError,
    ConfigurationError,
    InvalidCountryError,
    ShipwireError,
    UnknownActionError,
)
from .models import (
    Action,
    Country,
    Credentials,
    FulfillmentResponse,
    LineItem,
    ParsedReply,
    ServerMode,
    ShippingAddress,
)
from .service import FulfillmentService

__all__ = [
    "Action",
    "AddressValidationError",
    "ConfigurationError",
    "Country",
    "Credentials",
    "FulfillmentResponse",
    "FulfillmentService",
    "InvalidCountryError",
    "LineItem",
    "ParsedReply",
    "ServerMode",
    "ShippingAddress",
    "ShipwireError",
    "UnknownActionError",
]
