"""Domain models for the Shipwire fulfillment client.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class Action(Enum):
    """The three provider operations.

    Each action selects its own endpoint, request schema, form field
    and reply parser.
    """

    FULFILLMENT = "fulfillment"
    INVENTORY = "inventory"
    TRACKING = "tracking"


SERVICE_URLS: Mapping[Action, str] = MappingProxyType({
    Action.FULFILLMENT: "https://www.shipwire.com/exec/FulfillmentServices.php",
    Action.INVENTORY: "https://www.shipwire.com/exec/InventoryServices.php",
    Action.TRACKING: "https://www.shipwire.com/exec/TrackingServices.php",
})

SCHEMA_URLS: Mapping[Action, str] = MappingProxyType({
    Action.FULFILLMENT: "http://www.shipwire.com/exec/download/OrderList.dtd",
    Action.INVENTORY: "http://www.shipwire.com/exec/download/InventoryUpdate.dtd",
    Action.TRACKING: "http://www.shipwire.com/exec/download/TrackingUpdate.dtd",
})

POST_VARS: Mapping[Action, str] = MappingProxyType({
    Action.FULFILLMENT: "OrderListXML",
    Action.INVENTORY: "InventoryUpdateXML",
    Action.TRACKING: "TrackingUpdateXML",
})


class ServerMode(Enum):
    """Value stamped into the ``Server`` tag of every request."""

    TEST = "Test"
    PRODUCTION = "Production"

    @classmethod
    def from_test_flag(cls, test: bool) -> "ServerMode":
        return cls.TEST if test else cls.PRODUCTION


@dataclass(frozen=True)
class Credentials:
    """Account login and password, sent as-is in every request."""

    login: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(login={self.login!r}, password='***')"


@dataclass(frozen=True)
class Country:
    """A resolved country: ISO alpha-2 code and display name."""

    alpha2: str
    name: str


@dataclass(frozen=True)
class ShippingAddress:
    """Shipping address in the shape the request builder expects.

    ``country`` holds the already rendered ``"<CODE> <Name>"`` string,
    or None when no country was supplied.
    """

    name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class LineItem:
    """A single order line. Every field is optional."""

    sku: Any = None  # provider limits Code to 12 characters
    quantity: Any = None
    description: Any = None
    length: Any = None
    width: Any = None
    height: Any = None
    weight: Any = None
    declared_value: Any = None


@dataclass(frozen=True)
class ParsedReply:
    """Normalized result of parsing one provider reply.

    ``fields`` holds the expected reply elements under their normalized
    names; ``unrecognized_fields`` keeps anything else keyed by the raw
    tag name so new provider fields are not lost.
    """

    success: bool
    message: str | None
    fields: Mapping[str, str | None] = field(default_factory=dict)
    unrecognized_fields: Mapping[str, str | None] = field(default_factory=dict)
    stock_levels: Mapping[str, int] | None = None
    tracking_numbers: Mapping[str, str | None] | None = None

    def __post_init__(self) -> None:
        """Freeze the mapping attributes."""
        for name in ("fields", "unrecognized_fields", "stock_levels", "tracking_numbers"):
            value = getattr(self, name)
            if isinstance(value, dict):
                object.__setattr__(self, name, MappingProxyType(value))


@dataclass(frozen=True)
class FulfillmentResponse:
    """Uniform response returned by every service operation."""

    reply: ParsedReply
    test: bool

    @property
    def success(self) -> bool:
        return self.reply.success

    @property
    def message(self) -> str | None:
        return self.reply.message

    @property
    def stock_levels(self) -> Mapping[str, int]:
        return self.reply.stock_levels or {}

    @property
    def tracking_numbers(self) -> Mapping[str, str | None]:
        return self.reply.tracking_numbers or {}

    @property
    def params(self) -> dict[str, Any]:
        """Flat view of everything the provider returned.

        Unrecognized fields come first so that normalized fields and the
        derived success/message always win on a name clash.
        """
        params: dict[str, Any] = dict(self.reply.unrecognized_fields)
        params.update(self.reply.fields)
        if self.reply.stock_levels is not None:
            params["stock_levels"] = dict(self.reply.stock_levels)
        if self.reply.tracking_numbers is not None:
            params["tracking_numbers"] = dict(self.reply.tracking_numbers)
        params["success"] = self.reply.success
        params["message"] = self.reply.message
        return params
