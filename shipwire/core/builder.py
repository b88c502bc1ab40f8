"""Request document builders.

Each builder produces a complete XML document: declaration, DOCTYPE
pointing at the action's schema, and a root element that opens with
the shared credential envelope.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from lxml import etree

from .models import (
    SCHEMA_URLS,
    Action,
    Credentials,
    LineItem,
    ServerMode,
    ShippingAddress,
)
from .normalizer import is_blank
from .warehouses import code_of, label_of

REFERER = "Active Fulfillment"
TRACKING_BOOKMARK = "3"

_ITEM_TAGS = (
    ("Code", "sku"),
    ("Quantity", "quantity"),
    ("Description", "description"),
    ("Length", "length"),
    ("Width", "width"),
    ("Height", "height"),
    ("Weight", "weight"),
    ("DeclaredValue", "declared_value"),
)


def _add(parent: etree._Element, tag: str, value: Any = None, **attrib: Any) -> etree._Element:
    """Append a child element; None leaves the element empty."""
    element = etree.SubElement(parent, tag, {k: str(v) for k, v in attrib.items()})
    if value is not None:
        element.text = str(value)
    return element


def _add_unless_blank(parent: etree._Element, tag: str, value: Any) -> None:
    if not is_blank(value):
        _add(parent, tag, value)


class RequestBuilder:
    """Builds the three request documents for one account.

    Args:
        credentials: Login and password injected into every document.
        server_mode: Test or Production, stamped as ``Server``.
    """

    def __init__(self, credentials: Credentials, server_mode: ServerMode):
        self.credentials = credentials
        self.server_mode = server_mode

    def build_fulfillment_request(
        self,
        order_id: str,
        address: ShippingAddress,
        line_items: Sequence[LineItem],
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Build an ``OrderList`` document holding a single order."""
        options = options or {}
        root = self._envelope("OrderList")
        _add(root, "Referer", REFERER)

        order = _add(root, "Order", id=order_id)
        _add(order, "Warehouse", code_of(options.get("warehouse")))
        self._add_address(order, address, options)
        _add_unless_blank(order, "Shipping", options.get("shipping_method"))
        for index, item in enumerate(line_items):
            self._add_item(order, item, index)

        return self._serialize(root, Action.FULFILLMENT)

    def build_inventory_request(self, options: Mapping[str, Any] | None = None) -> str:
        """Build an ``InventoryUpdate`` stock level query."""
        options = options or {}
        root = self._envelope("InventoryUpdate")
        _add(root, "Warehouse", label_of(options.get("warehouse")))
        _add(root, "ProductCode", options.get("sku"))
        return self._serialize(root, Action.INVENTORY)

    def build_tracking_request(self, options: Mapping[str, Any] | None = None) -> str:
        """Build a ``TrackingUpdate`` query.

        The provider expects ``Server`` repeated after the envelope and a
        fixed bookmark value.
        """
        root = self._envelope("TrackingUpdate")
        _add(root, "Server", self.server_mode.value)
        _add(root, "Bookmark", TRACKING_BOOKMARK)
        return self._serialize(root, Action.TRACKING)

    def _envelope(self, root_tag: str) -> etree._Element:
        """Create the root element with the credential block."""
        root = etree.Element(root_tag)
        _add(root, "EmailAddress", self.credentials.login)
        _add(root, "Password", self.credentials.password)
        _add(root, "Server", self.server_mode.value)
        return root

    def _add_address(
        self, order: etree._Element, address: ShippingAddress, options: Mapping[str, Any]
    ) -> None:
        info = _add(order, "AddressInfo", type="Ship")
        name = _add(info, "Name")
        _add(name, "Full", address.name)

        if is_blank(address.company):
            _add(info, "Address1", address.address1)
            _add(info, "Address2", address.address2)
        else:
            _add(info, "Address1", address.company)
            _add(info, "Address2", address.address1)
            _add(info, "Address3", address.address2)

        _add(info, "City", address.city)
        _add(info, "State", address.state)
        _add_unless_blank(info, "Country", address.country)
        _add_unless_blank(info, "Zip", address.zip)
        _add_unless_blank(info, "Phone", address.phone)
        _add_unless_blank(info, "Email", options.get("email"))

    def _add_item(self, order: etree._Element, item: LineItem, index: int) -> None:
        element = _add(order, "Item", num=index)
        for tag, attribute in _ITEM_TAGS:
            _add_unless_blank(element, tag, getattr(item, attribute))

    @staticmethod
    def _serialize(root: etree._Element, action: Action) -> str:
        doctype = f'<!DOCTYPE {root.tag} SYSTEM "{SCHEMA_URLS[action]}">'
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            doctype=doctype,
            pretty_print=True,
        ).decode("utf-8")
