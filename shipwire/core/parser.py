"""Reply parsers.

Every parser walks the top-level children of the reply root. Expected
elements are stored under normalized names, repeatable ``Product`` and
``Order`` elements feed the action-specific maps, and anything else is
kept verbatim in ``unrecognized_fields``.
"""

import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from lxml import etree

from .errors import UnknownActionError
from .models import Action, ParsedReply
from .normalizer import is_blank

logger = logging.getLogger(__name__)

FULFILLMENT_SUCCESS_MESSAGE = "Successfully submitted the order"
INVENTORY_SUCCESS_MESSAGE = "Successfully received the stock levels"
TRACKING_SUCCESS_MESSAGE = "Successfully received the tracking numbers"

_COMMON_FIELDS = MappingProxyType({
    "Status": "status",
    "ErrorMessage": "error_message",
})

REPLY_FIELDS: Mapping[Action, Mapping[str, str]] = MappingProxyType({
    Action.FULFILLMENT: MappingProxyType({
        **_COMMON_FIELDS,
        "TotalOrders": "total_orders",
        "TotalItems": "total_items",
        "TransactionId": "transaction_id",
        "OrderInformation": "order_information",
    }),
    Action.INVENTORY: MappingProxyType({
        **_COMMON_FIELDS,
        "TotalProducts": "total_products",
    }),
    Action.TRACKING: MappingProxyType({
        **_COMMON_FIELDS,
        "TotalOrders": "total_orders",
        "TotalShippedOrders": "total_shipped_orders",
        "TotalProducts": "total_products",
        "Bookmark": "bookmark",
    }),
})

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SPACE_RUNS = re.compile(r" {2,}")


def message_from(error_message: str | None) -> str | None:
    """Tidy a provider error message for display.

    Returns None for a missing or blank message; otherwise drops newlines
    and collapses runs of spaces.
    """
    if is_blank(error_message):
        return None
    return _SPACE_RUNS.sub(" ", error_message.replace("\n", ""))


def _to_int(value: str | None) -> int:
    """Leading integer of ``value``; 0 when there is none."""
    if value is None:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _root_of(xml: str | bytes) -> etree._Element:
    # No entity expansion or DTD loading for provider replies.
    # lxml parsers must not be shared between threads.
    options = {"resolve_entities": False, "no_network": True, "load_dtd": False}
    if isinstance(xml, str):
        # Already decoded text: override whatever encoding the declaration names.
        parser = etree.XMLParser(encoding="utf-8", **options)
        return etree.fromstring(xml.encode("utf-8"), parser)
    return etree.fromstring(xml, etree.XMLParser(**options))


def _walk(
    xml: str | bytes,
    action: Action,
    special: Mapping[str, Callable[[etree._Element], None]] | None = None,
) -> tuple[dict[str, str | None], dict[str, str | None]]:
    """Split the root's children into known and unrecognized fields."""
    known = REPLY_FIELDS[action]
    special = special or {}
    fields: dict[str, str | None] = {}
    unrecognized: dict[str, str | None] = {}

    for node in _root_of(xml):
        if not isinstance(node.tag, str):
            # comments and processing instructions
            continue
        if node.tag in special:
            special[node.tag](node)
        elif node.tag in known:
            fields[known[node.tag]] = node.text
        else:
            unrecognized[node.tag] = node.text

    if unrecognized:
        logger.debug(
            f"Unrecognized {action.value} reply fields: {sorted(unrecognized)}"
        )
    return fields, unrecognized


def parse_fulfillment_response(xml: str | bytes) -> ParsedReply:
    fields, unrecognized = _walk(xml, Action.FULFILLMENT)
    success = fields.get("status") == "0"
    return ParsedReply(
        success=success,
        message=FULFILLMENT_SUCCESS_MESSAGE if success else message_from(fields.get("error_message")),
        fields=fields,
        unrecognized_fields=unrecognized,
    )


def parse_inventory_response(xml: str | bytes, test: bool) -> ParsedReply:
    stock_levels: dict[str, int] = {}

    def add_product(node: etree._Element) -> None:
        stock_levels[node.get("code")] = _to_int(node.get("quantity"))

    fields, unrecognized = _walk(xml, Action.INVENTORY, {"Product": add_product})
    status = fields.get("status")
    success = status == "Test" if test else status == "0"
    return ParsedReply(
        success=success,
        message=INVENTORY_SUCCESS_MESSAGE if success else message_from(fields.get("error_message")),
        fields=fields,
        unrecognized_fields=unrecognized,
        stock_levels=stock_levels,
    )


def parse_tracking_response(xml: str | bytes, test: bool) -> ParsedReply:
    tracking_numbers: dict[str, str | None] = {}

    def add_order(node: etree._Element) -> None:
        if node.get("shipped") == "YES":
            tracking_numbers[node.get("id")] = node.get("trackingNumber")

    fields, unrecognized = _walk(xml, Action.TRACKING, {"Order": add_order})
    status = fields.get("status")
    success = status in ("0", "Test") if test else status == "0"
    return ParsedReply(
        success=success,
        message=TRACKING_SUCCESS_MESSAGE if success else message_from(fields.get("error_message")),
        fields=fields,
        unrecognized_fields=unrecognized,
        tracking_numbers=tracking_numbers,
    )


def coerce_action(action: Any) -> Action:
    """Accept an Action or its string value.

    Raises:
        UnknownActionError: For anything else.
    """
    if isinstance(action, Action):
        return action
    try:
        return Action(action)
    except ValueError:
        raise UnknownActionError(f"Unknown action {action!r}") from None


def parse_response(action: Action | str, xml: str | bytes, test: bool = False) -> ParsedReply:
    """Parse a raw reply with the parser registered for ``action``.

    Raises:
        UnknownActionError: If ``action`` is not a known action.
        lxml.etree.XMLSyntaxError: If the reply is not well-formed XML.
    """
    action = coerce_action(action)
    if action is Action.FULFILLMENT:
        return parse_fulfillment_response(xml)
    if action is Action.INVENTORY:
        return parse_inventory_response(xml, test)
    return parse_tracking_response(xml, test)
