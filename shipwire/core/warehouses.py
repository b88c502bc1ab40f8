"""Warehouse and shipping-method reference tables."""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_WAREHOUSE = "00"

WAREHOUSES: Mapping[str, str] = MappingProxyType({
    "01": "01 - Shipwire Chicago",
    "02": "02 - Shipwire Los Angeles",
})

# Label first, provider code second; insertion order is display order.
SHIPPING_METHODS: Mapping[str, str] = MappingProxyType({
    "1 Day Service": "1D",
    "2 Day Service": "2D",
    "Ground Service": "GD",
    "Freight Service": "FT",
})


def code_of(warehouse: str | None) -> str:
    """Return the code to send in a fulfillment order.

    Unknown codes pass through unchanged; a missing code selects the
    provider's default warehouse.
    """
    return warehouse or DEFAULT_WAREHOUSE


def label_of(warehouse: str | None) -> str | None:
    """Return the label to send in an inventory query, or None if unknown."""
    if warehouse is None:
        return None
    return WAREHOUSES.get(warehouse)
