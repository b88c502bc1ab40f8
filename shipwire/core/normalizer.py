"""Shaping of caller-supplied address and line-item maps.

Converts loose dictionaries into ShippingAddress and LineItem models
and resolves the country into the ``"<CODE> <Name>"`` form the
provider expects.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import fields
from typing import Any

from .errors import AddressValidationError
from .models import Country, LineItem, ShippingAddress
from .ports import CountryLookupPort

logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = tuple(f.name for f in fields(ShippingAddress) if f.name != "country")
_LINE_ITEM_FIELDS = tuple(f.name for f in fields(LineItem))

# The provider uses the top level domain for the United Kingdom.
_COUNTRY_CODE_OVERRIDES = {"GB": "UK"}


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty containers.

    Numbers are never blank, so a quantity of 0 is still emitted.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def render_country(country: Country) -> str:
    """Render a country as ``"<CODE> <Name>"`` with provider code overrides."""
    code = _COUNTRY_CODE_OVERRIDES.get(country.alpha2, country.alpha2)
    return f"{code} {country.name}"


def normalize_address(
    address: Mapping[str, Any], countries: CountryLookupPort
) -> ShippingAddress:
    """Build a ShippingAddress from a raw mapping.

    Unknown keys are ignored. The country, when present, is resolved
    through the lookup port.

    Raises:
        AddressValidationError: If ``address`` is not a mapping.
        InvalidCountryError: If the country cannot be resolved.
    """
    if isinstance(address, ShippingAddress):
        return address
    if not isinstance(address, Mapping):
        raise AddressValidationError(
            f"shipping address must be a mapping, got {type(address).__name__}"
        )

    values = {name: address.get(name) for name in _ADDRESS_FIELDS}

    country = None
    raw_country = address.get("country")
    if not is_blank(raw_country):
        country = render_country(countries.find(str(raw_country).strip()))
        logger.debug(f"Resolved country {raw_country!r} to {country!r}")

    return ShippingAddress(country=country, **values)


def normalize_line_items(line_items: Any) -> tuple[LineItem, ...]:
    """Build LineItem models, keeping the caller's order.

    Accepts None (no items), a single mapping, or an iterable of
    mappings / LineItem instances.

    Raises:
        AddressValidationError: If an item is not a mapping.
    """
    if line_items is None:
        return ()
    if isinstance(line_items, (Mapping, LineItem)):
        line_items = [line_items]
    elif isinstance(line_items, (str, bytes)) or not isinstance(line_items, Iterable):
        raise AddressValidationError(
            f"line items must be a sequence of mappings, got {type(line_items).__name__}"
        )

    items = []
    for index, item in enumerate(line_items):
        if isinstance(item, LineItem):
            items.append(item)
        elif isinstance(item, Mapping):
            items.append(LineItem(**{name: item.get(name) for name in _LINE_ITEM_FIELDS}))
        else:
            raise AddressValidationError(
                f"line item {index} must be a mapping, got {type(item).__name__}"
            )
    return tuple(items)
