"""Exceptions raised by the Shipwire client.

Provider-reported failures are never raised; they come back as an
unsuccessful FulfillmentResponse. Transport failures surface as the
transport library's own exceptions.
"""


class ShipwireError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(ShipwireError, ValueError):
    """Required settings such as credentials are missing."""


class UnknownActionError(ShipwireError, ValueError):
    """An action outside fulfillment/inventory/tracking was requested."""


class InvalidCountryError(ShipwireError, LookupError):
    """A country identifier could not be resolved."""


class AddressValidationError(ShipwireError, ValueError):
    """Shipping address or line items have the wrong shape."""
