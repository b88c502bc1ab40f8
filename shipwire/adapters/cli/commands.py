"""CLI command implementations for the Shipwire client.

This adapter maps CLI commands (fulfill, stock, tracking, shipping-methods)
to FulfillmentService operations. It handles CLI-specific formatting and
error reporting.
"""

import logging
from typing import Any

from shipwire.core.errors import ShipwireError
from shipwire.core.models import FulfillmentResponse
from shipwire.core.service import FulfillmentService
from shipwire.core.warehouses import SHIPPING_METHODS

logger = logging.getLogger(__name__)


def _result(operation: str, response: FulfillmentResponse) -> dict[str, Any]:
    return {
        "status": "success" if response.success else "error",
        "operation": operation,
        "message": response.message,
        "test": response.test,
        "params": response.params,
    }


def _error(operation: str, error: Exception) -> dict[str, Any]:
    logger.error(f"{operation} failed: {error}")
    return {
        "status": "error",
        "operation": operation,
        "message": str(error),
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to FulfillmentService."""

    def __init__(self, service: FulfillmentService):
        """Initialize the CLI command handler.

        Args:
            service: FulfillmentService used to execute commands.
        """
        self.service = service

    def fulfill(self, order_id: str, order: dict[str, Any]) -> dict[str, Any]:
        """Submit an order via CLI.

        Args:
            order_id: Order identifier.
            order: Dictionary with ``shipping_address``, ``line_items`` and
                optional ``options``.

        Returns:
            Dictionary with status, message and the reply params.
        """
        try:
            response = self.service.fulfill(
                order_id,
                order.get("shipping_address", {}),
                order.get("line_items", []),
                order.get("options"),
            )
        except ShipwireError as e:
            return _error("fulfill", e)

        result = _result("fulfill", response)
        result["order_id"] = order_id
        return result

    def fetch_stock_levels(
        self, sku: str | None = None, warehouse: str | None = None
    ) -> dict[str, Any]:
        """Fetch stock levels via CLI."""
        options = {"sku": sku, "warehouse": warehouse}
        return _result("stock", self.service.fetch_stock_levels(options))

    def fetch_tracking_numbers(self) -> dict[str, Any]:
        """Fetch tracking numbers via CLI."""
        return _result("tracking", self.service.fetch_tracking_numbers())

    @staticmethod
    def list_shipping_methods() -> dict[str, Any]:
        """List shipping method labels and their codes."""
        return {
            "status": "success",
            "operation": "shipping-methods",
            "shipping_methods": [
                {"label": label, "code": code} for label, code in SHIPPING_METHODS.items()
            ],
        }


def run_command(
    service: FulfillmentService,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        service: FulfillmentService implementation.
        command: Command name ('fulfill', 'stock', 'tracking', 'shipping-methods').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized.
    """
    handler = CLICommandHandler(service)

    if command == "fulfill":
        return handler.fulfill(args["order_id"], args["order"])

    elif command == "stock":
        return handler.fetch_stock_levels(args.get("sku"), args.get("warehouse"))

    elif command == "tracking":
        return handler.fetch_tracking_numbers()

    elif command == "shipping-methods":
        return handler.list_shipping_methods()

    else:
        raise ValueError(f"Unknown command: {command}")
