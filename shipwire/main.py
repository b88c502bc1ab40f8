"""Composition root for the Shipwire client.

This module is the ONLY location that imports both core logic and
concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Service initialization
- Command dispatch
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from shipwire.adapters.cli.commands import run_command
from shipwire.adapters.countries.pycountry_lookup import PyCountryLookup
from shipwire.adapters.transport.httpx_transport import HttpxTransport
from shipwire.config import Settings, load_settings
from shipwire.core.ports import CountryLookupPort, TransportPort
from shipwire.core.service import FulfillmentService


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Results go to stdout as JSON; keep logs off it.
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_service(
    settings: Settings,
    transport: TransportPort | None = None,
    countries: CountryLookupPort | None = None,
) -> FulfillmentService:
    """Wire a FulfillmentService from settings.

    Raises:
        ConfigurationError: If credentials are not configured.
    """
    return FulfillmentService(
        login=settings.shipwire_login,
        password=settings.shipwire_password,
        transport=transport or HttpxTransport(timeout=settings.http_timeout_seconds),
        countries=countries or PyCountryLookup(),
        test=settings.shipwire_test_mode,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shipwire",
        description="Submit orders and query stock and tracking at Shipwire.",
    )
    parser.add_argument("--env-file", help="Path to a .env file with settings")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fulfill = subparsers.add_parser("fulfill", help="Submit an order")
    fulfill.add_argument("--order-id", required=True)
    fulfill.add_argument(
        "--order-file",
        required=True,
        type=Path,
        help="JSON file with shipping_address, line_items and options",
    )

    stock = subparsers.add_parser("stock", help="Fetch stock levels")
    stock.add_argument("--sku")
    stock.add_argument("--warehouse", help="Warehouse code, e.g. 01")

    subparsers.add_parser("tracking", help="Fetch tracking numbers")
    subparsers.add_parser("shipping-methods", help="List shipping method codes")
    return parser


def _command_args(args: argparse.Namespace) -> dict:
    if args.command == "fulfill":
        return {
            "order_id": args.order_id,
            "order": json.loads(args.order_file.read_text(encoding="utf-8")),
        }
    if args.command == "stock":
        return {"sku": args.sku, "warehouse": args.warehouse}
    return {}


def run(argv: list[str] | None = None, transport: TransportPort | None = None) -> int:
    """Parse arguments, run one command and print its JSON result.

    Returns:
        0 when the command succeeded, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(args.env_file)
    except Exception as e:
        # Logging is not configured yet; the JSON error is the only report.
        print(json.dumps({"status": "error", "message": str(e)}, indent=2))
        return 1

    configure_logging(settings.log_level, settings.log_format)

    try:
        service = build_service(settings, transport=transport)
        try:
            result = run_command(service, args.command, _command_args(args))
        finally:
            service.transport.close()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(json.dumps({"status": "error", "message": str(e)}, indent=2))
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("status") == "success" else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Command succeeded
        1: Provider reported a failure or the command raised
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logging.getLogger(__name__).warning("Interrupted by user (SIGINT)")
        sys.exit(130)


if __name__ == "__main__":
    main()
