"""
Valet Delivery Ordering
=======================
Entry point.

    python main.py take-orders     -- interactive console order desk
    python main.py serve           -- REST API (or: uvicorn main:app --reload)
"""

import argparse
import logging
import sys

import uvicorn

from valet_delivery.api.app import create_app
from valet_delivery.config import get_settings
from valet_delivery.infrastructure.locator import CourierLocator
from valet_delivery.logging_config import setup_logging
from valet_delivery.orders import OrderDesk
from valet_delivery.session import ConsolePrompter, OrderSession

logger = logging.getLogger("valet_delivery")

app = create_app()


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Order a valet's deliveries by proximity",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: LOG_LEVEL setting)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("take-orders", help="Run the interactive order desk")

    serve = commands.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    return parser


def take_orders() -> int:
    settings = get_settings()
    session = OrderSession(ConsolePrompter())
    with CourierLocator(settings) as locator:
        try:
            OrderDesk(session, locator).run()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; leaving the order desk")
    return 0


def main(argv=None) -> int:
    args = create_argument_parser().parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    if args.command == "take-orders":
        return take_orders()

    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
