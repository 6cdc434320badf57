"""
Command-line interface for exercising the merchant sandbox APIs.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Iterable, Optional, Sequence, Tuple

from .api import create_merchant_client
from .core import (
    Amount,
    ApplicationContext,
    ConfigError,
    CreateOrderParams,
    MerchantAPIClient,
    MerchantAPIError,
    Order,
    ProcessOrderParams,
    PurchaseUnit,
    load_merchant_config,
)
from .ui import ButtonColor, ButtonLabel, ButtonSize, FundingSource, PaymentButton


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _choices(enum_type: Any) -> list[str]:
    return [member.value for member in enum_type]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merchant-sandbox",
        description="Create and process orders against the sample merchant server",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MERCHANT_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-order", help="Create an order")
    create.add_argument("--intent", choices=("capture", "authorize"), default="capture")
    create.add_argument("--amount", default="10.00", help="Order total (default: 10.00)")
    create.add_argument("--currency", default="USD", help="ISO currency code (default: USD)")
    create.add_argument(
        "--with-token",
        action="store_true",
        help="Fetch an access token first and send it as a bearer token",
    )

    process = commands.add_parser("process-order", help="Capture or authorize an order")
    process.add_argument("order_id")
    process.add_argument("--intent", choices=("capture", "authorize"), default="capture")
    process.add_argument("--country-code", default=None)
    process.add_argument("--with-token", action="store_true")

    token = commands.add_parser("access-token", help="Fetch and print an access token")
    token.add_argument("--environment", choices=("sandbox", "live"), default=None)

    button = commands.add_parser("button", help="Print the presentation of a payment button")
    button.add_argument("--funding-source", choices=_choices(FundingSource), default="paypal")
    button.add_argument("--color", choices=_choices(ButtonColor), default="gold")
    button.add_argument(
        "--edges",
        default="soft",
        help="hard, soft, rounded or a corner radius in points (default: soft)",
    )
    button.add_argument("--size", choices=_choices(ButtonSize), default="collapsed")
    button.add_argument("--label", choices=_choices(ButtonLabel), default=None)
    button.add_argument("--width", type=float, default=None)
    button.add_argument("--height", type=float, default=None)
    return parser


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _print_order(order: Order) -> None:
    _print_json(order.raw or {"id": order.id, "status": order.status})


def _bearer(client: MerchantAPIClient, wanted: bool) -> Optional[str]:
    if not wanted:
        return None
    token = client.get_access_token()
    if token is None:
        logging.warning("No access token available; sending the request without one")
    return token


def _run_create_order(client: MerchantAPIClient, args: argparse.Namespace) -> int:
    params = CreateOrderParams(
        intent=args.intent.upper(),
        purchase_units=[PurchaseUnit(amount=Amount(currency_code=args.currency, value=args.amount))],
        application_context=ApplicationContext(user_action="PAY_NOW"),
    )
    order = client.create_order(params, access_token=_bearer(client, args.with_token))
    logging.info("Created order %s with status %s", order.id, order.status)
    _print_order(order)
    return 0


def _run_process_order(client: MerchantAPIClient, args: argparse.Namespace) -> int:
    params = ProcessOrderParams(
        order_id=args.order_id,
        intent=args.intent,
        country_code=args.country_code,
    )
    order = client.process_order(params, access_token=_bearer(client, args.with_token))
    logging.info("Order %s is now %s", order.id, order.status)
    _print_order(order)
    return 0


def _run_access_token(client: MerchantAPIClient, args: argparse.Namespace) -> int:
    token = client.get_access_token(args.environment)
    if token is None:
        logging.error("Could not obtain an access token")
        return 1
    print(token)
    return 0


def _run_button(args: argparse.Namespace) -> int:
    try:
        button = PaymentButton(
            funding_source=args.funding_source,
            color=args.color,
            edges=args.edges,
            size=args.size,
            label=args.label,
        )
    except ValueError as exc:
        logging.error("Invalid button configuration: %s", exc)
        return 1

    output: dict[str, Any] = {"presentation": button.presentation.as_dict()}
    if args.width is not None and args.height is not None:
        try:
            output["layout"] = asdict(button.layout(args.width, args.height))
        except ValueError as exc:
            logging.error("Invalid button bounds: %s", exc)
            return 1
    _print_json(output)
    return 0


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.command == "button":
        return _run_button(args)

    overrides = _collect_overrides(args.set or ())
    try:
        config = load_merchant_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_merchant_client(config=config)
    handlers = {
        "create-order": _run_create_order,
        "process-order": _run_process_order,
        "access-token": _run_access_token,
    }
    try:
        return handlers[args.command](client, args)
    except MerchantAPIError as exc:
        logging.error("%s failed: %s", args.command, exc)
        return 1


def main() -> None:
    sys.exit(run_cli())
