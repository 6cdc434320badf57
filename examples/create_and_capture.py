"""
Minimal script that uses the public API to create and capture an order.
"""

from __future__ import annotations

import argparse
import logging
import sys

from merchant_sandbox import (
    Amount,
    ConfigError,
    CreateOrderParams,
    MerchantAPIError,
    ProcessOrderParams,
    PurchaseUnit,
    create_merchant_client,
    load_merchant_config,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create and capture an order on the sample server")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MERCHANT_* settings",
    )
    parser.add_argument(
        "--environment",
        choices=("sandbox", "live"),
        help="Override MERCHANT_ENVIRONMENT",
    )
    parser.add_argument("--amount", default="10.00", help="Order total (default: 10.00)")
    parser.add_argument("--currency", default="USD", help="ISO currency code (default: USD)")
    parser.add_argument(
        "--authorize",
        action="store_true",
        help="Authorize the order instead of capturing it",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_merchant_config(env_file=args.env_file, environment=args.environment)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_merchant_client(config=config)
    intent = "authorize" if args.authorize else "capture"
    token = client.get_access_token()
    if token is None:
        logging.warning("Continuing without an access token")

    try:
        order = client.create_order(
            CreateOrderParams(
                intent=intent.upper(),
                purchase_units=[
                    PurchaseUnit(amount=Amount(currency_code=args.currency, value=args.amount))
                ],
            ),
            access_token=token,
        )
        logging.info("Created order %s (%s)", order.id, order.status)

        processed = client.process_order(
            ProcessOrderParams(order_id=order.id, intent=intent),
            access_token=token,
        )
    except MerchantAPIError as exc:
        logging.error("Order flow failed: %s", exc)
        return 1

    logging.info("Order %s is now %s", processed.id, processed.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
