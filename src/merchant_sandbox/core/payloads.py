"""
Request and response payloads exchanged with the sample merchant server.

Request bodies are encoded with :func:`encode_body`, which turns dataclasses
and mappings into JSON-ready dictionaries with snake_case keys and drops
fields that are ``None``.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config import MerchantConfig
from .errors import ParsingError

__all__ = [
    "AccessTokenRequest",
    "AccessTokenResponse",
    "Amount",
    "ApplicationContext",
    "CheckoutOrderRequest",
    "CreateOrderParams",
    "Order",
    "OrderIntent",
    "Payee",
    "Payer",
    "ProcessOrderParams",
    "PurchaseUnit",
    "encode_body",
    "to_snake_case",
]

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    Capital runs count as one word (``orderID`` -> ``order_id``,
    ``myURLValue`` -> ``my_url_value``). Leading and trailing underscores
    are kept as they are.
    """
    core = key.strip("_")
    if not core:
        return key
    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")):]
    words = _ACRONYM_BOUNDARY.sub(r"\1_\2", core)
    words = _WORD_BOUNDARY.sub(r"\1_\2", words)
    return leading + words.lower() + trailing


def encode_body(value: Any) -> Any:
    """Return a JSON-ready copy of ``value`` with snake_case keys and no ``None`` fields."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {
            to_snake_case(str(key)): encode_body(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode_body(item) for item in value]
    return value


class OrderIntent(str, Enum):
    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"

    @property
    def path_segment(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class Amount:
    currency_code: str
    value: str


@dataclass(frozen=True)
class Payee:
    merchant_id: Optional[str] = None
    email_address: Optional[str] = None


@dataclass(frozen=True)
class PurchaseUnit:
    amount: Amount
    reference_id: Optional[str] = None
    payee: Optional[Payee] = None


@dataclass(frozen=True)
class ApplicationContext:
    user_action: Optional[str] = None
    shipping_preference: Optional[str] = None
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None


@dataclass(frozen=True)
class CreateOrderParams:
    """Order payload in the shape the sample merchant server expects."""

    intent: str
    purchase_units: Optional[List[PurchaseUnit]] = None
    application_context: Optional[ApplicationContext] = None


@dataclass(frozen=True)
class Payer:
    email_address: Optional[str] = None
    payer_id: Optional[str] = None


@dataclass(frozen=True)
class CheckoutOrderRequest:
    """
    Order payload in the shape produced by a native checkout flow.

    Posted to the same ``/orders`` endpoint as :class:`CreateOrderParams`.
    """

    intent: OrderIntent
    purchase_units: Sequence[PurchaseUnit]
    payer: Optional[Payer] = None
    application_context: Optional[ApplicationContext] = None
    processing_instruction: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.purchase_units:
            raise ValueError("A checkout order needs at least one purchase unit")
        if not isinstance(self.intent, OrderIntent):
            object.__setattr__(self, "intent", OrderIntent(str(self.intent).upper()))
        object.__setattr__(self, "purchase_units", list(self.purchase_units))


@dataclass(frozen=True)
class ProcessOrderParams:
    """Capture or authorize an existing order; ``intent`` picks the endpoint."""

    order_id: str
    intent: str
    country_code: Optional[str] = None

    def __post_init__(self) -> None:
        intent = self.intent
        if isinstance(intent, OrderIntent):
            intent = intent.path_segment
        intent = str(intent).strip().lower()
        if not intent:
            raise ValueError("ProcessOrderParams.intent must not be empty")
        object.__setattr__(self, "intent", intent)

    @property
    def endpoint(self) -> str:
        return f"/{self.intent}-order"


@dataclass(frozen=True)
class Order:
    id: str
    status: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_response(cls, payload: Any) -> "Order":
        if not isinstance(payload, dict):
            raise ParsingError(f"Expected an order object, got {type(payload).__name__}")
        order_id = payload.get("id")
        status = payload.get("status")
        if not isinstance(order_id, str) or not isinstance(status, str):
            raise ParsingError("Order response is missing 'id' or 'status'")
        return cls(id=order_id, status=status, raw=payload)


@dataclass(frozen=True)
class AccessTokenRequest:
    method: str = "POST"
    path: str = "/v1/oauth2/token"
    body: bytes = b"grant_type=client_credentials"
    headers: Mapping[str, str] = field(
        default_factory=lambda: {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
            "Accept-Language": "en_US",
        }
    )

    @classmethod
    def for_config(cls, config: MerchantConfig) -> "AccessTokenRequest":
        request = cls(path=config.token_path)
        authorization = config.basic_authorization()
        if authorization is None:
            return request
        headers = dict(request.headers)
        headers["Authorization"] = authorization
        return dataclasses.replace(request, headers=headers)


@dataclass(frozen=True)
class AccessTokenResponse:
    access_token: str
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    app_id: Optional[str] = None
    nonce: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "AccessTokenResponse":
        if not isinstance(payload, dict):
            raise ParsingError("Access token response is not a JSON object")
        token = payload.get("access_token")
        if not isinstance(token, str) or not token:
            raise ParsingError("Access token response is missing 'access_token'")
        expires_in = payload.get("expires_in")
        if expires_in is not None:
            try:
                expires_in = int(expires_in)
            except (TypeError, ValueError) as exc:
                raise ParsingError(f"Invalid 'expires_in': {expires_in!r}") from exc
        return cls(
            access_token=token,
            token_type=payload.get("token_type") or "Bearer",
            expires_in=expires_in,
            scope=payload.get("scope"),
            app_id=payload.get("app_id"),
            nonce=payload.get("nonce"),
        )
