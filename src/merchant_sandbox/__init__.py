"""
Public facade for the merchant sandbox toolkit.

Re-exports the order client (:mod:`merchant_sandbox.core`) and the payment
button model (:mod:`merchant_sandbox.ui`) so integrators can
``from merchant_sandbox import ...`` without navigating the package.
"""

from .api import (
    create_merchant_client,
    create_order,
    get_access_token,
    process_order,
    reset_shared_client,
    shared_client,
)
from .core import (
    AccessTokenProvider,
    Amount,
    ApplicationContext,
    CheckoutOrderRequest,
    ConfigError,
    CreateOrderParams,
    DemoEnvironment,
    InvalidURLError,
    MerchantAPIClient,
    MerchantAPIError,
    MerchantConfig,
    MerchantParameters,
    NetworkError,
    Order,
    OrderIntent,
    ParsingError,
    ProcessOrderParams,
    PurchaseUnit,
    RefreshPolicy,
    ServerError,
    load_merchant_config,
)
from .ui import (
    ButtonColor,
    ButtonEdges,
    ButtonLabel,
    ButtonSize,
    EdgeInsets,
    FundingSource,
    PaymentButton,
    derive_presentation,
)

__all__ = (
    "AccessTokenProvider",
    "Amount",
    "ApplicationContext",
    "ButtonColor",
    "ButtonEdges",
    "ButtonLabel",
    "ButtonSize",
    "CheckoutOrderRequest",
    "ConfigError",
    "CreateOrderParams",
    "DemoEnvironment",
    "EdgeInsets",
    "FundingSource",
    "InvalidURLError",
    "MerchantAPIClient",
    "MerchantAPIError",
    "MerchantConfig",
    "MerchantParameters",
    "NetworkError",
    "Order",
    "OrderIntent",
    "ParsingError",
    "PaymentButton",
    "ProcessOrderParams",
    "PurchaseUnit",
    "RefreshPolicy",
    "ServerError",
    "create_merchant_client",
    "create_order",
    "derive_presentation",
    "get_access_token",
    "load_merchant_config",
    "process_order",
    "reset_shared_client",
    "shared_client",
)
