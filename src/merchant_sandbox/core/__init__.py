"""
Order API client for the sample merchant server.
"""

from .client import MerchantAPIClient, build_url
from .config import (
    ConfigError,
    DemoEnvironment,
    MerchantConfig,
    MerchantParameters,
    load_merchant_config,
)
from .environment import SettingsSource, build_settings, load_env_file
from .errors import (
    InvalidURLError,
    MerchantAPIError,
    NetworkError,
    ParsingError,
    ServerError,
)
from .payloads import (
    AccessTokenRequest,
    AccessTokenResponse,
    Amount,
    ApplicationContext,
    CheckoutOrderRequest,
    CreateOrderParams,
    Order,
    OrderIntent,
    Payee,
    Payer,
    ProcessOrderParams,
    PurchaseUnit,
    encode_body,
    to_snake_case,
)
from .tokens import AccessTokenProvider, CachedToken, RefreshPolicy

__all__ = [
    "AccessTokenProvider",
    "AccessTokenRequest",
    "AccessTokenResponse",
    "Amount",
    "ApplicationContext",
    "CachedToken",
    "CheckoutOrderRequest",
    "ConfigError",
    "CreateOrderParams",
    "DemoEnvironment",
    "InvalidURLError",
    "MerchantAPIClient",
    "MerchantAPIError",
    "MerchantConfig",
    "MerchantParameters",
    "NetworkError",
    "Order",
    "OrderIntent",
    "ParsingError",
    "Payee",
    "Payer",
    "ProcessOrderParams",
    "PurchaseUnit",
    "RefreshPolicy",
    "ServerError",
    "SettingsSource",
    "build_settings",
    "build_url",
    "encode_body",
    "load_env_file",
    "load_merchant_config",
    "to_snake_case",
]
