"""
Public, high-level helpers for talking to the sample merchant server.
"""

from __future__ import annotations

import threading
from typing import Mapping, Optional, Union

import requests

from .core.client import MerchantAPIClient
from .core.config import (
    DemoEnvironment,
    MerchantConfig,
    MerchantParameters,
    load_merchant_config,
)
from .core.payloads import (
    CheckoutOrderRequest,
    CreateOrderParams,
    Order,
    ProcessOrderParams,
)

__all__ = [
    "create_merchant_client",
    "create_order",
    "get_access_token",
    "process_order",
    "reset_shared_client",
    "shared_client",
]

_shared_lock = threading.Lock()
_shared: Optional[MerchantAPIClient] = None


def create_merchant_client(
    *,
    config: Optional[MerchantConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[MerchantParameters] = None,
    environment: Optional[DemoEnvironment | str] = None,
    base_url: Optional[str] = None,
    token_base_url: Optional[str] = None,
    token_path: Optional[str] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
    token_max_age_seconds: Optional[float | str] = None,
) -> MerchantAPIClient:
    """
    Construct a :class:`MerchantAPIClient`.

    Pass either a ready-made :class:`MerchantConfig` or the settings to build
    one from, not both.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            environment,
            base_url,
            token_base_url,
            token_path,
            client_id,
            client_secret,
            timeout_seconds,
            token_max_age_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built MerchantConfig or individual settings, not both."
            )
        cfg = config
    else:
        cfg = load_merchant_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            environment=environment,
            base_url=base_url,
            token_base_url=token_base_url,
            token_path=token_path,
            client_id=client_id,
            client_secret=client_secret,
            timeout_seconds=timeout_seconds,
            token_max_age_seconds=token_max_age_seconds,
        )
    return MerchantAPIClient(cfg, session=session)


def shared_client() -> MerchantAPIClient:
    """
    Process-wide client built from the environment on first use.

    Its access token cache is shared by every caller in the process.
    """
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = create_merchant_client()
        return _shared


def reset_shared_client(client: Optional[MerchantAPIClient] = None) -> None:
    """Drop (or replace) the process-wide client, e.g. between tests."""
    global _shared
    with _shared_lock:
        _shared = client


def create_order(
    params: Union[CreateOrderParams, CheckoutOrderRequest],
    *,
    access_token: Optional[str] = None,
) -> Order:
    return shared_client().create_order(params, access_token=access_token)


def process_order(
    params: ProcessOrderParams,
    *,
    access_token: Optional[str] = None,
) -> Order:
    return shared_client().process_order(params, access_token=access_token)


def get_access_token(environment: Optional[DemoEnvironment | str] = None) -> Optional[str]:
    return shared_client().get_access_token(environment)
