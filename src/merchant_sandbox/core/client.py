"""
HTTP client for the sample merchant server.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

import requests

from .config import ConfigError, DemoEnvironment, MerchantConfig
from .errors import InvalidURLError, NetworkError, ParsingError, ServerError
from .payloads import (
    AccessTokenRequest,
    AccessTokenResponse,
    CheckoutOrderRequest,
    CreateOrderParams,
    Order,
    ProcessOrderParams,
    encode_body,
)
from .tokens import AccessTokenProvider, RefreshPolicy

__all__ = ["MerchantAPIClient", "build_url"]

OrderPayload = Union[CreateOrderParams, CheckoutOrderRequest]


def build_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path``; raise :class:`InvalidURLError` if the result is unusable."""
    url = base_url + path
    try:
        parts = urlsplit(url)
        # raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError as exc:
        raise InvalidURLError(f"Malformed URL '{url}': {exc}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc or " " in url:
        raise InvalidURLError(f"Malformed URL '{url}'")
    return url


def _decode_json(response: Any, url: str) -> Any:
    try:
        return json.loads(response.content)
    except (TypeError, ValueError) as exc:
        raise ParsingError(f"Failed to parse JSON from {url}: {response.text}") from exc


def _send(
    session: requests.Session,
    method: str,
    url: str,
    *,
    data: Optional[bytes] = None,
    headers: Mapping[str, str],
    timeout: Optional[float],
) -> Any:
    try:
        response = session.request(method, url, data=data, headers=dict(headers), timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"Request to {url} failed: {exc}") from exc

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int):
        raise ServerError(f"No HTTP response received from {url}")
    if not 200 <= status_code < 300:
        raise NetworkError(
            f"Merchant server responded with {status_code}: {response.text}",
            status_code=status_code,
            body=response.text,
        )
    return response


class MerchantAPIClient:
    """
    Create and process orders on the sample merchant server.

    Each call issues a single request; failures are raised as
    :class:`~merchant_sandbox.core.errors.MerchantAPIError` subclasses,
    except :meth:`get_access_token`, which logs them and returns ``None``.
    """

    def __init__(
        self,
        config: MerchantConfig,
        *,
        session: Optional[requests.Session] = None,
        refresh_policy: Optional[RefreshPolicy] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        if refresh_policy is None:
            refresh_policy = RefreshPolicy(max_age=config.token_max_age_seconds)
        self.refresh_policy = refresh_policy
        self._token_providers: Dict[DemoEnvironment, AccessTokenProvider] = {}

    def create_order(
        self,
        params: OrderPayload,
        *,
        access_token: Optional[str] = None,
    ) -> Order:
        """
        Create an order from either :class:`CreateOrderParams` or a
        :class:`CheckoutOrderRequest`. Both shapes go to ``/orders``.
        """
        url = build_url(self.config.base_url, "/orders")
        payload = self._post_json(url, params, access_token=access_token)
        return Order.from_response(payload)

    def process_order(
        self,
        params: ProcessOrderParams,
        *,
        access_token: Optional[str] = None,
    ) -> Order:
        """Capture or authorize an order via ``/{intent}-order``."""
        url = build_url(self.config.base_url, params.endpoint)
        payload = self._post_json(url, params, access_token=access_token)
        return Order.from_response(payload)

    def get_access_token(
        self,
        environment: Optional[DemoEnvironment | str] = None,
    ) -> Optional[str]:
        """
        Return a cached access token for ``environment`` or fetch a new one.

        Fetch failures, including an unknown ``environment``, are logged and
        reported as ``None``.
        """
        if environment is None:
            target = self.config.environment
        else:
            try:
                target = DemoEnvironment.parse(environment)
            except ConfigError as exc:
                logging.error("Error in fetching access token: %s", exc)
                return None
        return self.token_provider(target).get()

    def token_provider(self, environment: DemoEnvironment) -> AccessTokenProvider:
        provider = self._token_providers.get(environment)
        if provider is None:
            provider = self._token_providers.setdefault(
                environment,
                AccessTokenProvider(
                    lambda: self._fetch_access_token(environment),
                    refresh_policy=self.refresh_policy,
                ),
            )
        return provider

    def _post_json(
        self,
        url: str,
        body: Any,
        *,
        access_token: Optional[str] = None,
    ) -> Any:
        headers = {"Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        encoded = json.dumps(encode_body(body))
        logging.info("POST %s", url)
        logging.debug("Request body: %s", encoded)

        response = _send(
            self.session,
            "POST",
            url,
            data=encoded.encode("utf-8"),
            headers=headers,
            timeout=self.config.timeout_seconds,
        )
        return _decode_json(response, url)

    def _fetch_access_token(
        self,
        environment: DemoEnvironment,
    ) -> Optional[AccessTokenResponse]:
        token_request = AccessTokenRequest.for_config(self.config)
        try:
            url = build_url(self.config.token_base_url_for(environment), token_request.path)
            logging.info("Fetching access token from %s", url)
            response = _send(
                self.session,
                token_request.method,
                url,
                data=token_request.body,
                headers=token_request.headers,
                timeout=self.config.timeout_seconds,
            )
            return AccessTokenResponse.from_response(_decode_json(response, url))
        except Exception as exc:  # noqa: BLE001
            logging.error("Error in fetching access token: %s", exc)
            return None
