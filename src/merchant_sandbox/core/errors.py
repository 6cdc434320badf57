"""
Exceptions raised by the merchant API client.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "InvalidURLError",
    "MerchantAPIError",
    "NetworkError",
    "ParsingError",
    "ServerError",
]


class MerchantAPIError(Exception):
    """Base class for every failure surfaced by :class:`MerchantAPIClient`."""


class InvalidURLError(MerchantAPIError):
    """Raised when an endpoint URL cannot be built from the configuration."""


class NetworkError(MerchantAPIError):
    """Raised on transport failures and non-2xx responses."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParsingError(MerchantAPIError):
    """Raised when a response body does not match the expected shape."""


class ServerError(MerchantAPIError):
    """Raised when the transport hands back something that is not an HTTP response."""
