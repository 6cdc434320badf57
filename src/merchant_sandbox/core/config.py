"""
Configuration objects and helpers for the merchant sandbox client.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .environment import build_settings

__all__ = [
    "ConfigError",
    "DemoEnvironment",
    "MerchantConfig",
    "MerchantParameters",
    "load_merchant_config",
]

_PARAMETER_TO_ENV_KEY = {
    "environment": "MERCHANT_ENVIRONMENT",
    "base_url": "MERCHANT_BASE_URL",
    "token_base_url": "MERCHANT_TOKEN_BASE_URL",
    "token_path": "MERCHANT_TOKEN_PATH",
    "client_id": "MERCHANT_CLIENT_ID",
    "client_secret": "MERCHANT_CLIENT_SECRET",
    "timeout_seconds": "MERCHANT_TIMEOUT_SECONDS",
    "token_max_age_seconds": "MERCHANT_TOKEN_MAX_AGE_SECONDS",
}

DEFAULT_TOKEN_PATH = "/v1/oauth2/token"


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


class DemoEnvironment(str, Enum):
    """Deployment the sample merchant server runs in."""

    SANDBOX = "sandbox"
    LIVE = "live"

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self]

    @property
    def token_base_url(self) -> str:
        # The sample server proxies the OAuth endpoint on the same host.
        return _BASE_URLS[self]

    @classmethod
    def parse(cls, value: "DemoEnvironment | str") -> "DemoEnvironment":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "production":
            name = "live"
        try:
            return cls(name)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ConfigError(
                f"MERCHANT_ENVIRONMENT must be one of {choices}, got '{value}'"
            ) from exc


_BASE_URLS = {
    DemoEnvironment.SANDBOX: "https://ppcp-sample-merchant-sand.herokuapp.com",
    DemoEnvironment.LIVE: "https://ppcp-sample-merchant-prod.herokuapp.com",
}


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _optional_seconds(raw: Optional[str], field_name: str) -> Optional[float]:
    if raw is None:
        return None
    try:
        seconds = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be a number, got '{raw}'") from exc
    if seconds <= 0:
        raise ConfigError(f"{field_name} must be greater than zero")
    return seconds


@dataclass(frozen=True)
class MerchantParameters:
    """
    Explicit parameter bundle for constructing :class:`MerchantConfig`.

    Equivalent to passing the same keyword arguments to
    :func:`load_merchant_config`.
    """

    environment: Optional[DemoEnvironment | str] = None
    base_url: Optional[str] = None
    token_base_url: Optional[str] = None
    token_path: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    timeout_seconds: Optional[float | str] = None
    token_max_age_seconds: Optional[float | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


@dataclass(frozen=True)
class MerchantConfig:
    environment: DemoEnvironment = DemoEnvironment.SANDBOX
    base_url: str = _BASE_URLS[DemoEnvironment.SANDBOX]
    token_base_url: str = _BASE_URLS[DemoEnvironment.SANDBOX]
    token_path: str = DEFAULT_TOKEN_PATH
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    timeout_seconds: Optional[float] = None
    token_max_age_seconds: Optional[float] = None

    @property
    def has_client_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def basic_authorization(self) -> Optional[str]:
        """Return the ``Basic`` header value for the client credentials, if any."""
        if not self.has_client_credentials:
            return None
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def token_base_url_for(self, environment: DemoEnvironment) -> str:
        if environment is self.environment:
            return self.token_base_url
        return environment.token_base_url

    def for_environment(self, environment: DemoEnvironment | str) -> "MerchantConfig":
        """Copy of this config pointed at another environment's default hosts."""
        target = DemoEnvironment.parse(environment)
        if target is self.environment:
            return self
        return replace(
            self,
            environment=target,
            base_url=target.base_url,
            token_base_url=target.token_base_url,
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "MerchantConfig":
        def get(key: str) -> Optional[str]:
            value = values.get(key)
            if value is None or value.strip() == "":
                return None
            return value.strip()

        environment = DemoEnvironment.parse(get("MERCHANT_ENVIRONMENT") or "sandbox")
        base_url = (get("MERCHANT_BASE_URL") or environment.base_url).rstrip("/")
        token_base_url = (
            get("MERCHANT_TOKEN_BASE_URL") or environment.token_base_url
        ).rstrip("/")

        token_path = get("MERCHANT_TOKEN_PATH") or DEFAULT_TOKEN_PATH
        if not token_path.startswith("/"):
            token_path = "/" + token_path

        return cls(
            environment=environment,
            base_url=base_url,
            token_base_url=token_base_url,
            token_path=token_path,
            client_id=get("MERCHANT_CLIENT_ID"),
            client_secret=get("MERCHANT_CLIENT_SECRET"),
            timeout_seconds=_optional_seconds(
                get("MERCHANT_TIMEOUT_SECONDS"), "MERCHANT_TIMEOUT_SECONDS"
            ),
            token_max_age_seconds=_optional_seconds(
                get("MERCHANT_TOKEN_MAX_AGE_SECONDS"),
                "MERCHANT_TOKEN_MAX_AGE_SECONDS",
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[MerchantParameters] = None,
        **settings: Any,
    ) -> "MerchantConfig":
        unknown = set(settings) - set(_PARAMETER_TO_ENV_KEY)
        if unknown:
            raise TypeError(f"Unknown merchant setting(s): {', '.join(sorted(unknown))}")

        merged_overrides = dict(overrides or {})
        if parameters is not None:
            merged_overrides.update(parameters.as_overrides())
        for key, value in settings.items():
            if value is None:
                continue
            merged_overrides[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)

        source = build_settings(env_file=env_file, base=base, overrides=merged_overrides)
        return cls.from_mapping(source.variables)


def load_merchant_config(
    *,
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
) -> MerchantConfig:
    """
    Convenience wrapper that mirrors :meth:`MerchantConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three. Keyword arguments win.
    """
    return MerchantConfig.from_env(
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
