"""
Configuration for print_order_client.

Settings are resolved ONCE, when a client is constructed, and never re-read
per request. Environment variables (optionally from a .env file) are only a
fallback for values not passed explicitly.

Environment variables:
    PWINTY_MERCHANT_ID  - merchant identity header value
    PWINTY_API_KEY      - API key header value
    PWINTY_ENV          - "production" selects the live host, anything else sandbox
    PWINTY_BASE_URL     - explicit host override (takes precedence over PWINTY_ENV)
    PWINTY_TIMEOUT      - optional per-request timeout in seconds (unset = none)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .core.exceptions import ConfigurationError


PRODUCTION_API_URL = "https://api.pwinty.com"
SANDBOX_API_URL = "https://sandbox.pwinty.com"

ENV_PRODUCTION = "production"
ENV_SANDBOX = "sandbox"


def resolve_base_url(environment: str, override: Optional[str] = None) -> str:
    """
    Pick the API host for an environment.

    Args:
        environment: "production" or anything else (sandbox)
        override: Explicit host, used as-is when given

    Returns:
        Base URL without trailing slash
    """
    if override:
        return override.rstrip("/")
    if environment == ENV_PRODUCTION:
        return PRODUCTION_API_URL
    return SANDBOX_API_URL


@dataclass(frozen=True)
class ClientSettings:
    """
    Immutable client configuration.

    This is a FROZEN dataclass - a client captures one instance at
    construction and reuses it for every request. Concurrent requests can
    share it without locks.

    Missing credentials are allowed here. They are reported by
    require_credentials() when the first request is made.
    """

    base_url: str = SANDBOX_API_URL
    """API host, e.g. https://api.pwinty.com (paths carry the /v3.0 prefix)."""

    merchant_id: Optional[str] = None
    """Sent as the X-Pwinty-MerchantId header."""

    api_key: Optional[str] = None
    """Sent as the X-Pwinty-REST-API-Key header."""

    environment: str = ENV_SANDBOX
    """'production' or 'sandbox'."""

    timeout_seconds: Optional[float] = None
    """Timeout for per-call transports. None means the core enforces none."""

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "ClientSettings":
        """
        Build settings from the process environment.

        A .env file is loaded first (without overriding variables already
        set in the process), then the PWINTY_* variables are read.

        Args:
            env_file: Optional explicit path to a .env file

        Returns:
            ClientSettings instance

        Raises:
            ConfigurationError: If PWINTY_TIMEOUT is set but not a positive number
        """
        if env_file is not None:
            load_dotenv(dotenv_path=env_file, override=False)
        else:
            load_dotenv(override=False)

        environment = os.environ.get("PWINTY_ENV", ENV_SANDBOX).strip().lower()
        if environment != ENV_PRODUCTION:
            environment = ENV_SANDBOX

        timeout_raw = os.environ.get("PWINTY_TIMEOUT", "").strip()
        timeout_seconds = None
        if timeout_raw:
            try:
                timeout_seconds = float(timeout_raw)
            except ValueError as e:
                raise ConfigurationError(
                    ["timeout_seconds"],
                    message=f"Invalid PWINTY_TIMEOUT: {timeout_raw!r} is not a number of seconds",
                ) from e
            if timeout_seconds <= 0:
                raise ConfigurationError(
                    ["timeout_seconds"],
                    message=f"Invalid PWINTY_TIMEOUT: {timeout_raw!r} must be positive",
                )

        return cls(
            base_url=resolve_base_url(environment, os.environ.get("PWINTY_BASE_URL")),
            merchant_id=os.environ.get("PWINTY_MERCHANT_ID") or None,
            api_key=os.environ.get("PWINTY_API_KEY") or None,
            environment=environment,
            timeout_seconds=timeout_seconds,
        )

    @property
    def is_production(self) -> bool:
        """True when talking to the live service."""
        return self.environment == ENV_PRODUCTION

    def with_overrides(self, **overrides) -> "ClientSettings":
        """
        Return a copy with the given non-None fields replaced.

        Example:
            settings = ClientSettings.from_env().with_overrides(api_key="k")
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        if "base_url" in values:
            values["base_url"] = values["base_url"].rstrip("/")
        return replace(self, **values)

    def require_credentials(self) -> None:
        """
        Ensure everything needed for a request is present.

        Raises:
            ConfigurationError: If merchant id, API key or base URL is missing
        """
        missing = []
        if not self.base_url:
            missing.append("base_url")
        if not self.merchant_id:
            missing.append("merchant_id")
        if not self.api_key:
            missing.append("api_key")
        if missing:
            raise ConfigurationError(missing)
