"""
Configuration for the booking gateway.

Settings are plain frozen dataclasses passed explicitly into the client.
Only ``load_settings`` touches the process environment (and the optional
.env file); it is meant to be called once, at the application's
composition root.
"""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DUFFEL_API_URL = "https://api.duffel.com"
DUFFEL_API_VERSION = "v2"
DEFAULT_USER_AGENT = "TravalSearch/1.0"
DEFAULT_ORDER_SOURCE = "YourTravelSearch"

TOKEN_ENV_VARS = ("DUFFEL_API_TOKEN", "DUFFEL_ACCESS_TOKEN")


@dataclass(frozen=True)
class DuffelSettings:
    """
    Connection settings for the Duffel API.

    Attributes:
        api_token: Bearer token. Empty means every authenticated call
            fails with a configuration error.
        base_url: Upstream host, without trailing slash.
        api_version: Value sent in the ``Duffel-Version`` header.
        user_agent: Value sent in the ``User-Agent`` header.
        request_timeout_s: Per-request timeout in seconds. None disables
            timeouts; callers impose deadlines themselves.
        order_source: ``metadata.source`` attached to orders that carry
            no metadata of their own.
    """

    api_token: str = ""
    base_url: str = DUFFEL_API_URL
    api_version: str = DUFFEL_API_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout_s: Optional[float] = None
    order_source: str = DEFAULT_ORDER_SOURCE

    @property
    def has_token(self) -> bool:
        return bool(self.api_token)


@dataclass(frozen=True)
class PricingConfig:
    """
    Business parameters of the offer pricing transform.

    The transform is ``base * (1 + markup_rate) / (1 - processing_fee_rate)``
    rounded half-up to ``quantum``.

    Attributes:
        markup_rate: Margin added on top of the upstream price.
        processing_fee_rate: Payment processor fee the price is grossed up for.
        quantum: Rounding step (cents).
    """

    markup_rate: Decimal = Decimal("0.02")
    processing_fee_rate: Decimal = Decimal("0.029")
    quantum: Decimal = Decimal("0.01")


DEFAULT_PRICING = PricingConfig()


def _read_token() -> str:
    for name in TOKEN_ENV_VARS:
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    return ""


def load_settings(
    api_token: Optional[str] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> DuffelSettings:
    """
    Build settings from explicit values and the environment.

    Loads ``env_file`` (or a .env found from the working directory) without
    overriding variables that are already set, then reads:

    - ``DUFFEL_API_TOKEN`` (or ``DUFFEL_ACCESS_TOKEN``)
    - ``DUFFEL_API_URL``
    - ``DUFFEL_REQUEST_TIMEOUT`` (seconds)

    Args:
        api_token: Explicit token. Takes precedence over the environment.
        env_file: Optional path to a dotenv file.

    Returns:
        Frozen DuffelSettings.

    Raises:
        ValueError: If ``DUFFEL_REQUEST_TIMEOUT`` is not a number.
    """
    if env_file is not None:
        load_dotenv(dotenv_path=str(env_file))
    else:
        load_dotenv()

    token = (api_token or "").strip() or _read_token()
    if not token:
        logger.warning("DUFFEL_API_TOKEN not set - live API calls will fail")

    base_url = (os.getenv("DUFFEL_API_URL") or DUFFEL_API_URL).rstrip("/")

    timeout_raw = (os.getenv("DUFFEL_REQUEST_TIMEOUT") or "").strip()
    timeout = float(timeout_raw) if timeout_raw else None

    return DuffelSettings(
        api_token=token,
        base_url=base_url,
        request_timeout_s=timeout,
    )
