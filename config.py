"""
Configuration for the theme definition provisioner

Environment variables and settings for creating metaobject and metafield
definitions through the Shopify Admin GraphQL API.
See .env.example for all available options.
"""
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

load_dotenv()

# ===========================================
# Environment Variable Names
# ===========================================
# Shopify store name (the part before .myshopify.com)
SHOPIFY_STORE_VAR = "SHOPIFY_STORE"

# Admin API access token (custom app token, starts with shpat_)
SHOPIFY_ADMIN_ACCESS_TOKEN_VAR = "SHOPIFY_ADMIN_ACCESS_TOKEN"

# Shopify Admin API version (e.g. 2024-07)
SHOPIFY_API_VERSION_VAR = "SHOPIFY_API_VERSION"

# Total timeout per GraphQL request in seconds
SHOPIFY_REQUEST_TIMEOUT_VAR = "SHOPIFY_REQUEST_TIMEOUT"

REQUIRED_VARS = (
    SHOPIFY_STORE_VAR,
    SHOPIFY_ADMIN_ACCESS_TOKEN_VAR,
    SHOPIFY_API_VERSION_VAR,
)

DEFAULT_REQUEST_TIMEOUT = 30.0

MYSHOPIFY_SUFFIX = ".myshopify.com"


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, message: str, missing: Optional[list] = None):
        super().__init__(message)
        self.missing = missing or []


# ===========================================
# Shopify Connection
# ===========================================
@dataclass(frozen=True)
class ShopifyConfig:
    """Connection parameters for a single provisioning run."""

    store: str
    access_token: str
    api_version: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def shop_domain(self) -> str:
        return f"{self.store}{MYSHOPIFY_SUFFIX}"

    @property
    def graphql_url(self) -> str:
        """Get the Shopify GraphQL Admin API URL."""
        return f"https://{self.shop_domain}/admin/api/{self.api_version}/graphql.json"

    def headers(self) -> dict:
        """Get headers for Shopify Admin API calls"""
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.access_token,
        }


def normalize_store(store: str) -> str:
    """
    Reduce a store identifier to its myshopify subdomain.

    Accepts "getqflex", "getqflex.myshopify.com" or
    "https://getqflex.myshopify.com/".
    """
    store = store.strip().lower()
    for prefix in ("https://", "http://"):
        if store.startswith(prefix):
            store = store[len(prefix):]
    store = store.rstrip("/")
    if store.endswith(MYSHOPIFY_SUFFIX):
        store = store[: -len(MYSHOPIFY_SUFFIX)]
    return store


# ===========================================
# Validation
# ===========================================
def load_config(environ: Optional[Mapping[str, str]] = None) -> ShopifyConfig:
    """
    Build the connection config from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        ShopifyConfig ready to pass to the provisioner

    Raises:
        ConfigError: if any required variable is missing or the timeout is invalid
    """
    if environ is None:
        environ = os.environ

    missing = [name for name in REQUIRED_VARS if not environ.get(name, "").strip()]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}\n"
            "Please copy .env.example to .env and fill in your values.",
            missing=missing,
        )

    raw_timeout = environ.get(SHOPIFY_REQUEST_TIMEOUT_VAR, "").strip()
    timeout = DEFAULT_REQUEST_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(
                f"{SHOPIFY_REQUEST_TIMEOUT_VAR} must be a number of seconds, got {raw_timeout!r}"
            )
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(
                f"{SHOPIFY_REQUEST_TIMEOUT_VAR} must be a positive finite number, got {raw_timeout!r}"
            )

    return ShopifyConfig(
        store=normalize_store(environ[SHOPIFY_STORE_VAR]),
        access_token=environ[SHOPIFY_ADMIN_ACCESS_TOKEN_VAR].strip(),
        api_version=environ[SHOPIFY_API_VERSION_VAR].strip(),
        request_timeout=timeout,
    )
