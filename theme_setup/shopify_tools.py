"""
Shopify Tools - Admin GraphQL helpers for creating theme definitions

This module provides:
1. Shopify GraphQL API request execution
2. Error types for transport, query and user-level failures
3. Duplicate detection for "already exists" responses
4. Create-or-ignore operations for metaobject and metafield definitions
"""

import asyncio
import json
import re
import sys
from enum import Enum
from typing import Callable, Optional
import aiohttp

from config import ShopifyConfig
from theme_setup.definitions import MetafieldDefinition, MetaobjectDefinition


# =============================================================================
# ERRORS
# =============================================================================

class ShopifyError(RuntimeError):
    """Base class for fatal Shopify API failures."""


class ShopifyTransportError(ShopifyError):
    """Non-success HTTP status or network failure."""

    def __init__(self, message: str, status: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.reason = reason


class ShopifyQueryError(ShopifyError):
    """Top-level GraphQL errors array in the response."""

    def __init__(self, errors: list):
        super().__init__(json.dumps(errors))
        self.errors = errors


class DefinitionCreateError(ShopifyError):
    """A definition mutation returned user errors that are not duplicates."""

    def __init__(self, message: str, label: str, user_errors: list):
        super().__init__(message)
        self.label = label
        self.user_errors = user_errors


class Outcome(str, Enum):
    """Result of a definition create that did not fail."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


# =============================================================================
# SHOPIFY GRAPHQL API HELPERS
# =============================================================================

async def execute_shopify_graphql(
    session: aiohttp.ClientSession,
    config: ShopifyConfig,
    query: str,
    variables: dict = None,
) -> dict:
    """
    Execute a GraphQL query against Shopify Admin API.

    Args:
        session: Open aiohttp session shared across the run
        config: Store connection parameters
        query: GraphQL query string
        variables: Query variables dict

    Returns:
        The response "data" payload

    Raises:
        ShopifyTransportError: on a non-2xx status or network failure
        ShopifyQueryError: if the response carries top-level errors
    """
    payload = {"query": query, "variables": variables or {}}

    try:
        async with session.post(
            config.graphql_url,
            headers=config.headers(),
            json=payload,
            timeout=aiohttp.ClientTimeout(total=config.request_timeout)
        ) as resp:
            if not 200 <= resp.status < 300:
                raise ShopifyTransportError(
                    f"GraphQL request failed: {resp.status} {resp.reason or ''}".rstrip(),
                    status=resp.status,
                    reason=resp.reason,
                )
            result = await resp.json()

    except aiohttp.ClientError as e:
        raise ShopifyTransportError(f"Network error: {e}") from e
    except asyncio.TimeoutError as e:
        raise ShopifyTransportError(f"Request timed out after {config.request_timeout}s") from e

    # Check for top-level errors
    if result.get("errors"):
        raise ShopifyQueryError(result["errors"])

    return result.get("data") or {}


# =============================================================================
# DUPLICATE DETECTION
# =============================================================================

# Shopify wording, matched only when the error carries no usable code
METAOBJECT_DUPLICATE_PATTERN = re.compile(r"type.*already exists", re.IGNORECASE)
METAFIELD_DUPLICATE_PATTERN = re.compile(r"definition.*already exists", re.IGNORECASE)

DUPLICATE_ERROR_CODE = "TAKEN"


def _is_duplicate(user_error: dict, pattern: re.Pattern) -> bool:
    if user_error.get("code") == DUPLICATE_ERROR_CODE:
        return True
    message = user_error.get("message")
    return isinstance(message, str) and bool(pattern.search(message))


def is_duplicate_metaobject_error(user_error: dict) -> bool:
    """True if a metaobjectDefinitionCreate user error means the type already exists."""
    return _is_duplicate(user_error, METAOBJECT_DUPLICATE_PATTERN)


def is_duplicate_metafield_error(user_error: dict) -> bool:
    """True if a metafieldDefinitionCreate user error means the definition already exists."""
    return _is_duplicate(user_error, METAFIELD_DUPLICATE_PATTERN)


# =============================================================================
# DEFINITION MUTATIONS
# =============================================================================

METAOBJECT_DEFINITION_CREATE = """
mutation MetaobjectDefinitionCreate($definition: MetaobjectDefinitionCreateInput!) {
    metaobjectDefinitionCreate(definition: $definition) {
        metaobjectDefinition { id }
        userErrors { field message code }
    }
}
"""

METAFIELD_DEFINITION_CREATE = """
mutation MetafieldDefinitionCreate($definition: MetafieldDefinitionInput!) {
    metafieldDefinitionCreate(definition: $definition) {
        createdDefinition { id }
        userErrors { field message code }
    }
}
"""


async def _ensure_definition(
    session: aiohttp.ClientSession,
    config: ShopifyConfig,
    mutation: str,
    root_field: str,
    definition_input: dict,
    kind: str,
    label: str,
    is_duplicate: Callable[[dict], bool],
) -> Outcome:
    data = await execute_shopify_graphql(session, config, mutation, {"definition": definition_input})

    result = data.get(root_field)
    if not isinstance(result, dict):
        raise ShopifyError(f"{kind} {label}: response has no {root_field} payload")
    user_errors = result.get("userErrors") or []

    if not user_errors:
        return Outcome.CREATED

    non_dupe_errors = [e for e in user_errors if not is_duplicate(e)]
    if non_dupe_errors:
        print(
            f"{kind} {label} creation errors:\n{json.dumps(non_dupe_errors, indent=2)}",
            file=sys.stderr,
        )
        raise DefinitionCreateError(f"{kind} {label} creation failed", label, non_dupe_errors)

    return Outcome.ALREADY_EXISTS


async def ensure_metaobject(
    session: aiohttp.ClientSession,
    config: ShopifyConfig,
    definition: MetaobjectDefinition,
) -> Outcome:
    """
    Create a metaobject definition unless its type already exists.

    Returns:
        Outcome.CREATED or Outcome.ALREADY_EXISTS

    Raises:
        ShopifyError: on any failure other than a duplicate type
    """
    return await _ensure_definition(
        session,
        config,
        METAOBJECT_DEFINITION_CREATE,
        "metaobjectDefinitionCreate",
        definition.to_input(),
        "Metaobject",
        definition.label,
        is_duplicate_metaobject_error,
    )


async def ensure_metafield(
    session: aiohttp.ClientSession,
    config: ShopifyConfig,
    definition: MetafieldDefinition,
) -> Outcome:
    """
    Create a metafield definition unless namespace/key already exist for the owner type.

    Returns:
        Outcome.CREATED or Outcome.ALREADY_EXISTS

    Raises:
        ShopifyError: on any failure other than a duplicate definition
    """
    return await _ensure_definition(
        session,
        config,
        METAFIELD_DEFINITION_CREATE,
        "metafieldDefinitionCreate",
        definition.to_input(),
        "Metafield",
        definition.label,
        is_duplicate_metafield_error,
    )
