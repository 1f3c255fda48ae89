"""
Provisioner - ensure the theme's definitions exist on the store

Definitions are created one at a time, metaobjects first, then metafields.
The first fatal error stops the run; nothing after it is attempted.
"""

from typing import Sequence
import aiohttp

from config import ShopifyConfig
from theme_setup.definitions import (
    METAFIELD_DEFINITIONS,
    METAOBJECT_DEFINITIONS,
    MetafieldDefinition,
    MetaobjectDefinition,
    validate_catalog,
)
from theme_setup.shopify_tools import Outcome, ensure_metafield, ensure_metaobject


async def provision_definitions(
    config: ShopifyConfig,
    metaobjects: Sequence[MetaobjectDefinition] = METAOBJECT_DEFINITIONS,
    metafields: Sequence[MetafieldDefinition] = METAFIELD_DEFINITIONS,
    verbose: bool = False,
) -> list:
    """
    Ensure every metaobject and metafield definition exists.

    Args:
        config: Store connection parameters
        metaobjects: Metaobject definitions, created in order
        metafields: Metafield definitions, created in order
        verbose: Print each definition's outcome

    Returns:
        List of (label, Outcome) tuples in request order

    Raises:
        ValueError: if the catalog has clashing identities
        ShopifyError: on the first non-duplicate failure
    """
    validate_catalog(metaobjects, metafields)

    results = []

    async with aiohttp.ClientSession() as session:
        for definition in metaobjects:
            outcome = await ensure_metaobject(session, config, definition)
            results.append((f"metaobject:{definition.label}", outcome))
            if verbose:
                _print_outcome("Metaobject", definition.label, outcome)

        for definition in metafields:
            outcome = await ensure_metafield(session, config, definition)
            results.append((f"metafield:{definition.label}", outcome))
            if verbose:
                _print_outcome("Metafield", definition.label, outcome)

    return results


def _print_outcome(kind: str, label: str, outcome: Outcome) -> None:
    if outcome is Outcome.CREATED:
        print(f"  [CREATED] {kind} {label}")
    else:
        print(f"  [EXISTS]  {kind} {label}")
