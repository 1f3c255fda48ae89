"""
Theme Setup

Creates the metaobject and metafield definitions the theme depends on
through the Shopify Admin GraphQL API.
"""

from .definitions import (
    FieldType,
    FieldDefinition,
    MetaobjectDefinition,
    MetafieldDefinition,
    METAOBJECT_DEFINITIONS,
    METAFIELD_DEFINITIONS,
    validate_catalog,
)

from .shopify_tools import (
    Outcome,
    ShopifyError,
    ShopifyTransportError,
    ShopifyQueryError,
    DefinitionCreateError,
    execute_shopify_graphql,
    is_duplicate_metaobject_error,
    is_duplicate_metafield_error,
    ensure_metaobject,
    ensure_metafield,
)

from .provisioner import provision_definitions

__all__ = [
    # Catalog
    "FieldType",
    "FieldDefinition",
    "MetaobjectDefinition",
    "MetafieldDefinition",
    "METAOBJECT_DEFINITIONS",
    "METAFIELD_DEFINITIONS",
    "validate_catalog",
    # Shopify API
    "Outcome",
    "ShopifyError",
    "ShopifyTransportError",
    "ShopifyQueryError",
    "DefinitionCreateError",
    "execute_shopify_graphql",
    "is_duplicate_metaobject_error",
    "is_duplicate_metafield_error",
    "ensure_metaobject",
    "ensure_metafield",
    # Orchestration
    "provision_definitions",
]
