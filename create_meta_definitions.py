#!/usr/bin/env python3
"""
Theme Definition Setup

Creates the metaobject definitions and product metafield definitions used by
the QFlex theme via the Shopify Admin GraphQL API. Safe to run repeatedly:
definitions that already exist are left alone. Exits non-zero if any
unrecoverable error occurred.

Required environment variables:
    SHOPIFY_STORE               your *.myshopify.com subdomain (e.g. getqflex)
    SHOPIFY_ADMIN_ACCESS_TOKEN  an Admin API access token
    SHOPIFY_API_VERSION         the API version to target (e.g. 2024-07)

Usage:
    python create_meta_definitions.py              # Ensure all definitions
    python create_meta_definitions.py --verbose    # Show each outcome
    python create_meta_definitions.py --list       # Print the catalog only
"""

import asyncio
import argparse
import sys

from config import ConfigError, load_config
from theme_setup.definitions import METAFIELD_DEFINITIONS, METAOBJECT_DEFINITIONS
from theme_setup.provisioner import provision_definitions
from theme_setup.shopify_tools import ShopifyError


def print_catalog() -> None:
    """Print the definitions this script manages."""
    print("Metaobject definitions:")
    for definition in METAOBJECT_DEFINITIONS:
        print(f"  {definition.type} ({definition.name})")
        for f in definition.fields:
            required = "required" if f.required else "optional"
            print(f"    - {f.key}: {f.type.value} [{required}]")

    print("\nMetafield definitions:")
    for definition in METAFIELD_DEFINITIONS:
        print(f"  {definition.owner_type} {definition.label}: {definition.type.value}")


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Create the theme's Shopify metaobject and metafield definitions",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the outcome of each definition"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the definition catalog and exit without contacting Shopify"
    )

    args = parser.parse_args(argv)

    if args.list:
        print_catalog()
        return

    # Validate configuration
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(provision_definitions(config, verbose=args.verbose))
    except (ShopifyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("Metaobject and metafield definitions ensured.")


if __name__ == "__main__":
    main()
