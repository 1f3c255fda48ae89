"""
Definition Catalog - metaobject and metafield definitions used by the theme

The QFlex theme reads these definitions from sections and snippets, so they
must exist on the store before the theme is previewed or tested.
"""

from dataclasses import dataclass, field
from enum import Enum


class FieldType(str, Enum):
    """Shopify metafield / metaobject field type names."""

    SINGLE_LINE_TEXT = "single_line_text_field"
    MULTI_LINE_TEXT = "multi_line_text_field"
    RICH_TEXT = "rich_text_field"
    FILE_REFERENCE = "file_reference"
    URL = "url"
    INTEGER = "number_integer"
    DECIMAL = "number_decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    COLOR = "color"
    JSON = "json"
    LIST_SINGLE_LINE_TEXT = "list.single_line_text_field"


@dataclass(frozen=True)
class FieldDefinition:
    key: str
    name: str
    description: str
    type: FieldType
    required: bool = False

    def to_input(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "required": self.required,
        }


@dataclass(frozen=True)
class MetaobjectDefinition:
    type: str
    name: str
    fields: tuple = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return self.type

    def to_input(self) -> dict:
        """Build a MetaobjectDefinitionCreateInput payload."""
        return {
            "name": self.name,
            "type": self.type,
            "fieldDefinitions": [f.to_input() for f in self.fields],
        }


@dataclass(frozen=True)
class MetafieldDefinition:
    namespace: str
    key: str
    name: str
    description: str
    type: FieldType
    owner_type: str = "PRODUCT"

    @property
    def label(self) -> str:
        return f"{self.namespace}.{self.key}"

    def to_input(self) -> dict:
        """Build a MetafieldDefinitionInput payload."""
        return {
            "name": self.name,
            "namespace": self.namespace,
            "key": self.key,
            "type": self.type.value,
            "description": self.description,
            "ownerType": self.owner_type,
        }


# =============================================================================
# METAOBJECT DEFINITIONS
# =============================================================================

BADGE = MetaobjectDefinition(
    type="badge",
    name="Badge",
    fields=(
        FieldDefinition("label", "Label", "Short text for the badge label", FieldType.SINGLE_LINE_TEXT, True),
        FieldDefinition("icon", "Icon", "Icon file for the badge", FieldType.FILE_REFERENCE, True),
        FieldDefinition("color", "Color", "Optional color name for the badge", FieldType.SINGLE_LINE_TEXT, False),
    ),
)

TESTIMONIAL = MetaobjectDefinition(
    type="testimonial",
    name="Testimonial",
    fields=(
        FieldDefinition("name", "Name", "Name of the person giving the testimonial", FieldType.SINGLE_LINE_TEXT, True),
        FieldDefinition("quote", "Quote", "The testimonial text", FieldType.MULTI_LINE_TEXT, True),
        FieldDefinition("pain_area", "Pain Area", "The customer pain area addressed", FieldType.SINGLE_LINE_TEXT, True),
    ),
)

PRESS_LOGO = MetaobjectDefinition(
    type="press_logo",
    name="Press logo",
    fields=(
        FieldDefinition("image", "Image", "Logo image", FieldType.FILE_REFERENCE, True),
        FieldDefinition("url", "URL", "Link to the press article", FieldType.URL, True),
    ),
)

METAOBJECT_DEFINITIONS = (BADGE, TESTIMONIAL, PRESS_LOGO)


# =============================================================================
# PRODUCT METAFIELD DEFINITIONS (namespace: qf)
# =============================================================================

THEME_NAMESPACE = "qf"

METAFIELD_DEFINITIONS = (
    MetafieldDefinition(
        namespace=THEME_NAMESPACE,
        key="hero_eyebrow",
        name="Hero eyebrow",
        description="Eyebrow text displayed above product title",
        type=FieldType.SINGLE_LINE_TEXT,
    ),
    MetafieldDefinition(
        namespace=THEME_NAMESPACE,
        key="review_count",
        name="Review count",
        description="Total number of reviews",
        type=FieldType.INTEGER,
    ),
    MetafieldDefinition(
        namespace=THEME_NAMESPACE,
        key="avg_rating",
        name="Average rating",
        description="Average customer rating",
        type=FieldType.DECIMAL,
    ),
    MetafieldDefinition(
        namespace=THEME_NAMESPACE,
        key="usp_pills",
        name="USP pills",
        description="Unique selling proposition pills",
        type=FieldType.LIST_SINGLE_LINE_TEXT,
    ),
)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_catalog(metaobjects, metafields) -> None:
    """
    Check the catalog for identity clashes before anything is sent.

    Raises:
        ValueError: on a repeated metaobject type, a repeated field key within
            one type, or a repeated (owner type, namespace, key) metafield
    """
    seen_types = set()
    for definition in metaobjects:
        if definition.type in seen_types:
            raise ValueError(f"Duplicate metaobject type: {definition.type}")
        seen_types.add(definition.type)

        seen_keys = set()
        for f in definition.fields:
            if f.key in seen_keys:
                raise ValueError(f"Duplicate field key '{f.key}' in metaobject {definition.type}")
            seen_keys.add(f.key)

    seen_metafields = set()
    for definition in metafields:
        identity = (definition.owner_type, definition.namespace, definition.key)
        if identity in seen_metafields:
            raise ValueError(
                f"Duplicate metafield definition {definition.label} for {definition.owner_type}"
            )
        seen_metafields.add(identity)
