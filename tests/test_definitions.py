"""Tests for the theme definition catalog."""

import dataclasses

import pytest

from theme_setup.definitions import (
    METAFIELD_DEFINITIONS,
    METAOBJECT_DEFINITIONS,
    FieldDefinition,
    FieldType,
    MetafieldDefinition,
    MetaobjectDefinition,
    validate_catalog,
)


class TestMetaobjectCatalog:
    def test_types_in_order(self):
        assert [d.type for d in METAOBJECT_DEFINITIONS] == ["badge", "testimonial", "press_logo"]

    def test_badge_input(self):
        badge = METAOBJECT_DEFINITIONS[0]
        assert badge.to_input() == {
            "name": "Badge",
            "type": "badge",
            "fieldDefinitions": [
                {
                    "key": "label",
                    "name": "Label",
                    "description": "Short text for the badge label",
                    "type": "single_line_text_field",
                    "required": True,
                },
                {
                    "key": "icon",
                    "name": "Icon",
                    "description": "Icon file for the badge",
                    "type": "file_reference",
                    "required": True,
                },
                {
                    "key": "color",
                    "name": "Color",
                    "description": "Optional color name for the badge",
                    "type": "single_line_text_field",
                    "required": False,
                },
            ],
        }

    def test_testimonial_fields(self):
        testimonial = METAOBJECT_DEFINITIONS[1]
        assert testimonial.name == "Testimonial"
        assert [(f.key, f.type, f.required) for f in testimonial.fields] == [
            ("name", FieldType.SINGLE_LINE_TEXT, True),
            ("quote", FieldType.MULTI_LINE_TEXT, True),
            ("pain_area", FieldType.SINGLE_LINE_TEXT, True),
        ]

    def test_press_logo_fields(self):
        press_logo = METAOBJECT_DEFINITIONS[2]
        assert press_logo.name == "Press logo"
        assert [(f.key, f.type, f.required) for f in press_logo.fields] == [
            ("image", FieldType.FILE_REFERENCE, True),
            ("url", FieldType.URL, True),
        ]

    def test_definitions_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            METAOBJECT_DEFINITIONS[0].type = "other"


class TestMetafieldCatalog:
    def test_keys_and_types(self):
        assert [(d.key, d.type.value) for d in METAFIELD_DEFINITIONS] == [
            ("hero_eyebrow", "single_line_text_field"),
            ("review_count", "number_integer"),
            ("avg_rating", "number_decimal"),
            ("usp_pills", "list.single_line_text_field"),
        ]

    def test_all_in_qf_namespace_on_products(self):
        assert {d.namespace for d in METAFIELD_DEFINITIONS} == {"qf"}
        assert {d.owner_type for d in METAFIELD_DEFINITIONS} == {"PRODUCT"}

    def test_input_shape(self):
        assert METAFIELD_DEFINITIONS[1].to_input() == {
            "name": "Review count",
            "namespace": "qf",
            "key": "review_count",
            "type": "number_integer",
            "description": "Total number of reviews",
            "ownerType": "PRODUCT",
        }

    def test_label(self):
        assert METAFIELD_DEFINITIONS[0].label == "qf.hero_eyebrow"


class TestValidateCatalog:
    def test_shipped_catalog_is_valid(self):
        validate_catalog(METAOBJECT_DEFINITIONS, METAFIELD_DEFINITIONS)

    def test_duplicate_metaobject_type(self):
        with pytest.raises(ValueError, match="Duplicate metaobject type: badge"):
            validate_catalog(METAOBJECT_DEFINITIONS + (METAOBJECT_DEFINITIONS[0],), ())

    def test_duplicate_field_key(self):
        field = FieldDefinition("label", "Label", "", FieldType.SINGLE_LINE_TEXT)
        definition = MetaobjectDefinition(type="tag", name="Tag", fields=(field, field))
        with pytest.raises(ValueError, match="Duplicate field key 'label'"):
            validate_catalog((definition,), ())

    def test_same_key_on_different_owner_is_allowed(self):
        product = METAFIELD_DEFINITIONS[0]
        variant = dataclasses.replace(product, owner_type="PRODUCTVARIANT")
        validate_catalog((), (product, variant))

    def test_duplicate_metafield_identity(self):
        copy = MetafieldDefinition(
            namespace="qf",
            key="review_count",
            name="Reviews",
            description="",
            type=FieldType.INTEGER,
        )
        with pytest.raises(ValueError, match="qf.review_count"):
            validate_catalog((), METAFIELD_DEFINITIONS + (copy,))
