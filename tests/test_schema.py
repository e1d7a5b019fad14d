"""
Tests for the schema model and type resolution.
"""

import pytest

from dbmodel_codegen.core.schema import (
    Entity,
    Property,
    PropertyType,
    Schema,
    UnrecognizedPropertyTypeError,
    resolve_property_type,
)


class TestResolvePropertyType:
    @pytest.mark.parametrize(
        "type_name, expected",
        [
            ("string", PropertyType.STRING),
            ("String", PropertyType.STRING),
            ("int", PropertyType.INTEGER),
            ("integer", PropertyType.INTEGER),
            ("Int64", PropertyType.LONG),
            ("bool", PropertyType.BOOLEAN),
            ("decimal", PropertyType.DECIMAL),
            ("DateTime", PropertyType.DATETIME),
            ("Guid", PropertyType.GUID),
            ("uuid", PropertyType.GUID),
            ("byte[]", PropertyType.BINARY),
            (" double ", PropertyType.DOUBLE),
        ],
    )
    def test_recognized(self, type_name, expected):
        assert resolve_property_type(type_name) is expected

    @pytest.mark.parametrize("type_name", ["", "money2", "List<int>", "varchar(50)"])
    def test_unrecognized(self, type_name):
        assert resolve_property_type(type_name) is None


class TestProperty:
    def test_defaults(self):
        prop = Property(name="Id", type="int")
        assert not prop.is_primary_key
        assert not prop.is_required
        assert prop.max_length is None
        assert not prop.has_decimal_spec

    def test_decimal_spec_needs_both_values(self):
        assert not Property(name="A", type="decimal", precision=10).has_decimal_spec
        assert not Property(name="A", type="decimal", scale=2).has_decimal_spec
        assert Property(name="A", type="decimal", precision=10, scale=0).has_decimal_spec

    def test_property_type(self):
        assert Property(name="A", type="text").property_type is PropertyType.STRING
        assert Property(name="A", type="Money2").property_type is None


class TestEntityAndSchema:
    def test_primary_keys(self, shop_schema):
        customer = shop_schema.get_entity("Customer")
        assert [p.name for p in customer.primary_keys] == ["Id"]

    def test_get_missing(self, shop_schema):
        assert shop_schema.get_entity("Nope") is None
        assert shop_schema.entities[0].get_property("Nope") is None

    def test_summary(self, shop_schema):
        assert shop_schema.get_summary() == {
            "entity_count": 2,
            "property_count": 7,
            "primary_key_count": 2,
        }

    def test_empty_schema(self):
        schema = Schema()
        assert schema.entity_names == []
        assert Entity(name="A", table_name="As").properties == []


def test_unrecognized_type_error_message():
    error = UnrecognizedPropertyTypeError("Order", "Total", "money2")
    assert error.entity == "Order"
    assert error.property == "Total"
    assert error.type_name == "money2"
    assert "Order.Total" in str(error)
