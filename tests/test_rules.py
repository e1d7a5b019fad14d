"""
Tests for the C# emission rules.
"""

import pytest

from dbmodel_codegen.core.schema import Entity, Property, UnrecognizedPropertyTypeError
from dbmodel_codegen.languages.csharp.naming import create_csharp_sanitizer
from dbmodel_codegen.languages.csharp.rules import (
    render_accessor,
    render_attributes,
    render_field,
    render_member,
    render_table_annotation,
    render_type,
)
from dbmodel_codegen.languages.csharp.types import CSharpType, CSharpTypeMapper


@pytest.fixture
def mapper() -> CSharpTypeMapper:
    return CSharpTypeMapper(strict=True)


@pytest.fixture
def sanitizer():
    return create_csharp_sanitizer()


class TestRenderAttributes:
    def test_all_constraints_in_order(self, mapper):
        prop = Property(
            name="Code",
            type="string",
            is_primary_key=True,
            is_required=True,
            max_length=50,
        )
        attributes = render_attributes(prop, mapper.map_property_type(prop, "Item"))
        assert attributes == ["[Key]", "[Required]", "[MaxLength(50)]"]

    def test_decimal_column_type(self, mapper):
        prop = Property(name="Total", type="decimal", precision=10, scale=2)
        attributes = render_attributes(prop, mapper.map_property_type(prop, "Order"))
        assert attributes == ['[Column(TypeName = "decimal(10, 2)")]']

    @pytest.mark.parametrize(
        "precision, scale", [(10, None), (None, 2), (None, None)]
    )
    def test_partial_decimal_spec_emits_nothing(self, mapper, precision, scale):
        prop = Property(name="Total", type="decimal", precision=precision, scale=scale)
        assert render_attributes(prop, mapper.map_property_type(prop, "Order")) == []

    def test_required_is_noop_for_value_types(self, mapper):
        prop = Property(name="Count", type="int", is_required=True)
        assert render_attributes(prop, mapper.map_property_type(prop, "Order")) == []

    def test_required_applies_to_binary(self, mapper):
        prop = Property(name="Blob", type="bytes", is_required=True)
        assert render_attributes(prop, mapper.map_property_type(prop, "File")) == [
            "[Required]"
        ]

    def test_decimal_marker_follows_max_length(self, mapper):
        prop = Property(
            name="Odd",
            type="string",
            is_primary_key=True,
            max_length=10,
            precision=4,
            scale=1,
        )
        attributes = render_attributes(prop, mapper.map_property_type(prop, "X"))
        assert attributes == [
            "[Key]",
            "[MaxLength(10)]",
            '[Column(TypeName = "decimal(4, 1)")]',
        ]


class TestRenderType:
    def test_string_always_nullable(self, mapper):
        required = Property(name="A", type="string", is_required=True)
        optional = Property(name="B", type="string")

        assert render_type(mapper.map_property_type(required, "E")) == "string?"
        assert render_type(mapper.map_property_type(optional, "E")) == "string?"

    @pytest.mark.parametrize(
        "type_name, expected",
        [
            ("int", "int"),
            ("long", "long"),
            ("bool", "bool"),
            ("decimal", "decimal"),
            ("datetime", "DateTime"),
            ("datetimeoffset", "DateTimeOffset"),
            ("guid", "Guid"),
            ("binary", "byte[]?"),
        ],
    )
    def test_mapping_table(self, mapper, type_name, expected):
        prop = Property(name="A", type=type_name)
        assert render_type(mapper.map_property_type(prop, "E")) == expected

    def test_strict_mapper_rejects_unknown(self, mapper):
        prop = Property(name="Tags", type="List<string>")
        with pytest.raises(UnrecognizedPropertyTypeError) as exc_info:
            mapper.map_property_type(prop, "Post")
        assert exc_info.value.type_name == "List<string>"

    def test_lenient_mapper_passes_through(self):
        prop = Property(name="Tags", type="List<string>")
        csharp_type = CSharpTypeMapper(strict=False).map_property_type(prop, "Post")
        assert csharp_type == CSharpType("List<string>")
        assert render_type(csharp_type) == "List<string>"


class TestDeclarations:
    def test_render_field(self):
        assert render_field("string?", "Name") == "public string? Name { get; set; }"

    def test_render_member(self, mapper, sanitizer):
        prop = Property(
            name="Code",
            type="string",
            is_primary_key=True,
            is_required=True,
            max_length=50,
        )
        member = render_member(prop, "Item", mapper, sanitizer)

        assert member.attributes == ["[Key]", "[Required]", "[MaxLength(50)]"]
        assert member.declaration == "public string? Code { get; set; }"

    def test_keyword_property_is_escaped(self, mapper, sanitizer):
        prop = Property(name="class", type="string")
        member = render_member(prop, "Course", mapper, sanitizer)
        assert member.declaration == "public string? @class { get; set; }"

    def test_keyword_escaping_can_be_disabled(self, mapper, sanitizer):
        prop = Property(name="class", type="string")
        member = render_member(prop, "Course", mapper, sanitizer, escape=False)
        assert member.declaration == "public string? class { get; set; }"

    def test_table_annotation(self):
        entity = Entity(name="Order", table_name="Orders")
        assert render_table_annotation(entity) == '[Table("Orders")]'

    def test_table_annotation_quotes_name(self):
        entity = Entity(name="Odd", table_name='Odd"Name\\x')
        assert render_table_annotation(entity) == '[Table("Odd\\"Name\\\\x")]'

    def test_accessor(self, sanitizer):
        entity = Entity(name="Order", table_name="Orders")
        assert (
            render_accessor(entity, sanitizer)
            == "public DbSet<Order> Orders { get; set; }"
        )
