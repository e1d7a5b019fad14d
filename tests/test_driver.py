"""
Tests for the generation driver and artifact sinks.
"""

import pytest

from dbmodel_codegen import quick_generate
from dbmodel_codegen.core.generator import GeneratorError
from dbmodel_codegen.core.schema import (
    DuplicateNameError,
    SchemaParseError,
    SchemaValidationError,
    UnrecognizedPropertyTypeError,
)
from dbmodel_codegen.driver import (
    CancellationToken,
    CollectingSink,
    DirectorySink,
    GenerationCancelledError,
    generate,
    generate_artifacts,
    run_generation,
)
from dbmodel_codegen.registry import RegistryError, get_generator


DUPLICATE_CONFIG = """
{
  "entities": [
    {"name": "A", "tableName": "As", "properties": [{"name": "Id", "type": "int", "isPrimaryKey": true}]},
    {"name": "A", "tableName": "Bs", "properties": [{"name": "Id", "type": "int", "isPrimaryKey": true}]}
  ]
}
"""


class TestGenerate:
    def test_order_end_to_end(self, order_config_text, order_entity_cs, order_context_cs):
        result = generate(order_config_text)

        assert result.success
        assert result.artifact_names == ["Order.g.cs", "GeneratedDbContext.g.cs"]
        assert result.get_artifact("Order.g.cs").content == order_entity_cs
        assert result.get_artifact("GeneratedDbContext.g.cs").content == order_context_cs
        assert result.warnings == []
        assert result.metadata == {
            "language": "csharp",
            "file_extension": ".cs",
            "entity_count": 1,
            "artifact_count": 2,
        }

    @pytest.mark.parametrize("text", [None, "", "  ", '{"entities": []}'])
    def test_absent_configuration_generates_nothing(self, text):
        result = generate(text)

        assert result.success
        assert result.artifacts == []
        assert result.metadata["artifact_count"] == 0

    def test_malformed_configuration_fails(self):
        result = generate('{"entities": "nope"}')

        assert not result.success
        assert result.error_message.startswith("Code generation failed:")
        assert isinstance(result.exception, SchemaParseError)

    def test_duplicate_entities_fail(self):
        result = generate(DUPLICATE_CONFIG)

        assert not result.success
        assert isinstance(result.exception, DuplicateNameError)

    def test_table_named_like_context_fails(self):
        text = (
            '{"entities": [{"name": "Order", "tableName": "GeneratedDbContext",'
            ' "properties": [{"name": "Id", "type": "int", "isPrimaryKey": true}]}]}'
        )

        result = generate(text)

        assert not result.success
        assert isinstance(result.exception, SchemaValidationError)
        assert result.artifacts == []

    def test_warnings_are_collected(self):
        text = '{"entities": [{"name": "Tag", "tableName": "Tags"}]}'
        result = generate(text)

        assert result.success
        assert result.warnings == ["Entity 'Tag' has no properties"]
        assert result.artifact_names == ["Tag.g.cs", "GeneratedDbContext.g.cs"]

    def test_alias_and_overrides(self, order_config_text):
        result = generate(order_config_text, "EFCore", {"context_name": "ShopContext"})

        assert result.success
        assert result.artifact_names == ["Order.g.cs", "ShopContext.g.cs"]

    def test_unknown_language(self, order_config_text):
        result = generate(order_config_text, "cobol")

        assert not result.success
        assert isinstance(result.exception, RegistryError)

    def test_cancelled_before_start(self, order_config_text):
        token = CancellationToken()
        token.cancel()

        result = generate(order_config_text, cancellation=token)

        assert not result.success
        assert isinstance(result.exception, GenerationCancelledError)


class TestGenerateArtifacts:
    def test_strict_types_raise(self):
        text = (
            '{"entities": [{"name": "Post", "tableName": "Posts",'
            ' "properties": [{"name": "Tags", "type": "tags"}]}]}'
        )
        with pytest.raises(UnrecognizedPropertyTypeError):
            generate_artifacts(text, get_generator("csharp"))

    def test_lenient_types_pass_through(self):
        text = (
            '{"entities": [{"name": "Post", "tableName": "Posts",'
            ' "properties": [{"name": "Tags", "type": "TagList"}]}]}'
        )
        generator = get_generator("csharp", {"strict_types": False})

        artifacts = generate_artifacts(text, generator)

        assert "public TagList Tags { get; set; }" in artifacts[0].content

    def test_warnings_list_is_filled(self):
        text = '{"entities": [{"name": "Tag", "tableName": "Tags"}]}'
        warnings = []

        generate_artifacts(text, get_generator("csharp"), warnings=warnings)

        assert warnings == ["Entity 'Tag' has no properties"]


class TestRunGeneration:
    def test_delivers_in_order(self, order_config_text, order_entity_cs):
        sink = CollectingSink()

        result = run_generation(order_config_text, sink)

        assert sink.delivered_names == ["Order.g.cs", "GeneratedDbContext.g.cs"]
        assert sink.artifacts[0].content == order_entity_cs
        assert result.artifact_names == sink.delivered_names

    def test_empty_configuration_delivers_nothing(self):
        sink = CollectingSink()

        run_generation(None, sink)

        assert sink.artifacts == []

    def test_malformed_configuration_delivers_nothing(self):
        sink = CollectingSink()

        with pytest.raises(SchemaParseError):
            run_generation('{"entities": [', sink)

        assert sink.artifacts == []

    def test_validation_failure_delivers_nothing(self):
        sink = CollectingSink()

        with pytest.raises(DuplicateNameError):
            run_generation(DUPLICATE_CONFIG, sink)

        assert sink.artifacts == []

    def test_cancellation_delivers_nothing(self, order_config_text):
        sink = CollectingSink()
        token = CancellationToken()
        token.cancel()

        with pytest.raises(GenerationCancelledError):
            run_generation(order_config_text, sink, cancellation=token)

        assert sink.artifacts == []

    def test_directory_sink(self, tmp_path, order_config_text, order_entity_cs):
        out_dir = tmp_path / "Generated"

        run_generation(order_config_text, DirectorySink(out_dir))

        assert sorted(p.name for p in out_dir.iterdir()) == [
            "GeneratedDbContext.g.cs",
            "Order.g.cs",
        ]
        assert (out_dir / "Order.g.cs").read_text(encoding="utf-8") == order_entity_cs

    def test_directory_sink_keeps_crlf(self, tmp_path, order_config_text):
        run_generation(
            order_config_text, DirectorySink(tmp_path), config={"line_ending": "\r\n"}
        )

        raw = (tmp_path / "Order.g.cs").read_bytes()
        assert b"\r\n" in raw
        assert b"\n" not in raw.replace(b"\r\n", b"")


class TestSinks:
    def test_duplicate_delivery_rejected(self):
        sink = CollectingSink()
        sink.add_source("A.g.cs", "class A {}")

        with pytest.raises(GeneratorError, match="delivered twice"):
            sink.add_source("A.g.cs", "class A {}")

        assert len(sink.artifacts) == 1

    def test_cancellation_token(self):
        token = CancellationToken()
        assert not token.is_cancelled
        token.raise_if_cancelled()

        token.cancel()

        assert token.is_cancelled
        with pytest.raises(GenerationCancelledError):
            token.raise_if_cancelled()


class TestQuickGenerate:
    def test_returns_sources_by_name(self, order_config_text, order_context_cs):
        sources = quick_generate(order_config_text)

        assert list(sources) == ["Order.g.cs", "GeneratedDbContext.g.cs"]
        assert sources["GeneratedDbContext.g.cs"] == order_context_cs

    def test_options_are_applied(self, order_config_text):
        sources = quick_generate(order_config_text, namespace="Shop.Data")
        assert "namespace Shop.Data\n" in sources["Order.g.cs"]

    def test_errors_are_raised(self):
        with pytest.raises(SchemaParseError):
            quick_generate("not json")
