"""Tests for the DataFlow manifest generator."""

import itertools

import pytest
import yaml

from dataflow_tools.errors import InvalidInput
from dataflow_tools.manifest.generator import build_manifest, generate_manifest
from dataflow_tools.manifest.schema import API_VERSION, KIND
from dataflow_tools.manifest.validator import validate_manifest

TYPES = ["kafka", "postgresql", "trino"]


class TestGenerateManifest:
    def test_kafka_to_postgresql(self):
        text = generate_manifest(
            "kafka",
            "postgresql",
            description="Kafka to PostgreSQL",
            source_config='{"brokers":["localhost:9092"],"topic":"input-topic"}',
            sink_config='{"connectionString":"postgres://u:p@h/db","table":"t"}',
            name="my-flow",
        )
        assert text.startswith("# Generated DataFlow manifest\n# Description: Kafka to PostgreSQL\n")
        doc = yaml.safe_load(text)
        assert doc["apiVersion"] == API_VERSION
        assert doc["kind"] == KIND
        assert doc["metadata"] == {"name": "my-flow"}
        assert doc["spec"]["source"] == {
            "type": "kafka",
            "kafka": {"brokers": ["localhost:9092"], "topic": "input-topic"},
        }
        assert doc["spec"]["sink"] == {
            "type": "postgresql",
            "postgresql": {"connectionString": "postgres://u:p@h/db", "table": "t"},
        }
        assert "transformations" not in doc["spec"]

    def test_key_order(self):
        text = generate_manifest("kafka", "kafka")
        body = text.split("\n", 1)[1]
        assert body.index("apiVersion:") < body.index("kind:") < body.index("metadata:")
        assert body.index("metadata:") < body.index("spec:")
        assert body.index("source:") < body.index("sink:")

    def test_defaults(self):
        doc = yaml.safe_load(generate_manifest("trino", "kafka"))
        assert doc["metadata"] == {"name": "dataflow-example"}
        assert doc["spec"]["source"] == {"type": "trino", "trino": {}}
        assert doc["spec"]["sink"] == {"type": "kafka", "kafka": {}}

    def test_no_description_line_without_description(self):
        text = generate_manifest("kafka", "kafka")
        assert "# Description" not in text

    def test_multiline_description_stays_in_comment(self):
        text = generate_manifest("kafka", "kafka", description="line one\nline two")
        assert "# Description: line one line two\n" in text

    def test_namespace_included_when_given(self):
        doc = yaml.safe_load(generate_manifest("kafka", "kafka", namespace="data"))
        assert doc["metadata"]["namespace"] == "data"

    def test_name_is_sanitized(self):
        doc = yaml.safe_load(generate_manifest("kafka", "kafka", name="My Flow_v2!"))
        assert doc["metadata"]["name"] == "my-flow-v2"

    def test_transformations_kept_in_order(self):
        steps = '[{"type":"filter","filter":{"condition":"$.ok"}},{"type":"snakeCase","snakeCase":{"deep":true}}]'
        doc = yaml.safe_load(generate_manifest("kafka", "kafka", transformations=steps))
        assert [t["type"] for t in doc["spec"]["transformations"]] == ["filter", "snakeCase"]

    def test_empty_transformations_omitted(self):
        doc = yaml.safe_load(generate_manifest("kafka", "kafka", transformations="[]"))
        assert "transformations" not in doc["spec"]


class TestGenerateErrors:
    def test_invalid_source_type(self):
        with pytest.raises(InvalidInput, match="source_type must be one of: kafka, postgresql, trino"):
            generate_manifest("invalid", "postgresql")

    def test_invalid_sink_type(self):
        with pytest.raises(InvalidInput, match="sink_type must be one of: kafka, postgresql, trino"):
            generate_manifest("kafka", "clickhouse")

    def test_source_type_checked_first(self):
        with pytest.raises(InvalidInput, match="source_type"):
            generate_manifest("bad", "bad")

    def test_invalid_source_config(self):
        with pytest.raises(InvalidInput, match="source_config invalid JSON"):
            generate_manifest("kafka", "kafka", source_config="{broken")

    def test_non_object_source_config(self):
        with pytest.raises(InvalidInput, match="source_config"):
            generate_manifest("kafka", "kafka", source_config="[1, 2]")

    def test_invalid_sink_config_is_ignored(self):
        doc = yaml.safe_load(generate_manifest("kafka", "postgresql", sink_config="{broken"))
        assert doc["spec"]["sink"] == {"type": "postgresql", "postgresql": {}}

    def test_non_object_sink_config_is_ignored(self):
        doc = yaml.safe_load(generate_manifest("kafka", "trino", sink_config='"text"'))
        assert doc["spec"]["sink"]["trino"] == {}

    def test_invalid_transformations(self):
        with pytest.raises(InvalidInput, match="transformations invalid JSON"):
            generate_manifest("kafka", "kafka", transformations="[oops")

    def test_transformations_must_be_array(self):
        with pytest.raises(InvalidInput, match="JSON array"):
            generate_manifest("kafka", "kafka", transformations='{"type":"filter"}')


class TestBuildManifest:
    def test_returns_model(self):
        manifest = build_manifest("postgresql", "trino", name="x")
        assert manifest.source.type.value == "postgresql"
        assert manifest.sink.type.value == "trino"
        assert manifest.metadata.name == "x"

    def test_name_that_sanitizes_to_nothing_uses_default(self):
        assert build_manifest("kafka", "kafka", name="!!!").metadata.name == "dataflow-example"


class TestGenerateThenValidate:
    @pytest.mark.parametrize("source_type,sink_type", list(itertools.product(TYPES, TYPES)))
    def test_generated_manifest_is_valid(self, source_type, sink_type):
        text = generate_manifest(source_type, sink_type)
        assert validate_manifest(text) == []
