"""Tool facade: the operations a tool-calling transport exposes.

Each tool takes a pydantic params model and returns a :class:`ToolResult`
holding the response text and whether it is an error. Tools never raise
for bad input.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field, ValidationError

from dataflow_tools.errors import InvalidInput
from dataflow_tools.manifest.generator import generate_manifest
from dataflow_tools.manifest.validator import validate_manifest
from dataflow_tools.migration.mapper import migrate_connectors
from dataflow_tools.reference.catalog import list_connectors, list_transformations

logger = logging.getLogger(__name__)

VALID_MESSAGE = "Configuration is valid."


@dataclass
class ToolResult:
    text: str
    is_error: bool = False


class GenerateParams(BaseModel):
    description: str | None = Field(default=None, description="Short description of the data flow")
    source_type: str = Field(description="Source type: kafka, postgresql, trino")
    sink_type: str = Field(description="Sink type: kafka, postgresql, trino")
    source_config: str | None = Field(
        default=None, description="Source config as JSON object string (optional)"
    )
    sink_config: str | None = Field(
        default=None, description="Sink config as JSON object string (optional)"
    )
    transformations: str | None = Field(
        default=None, description="Transformations as JSON array string (optional)"
    )
    name: str | None = Field(default=None, description="DataFlow resource name (optional)")
    namespace: str | None = Field(default=None, description="Kubernetes namespace (optional)")


class ValidateParams(BaseModel):
    config: str = Field(description="YAML manifest to validate")


class MigrateParams(BaseModel):
    kafka_connect_config: str = Field(
        description=(
            "Kafka Connect connector config(s) as JSON: "
            "single object or array of two (source, sink)"
        )
    )


class NoParams(BaseModel):
    pass


def generate_dataflow_manifest(params: GenerateParams) -> ToolResult:
    try:
        text = generate_manifest(
            params.source_type,
            params.sink_type,
            description=params.description,
            source_config=params.source_config,
            sink_config=params.sink_config,
            transformations=params.transformations,
            name=params.name,
            namespace=params.namespace,
        )
    except InvalidInput as e:
        return ToolResult(str(e), is_error=True)
    return ToolResult(text)


def validate_dataflow_manifest(params: ValidateParams) -> ToolResult:
    errors = validate_manifest(params.config)
    if errors:
        return ToolResult("Validation errors:\n" + "\n".join(errors), is_error=True)
    return ToolResult(VALID_MESSAGE)


def migrate_kafka_connect_to_dataflow(params: MigrateParams) -> ToolResult:
    try:
        return ToolResult(migrate_connectors(params.kafka_connect_config))
    except InvalidInput as e:
        return ToolResult(str(e), is_error=True)


def list_dataflow_connectors(_params: NoParams) -> ToolResult:
    return ToolResult(list_connectors())


def list_dataflow_transformations(_params: NoParams) -> ToolResult:
    return ToolResult(list_transformations())


@dataclass
class ToolSpec:
    """A registered tool: what a transport needs to advertise and call it."""

    name: str
    description: str
    params_model: type[BaseModel]
    handler: Callable[[Any], ToolResult]

    def input_schema(self) -> dict[str, Any]:
        return self.params_model.model_json_schema()


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in [
        ToolSpec(
            "generate_dataflow_manifest",
            "Generate a DataFlow YAML manifest from source/sink types and optional configs",
            GenerateParams,
            generate_dataflow_manifest,
        ),
        ToolSpec(
            "validate_dataflow_manifest",
            "Validate a DataFlow YAML manifest (apiVersion, kind, spec.source, spec.sink)",
            ValidateParams,
            validate_dataflow_manifest,
        ),
        ToolSpec(
            "migrate_kafka_connect_to_dataflow",
            "Migrate Kafka Connect connector config(s) to DataFlow YAML manifest",
            MigrateParams,
            migrate_kafka_connect_to_dataflow,
        ),
        ToolSpec(
            "list_dataflow_connectors",
            "List supported DataFlow connectors (sources and sinks) with fields",
            NoParams,
            list_dataflow_connectors,
        ),
        ToolSpec(
            "list_dataflow_transformations",
            "List DataFlow transformations with examples",
            NoParams,
            list_dataflow_transformations,
        ),
    ]
}


def call_tool(name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
    """Validate ``arguments`` against the tool's params model and run it."""
    spec = TOOLS.get(name)
    if spec is None:
        return ToolResult(f"Unknown tool: {name}", is_error=True)
    try:
        params = spec.params_model.model_validate(arguments or {})
    except ValidationError as e:
        logger.debug(f"Rejected arguments for {name}: {e}")
        return ToolResult(f"Invalid arguments for {name}: {e}", is_error=True)
    logger.debug(f"Calling tool {name}")
    return spec.handler(params)
