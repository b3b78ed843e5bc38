"""DataFlow manifest vocabulary and pydantic models."""

from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel, Field

API_VERSION = "dataflow.dataflow.io/v1"
KIND = "DataFlow"


class EndpointType(str, Enum):
    """Discriminator of a source or sink block."""

    KAFKA = "kafka"
    POSTGRESQL = "postgresql"
    TRINO = "trino"
    CLICKHOUSE = "clickhouse"


# Types the generator accepts. The validator also knows clickhouse.
SOURCE_TYPES = (EndpointType.KAFKA, EndpointType.POSTGRESQL, EndpointType.TRINO)
SINK_TYPES = (EndpointType.KAFKA, EndpointType.POSTGRESQL, EndpointType.TRINO)
VALIDATION_TYPES = tuple(EndpointType)


def type_names(types: tuple[EndpointType, ...]) -> list[str]:
    """Return the wire names of ``types`` in declaration order."""
    return [t.value for t in types]


class Endpoint(BaseModel):
    """A source or sink: the ``type`` plus the settings block named after it.

    On the wire both live side by side, e.g.::

        type: kafka
        kafka:
          brokers: [localhost:9092]
    """

    type: EndpointType
    settings: dict[str, Any] = Field(default_factory=dict)

    def to_manifest(self) -> dict[str, Any]:
        return {"type": self.type.value, self.type.value: dict(self.settings)}


class Metadata(BaseModel):
    name: str
    namespace: str | None = None

    def to_manifest(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.namespace is not None:
            data["namespace"] = self.namespace
        return data


class DataFlowManifest(BaseModel):
    """A DataFlow resource ready to be serialized."""

    metadata: Metadata
    source: Endpoint
    sink: Endpoint
    transformations: list[Any] = Field(default_factory=list)

    def to_manifest(self) -> dict[str, Any]:
        """Build the wire dict, keys in manifest order."""
        spec: dict[str, Any] = {
            "source": self.source.to_manifest(),
            "sink": self.sink.to_manifest(),
        }
        if self.transformations:
            spec["transformations"] = list(self.transformations)
        return {
            "apiVersion": API_VERSION,
            "kind": KIND,
            "metadata": self.metadata.to_manifest(),
            "spec": spec,
        }

    def to_yaml(self) -> str:
        """Serialize to YAML, keeping manifest key order."""
        return yaml.dump(
            self.to_manifest(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


# Parsed models. Every field is optional so the validator can report
# what is missing instead of failing the parse.


class ParsedEndpoint(BaseModel):
    type: str | None = None
    kafka: Any = None
    postgresql: Any = None
    trino: Any = None
    clickhouse: Any = None

    def block_for(self, endpoint_type: EndpointType) -> Any:
        """Return the nested settings block matching ``endpoint_type``."""
        return getattr(self, endpoint_type.value)


class ParsedMetadata(BaseModel):
    name: str | None = None
    namespace: str | None = None


class ParsedSpec(BaseModel):
    source: ParsedEndpoint | None = None
    sink: ParsedEndpoint | None = None


class ParsedDataFlow(BaseModel):
    """A manifest as read back from YAML. Only the ``apiVersion`` key is read."""

    api_version: str | None = Field(default=None, alias="apiVersion")
    kind: str | None = None
    metadata: ParsedMetadata | None = None
    spec: ParsedSpec | None = None
