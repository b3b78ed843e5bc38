"""Reference data for DataFlow connectors and transformations."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

CONNECTORS_RAW = """{
  "sources": {
    "kafka": {
      "description": "Read messages from Kafka topics",
      "required_fields": ["brokers", "topic"],
      "optional_fields": ["consumerGroup", "tls", "sasl", "format", "avroSchema", "schemaRegistry"]
    },
    "postgresql": {
      "description": "Read from PostgreSQL tables",
      "required_fields": ["connectionString", "table"],
      "optional_fields": ["query", "pollInterval"]
    },
    "trino": {
      "description": "Read from Trino tables",
      "required_fields": ["serverURL", "catalog", "schema", "table"],
      "optional_fields": ["query", "pollInterval", "keycloak"]
    }
  },
  "sinks": {
    "kafka": {
      "description": "Write messages to Kafka topics",
      "required_fields": ["brokers", "topic"],
      "optional_fields": ["tls", "sasl"]
    },
    "postgresql": {
      "description": "Write to PostgreSQL tables",
      "required_fields": ["connectionString", "table"],
      "optional_fields": ["batchSize", "autoCreateTable", "upsertMode", "conflictKey"]
    },
    "trino": {
      "description": "Write to Trino tables",
      "required_fields": ["serverURL", "catalog", "schema", "table"],
      "optional_fields": ["batchSize", "autoCreateTable", "keycloak"]
    }
  }
}"""

TRANSFORMATIONS_RAW = """{
  "timestamp": {
    "description": "Add timestamp to each message",
    "example": { "type": "timestamp", "timestamp": { "fieldName": "created_at", "format": "RFC3339" } }
  },
  "flatten": {
    "description": "Flatten array into separate messages",
    "example": { "type": "flatten", "flatten": { "field": "$.items" } }
  },
  "filter": {
    "description": "Filter messages by JSONPath condition",
    "example": { "type": "filter", "filter": { "condition": "$.level != 'error'" } }
  },
  "mask": {
    "description": "Mask sensitive fields",
    "example": { "type": "mask", "mask": { "fields": ["$.password", "$.token"], "maskChar": "*", "keepLength": true } }
  },
  "router": {
    "description": "Route messages to different sinks by condition",
    "example": { "type": "router", "router": { "routes": [{ "condition": "$.level == 'error'", "sink": { "type": "kafka", "kafka": { "brokers": ["localhost:9092"], "topic": "errors" } } }] } }
  },
  "select": {
    "description": "Select specific fields",
    "example": { "type": "select", "select": { "fields": ["$.id", "$.name", "$.timestamp"] } }
  },
  "remove": {
    "description": "Remove specific fields",
    "example": { "type": "remove", "remove": { "fields": ["$.password", "$.token"] } }
  },
  "snakeCase": {
    "description": "Convert field names to snake_case",
    "example": { "type": "snakeCase", "snakeCase": { "deep": true } }
  },
  "camelCase": {
    "description": "Convert field names to CamelCase",
    "example": { "type": "camelCase", "camelCase": { "deep": true } }
  }
}"""


def _load(raw: str) -> dict[str, Any]:
    return json.loads(raw)


def _pretty(raw: str) -> str:
    try:
        return json.dumps(_load(raw), indent=2, ensure_ascii=False)
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to restructure catalog, returning raw text: {e}")
        return raw


def connector_catalog() -> dict[str, Any]:
    """Supported sources and sinks with their required and optional fields."""
    return _load(CONNECTORS_RAW)


def transformation_catalog() -> dict[str, Any]:
    """Supported transformations, each with a description and an example."""
    return _load(TRANSFORMATIONS_RAW)


def list_connectors() -> str:
    """Connector catalog as indented JSON text."""
    return _pretty(CONNECTORS_RAW)


def list_transformations() -> str:
    """Transformation catalog as indented JSON text."""
    return _pretty(TRANSFORMATIONS_RAW)
