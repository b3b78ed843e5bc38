"""DataFlow manifest generator."""

import json
import logging
from typing import Any

from dataflow_tools.errors import InvalidInput
from dataflow_tools.utils.naming import resolve_name

from .schema import (
    SINK_TYPES,
    SOURCE_TYPES,
    DataFlowManifest,
    Endpoint,
    EndpointType,
    Metadata,
    type_names,
)

logger = logging.getLogger(__name__)

DEFAULT_NAME = "dataflow-example"
HEADER = "# Generated DataFlow manifest\n"


def _check_type(value: str, allowed: tuple[EndpointType, ...], field: str) -> EndpointType:
    names = type_names(allowed)
    if value not in names:
        raise InvalidInput(f"{field} must be one of: {', '.join(names)}")
    return EndpointType(value)


def _parse_object(raw: str, field: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"{field} invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInput(f"{field} invalid JSON: expected an object")
    return data


def _parse_sink_config(raw: str) -> dict[str, Any]:
    # Unlike source_config, a broken sink_config is not an error.
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Ignoring unparsable sink_config")
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring non-object sink_config")
        return {}
    return data


def _parse_transformations(raw: str) -> list[Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"transformations invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise InvalidInput("transformations must be a JSON array")
    return data


def build_manifest(
    source_type: str,
    sink_type: str,
    source_config: str | None = None,
    sink_config: str | None = None,
    transformations: str | None = None,
    name: str | None = None,
    namespace: str | None = None,
) -> DataFlowManifest:
    """Assemble a manifest model from tool parameters.

    Raises:
        InvalidInput: If a type is unknown, or source_config/transformations
            are not valid JSON of the expected shape.
    """
    src_type = _check_type(source_type, SOURCE_TYPES, "source_type")
    snk_type = _check_type(sink_type, SINK_TYPES, "sink_type")

    source_settings = _parse_object(source_config, "source_config") if source_config is not None else {}
    sink_settings = _parse_sink_config(sink_config) if sink_config is not None else {}
    steps = _parse_transformations(transformations) if transformations is not None else []

    logger.debug(f"Building manifest {src_type.value} -> {snk_type.value} ({len(steps)} transformations)")
    return DataFlowManifest(
        metadata=Metadata(name=resolve_name(name, DEFAULT_NAME), namespace=namespace),
        source=Endpoint(type=src_type, settings=source_settings),
        sink=Endpoint(type=snk_type, settings=sink_settings),
        transformations=steps,
    )


def generate_manifest(
    source_type: str,
    sink_type: str,
    *,
    description: str | None = None,
    source_config: str | None = None,
    sink_config: str | None = None,
    transformations: str | None = None,
    name: str | None = None,
    namespace: str | None = None,
) -> str:
    """Generate DataFlow manifest text.

    Args:
        source_type: One of kafka, postgresql, trino.
        sink_type: One of kafka, postgresql, trino.
        description: Optional free text, emitted as a header comment.
        source_config: JSON object placed under ``source.<source_type>``.
        sink_config: JSON object placed under ``sink.<sink_type>``.
        transformations: JSON array of transformation objects.
        name: Resource name (sanitized). Defaults to ``dataflow-example``.
        namespace: Kubernetes namespace, included only when given.

    Returns:
        Manifest YAML preceded by comment lines.

    Raises:
        InvalidInput: See :func:`build_manifest`.
    """
    manifest = build_manifest(
        source_type,
        sink_type,
        source_config=source_config,
        sink_config=sink_config,
        transformations=transformations,
        name=name,
        namespace=namespace,
    )
    out = HEADER
    if description is not None:
        out += f"# Description: {' '.join(description.splitlines())}\n"
    return out + manifest.to_yaml()
