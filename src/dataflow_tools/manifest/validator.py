"""Structural validation of DataFlow manifests."""

import logging

import yaml
from pydantic import ValidationError

from .schema import (
    API_VERSION,
    KIND,
    VALIDATION_TYPES,
    EndpointType,
    ParsedDataFlow,
    ParsedEndpoint,
    type_names,
)

logger = logging.getLogger(__name__)


def parse_manifest(text: str) -> ParsedDataFlow:
    """Parse manifest YAML into the structural model.

    Raises:
        ValueError: If the text is not a YAML mapping of the expected shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e
    if data is None:
        raise ValueError("document is empty")
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping at the top level, got {type(data).__name__}")
    try:
        return ParsedDataFlow.model_validate(data)
    except ValidationError as e:
        raise ValueError(str(e)) from e


def _check_endpoint(endpoint: ParsedEndpoint, role: str) -> list[str]:
    names = type_names(VALIDATION_TYPES)
    if endpoint.type not in names:
        return [f"spec.{role}.type must be one of: {', '.join(names)}"]
    endpoint_type = EndpointType(endpoint.type)
    if endpoint.block_for(endpoint_type) is None:
        return [
            f"spec.{role}.{endpoint_type.value} is required "
            f"when {role}.type is {endpoint_type.value}"
        ]
    return []


def validate_manifest(text: str) -> list[str]:
    """Validate manifest text.

    Checks apiVersion, kind, presence of spec/spec.source/spec.sink and that
    each endpoint has a known type with a matching settings block. The
    contents of those blocks are not inspected.

    Returns:
        List of error messages; empty when the manifest is valid.
    """
    try:
        parsed = parse_manifest(text)
    except ValueError as e:
        logger.debug(f"Manifest parse failed: {e}")
        return [f"YAML parse error: {e}"]

    errors: list[str] = []
    if parsed.api_version != API_VERSION:
        errors.append(f"apiVersion must be '{API_VERSION}'")
    if parsed.kind != KIND:
        errors.append(f"kind must be '{KIND}'")

    spec = parsed.spec
    if spec is None:
        errors.append("spec is required")
        return errors
    # Stop at the first missing endpoint; nothing below it can be checked.
    if spec.source is None:
        errors.append("spec.source is required")
        return errors
    if spec.sink is None:
        errors.append("spec.sink is required")
        return errors

    errors.extend(_check_endpoint(spec.source, "source"))
    errors.extend(_check_endpoint(spec.sink, "sink"))
    return errors


def is_valid_manifest(text: str) -> bool:
    return not validate_manifest(text)
