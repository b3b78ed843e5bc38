"""DataFlow manifest generation and validation."""

from .generator import generate_manifest
from .schema import API_VERSION, KIND, DataFlowManifest, Endpoint, EndpointType
from .validator import is_valid_manifest, validate_manifest

__all__ = [
    "API_VERSION",
    "KIND",
    "DataFlowManifest",
    "Endpoint",
    "EndpointType",
    "generate_manifest",
    "is_valid_manifest",
    "validate_manifest",
]
