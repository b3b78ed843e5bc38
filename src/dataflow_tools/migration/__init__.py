"""Kafka Connect to DataFlow migration."""

from .classifier import Classification, ConnectorKind, Direction, classify
from .connector import KafkaConnectConnector, parse_connectors
from .mapper import migrate_connectors

__all__ = [
    "Classification",
    "ConnectorKind",
    "Direction",
    "KafkaConnectConnector",
    "classify",
    "migrate_connectors",
    "parse_connectors",
]
