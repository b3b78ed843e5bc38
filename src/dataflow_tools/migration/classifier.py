"""Infer connector direction and type from a ``connector.class`` string."""

from enum import Enum
from typing import Callable, NamedTuple


class Direction(str, Enum):
    SOURCE = "source"
    SINK = "sink"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


class ConnectorKind(str, Enum):
    KAFKA = "kafka"
    POSTGRESQL = "postgresql"
    DEBEZIUM = "debezium"
    UNKNOWN = "unknown"


class Classification(NamedTuple):
    direction: Direction
    kind: ConnectorKind


UNKNOWN = Classification(Direction.UNKNOWN, ConnectorKind.UNKNOWN)

# Evaluated top to bottom, first match wins. Order matters: a JDBC sink
# whose class also mentions kafka is still a postgresql sink.
RULES: list[tuple[Callable[[str], bool], Classification]] = [
    (
        lambda c: "debezium" in c or ("mysql" in c and "cdc" in c),
        Classification(Direction.UNSUPPORTED, ConnectorKind.DEBEZIUM),
    ),
    (
        lambda c: ("jdbc" in c or "postgres" in c) and "sink" in c,
        Classification(Direction.SINK, ConnectorKind.POSTGRESQL),
    ),
    (
        lambda c: "sink" in c and "kafka" in c,
        Classification(Direction.SINK, ConnectorKind.KAFKA),
    ),
    (
        lambda c: "source" in c and "kafka" in c,
        Classification(Direction.SOURCE, ConnectorKind.KAFKA),
    ),
    (lambda c: "source" in c, Classification(Direction.SOURCE, ConnectorKind.KAFKA)),
    (lambda c: "sink" in c, Classification(Direction.SINK, ConnectorKind.KAFKA)),
]


def classify(connector_class: str) -> Classification:
    """Classify a connector by substring rules on its lowercased class name."""
    c = connector_class.lower()
    for predicate, result in RULES:
        if predicate(c):
            return result
    return UNKNOWN
