"""Kafka Connect connector configs as returned by the Connect REST API."""

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from dataflow_tools.errors import InvalidInput


class KafkaConnectConnector(BaseModel):
    """One connector: its name and the flat string-to-string config."""

    name: str | None = None
    config: dict[str, str] | None = None


def parse_connectors(raw: str) -> list[KafkaConnectConnector]:
    """Parse a single connector object or an array of them.

    Raises:
        InvalidInput: If the JSON is malformed or a connector has the wrong shape.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"Invalid JSON: {e}") from e

    if isinstance(data, list):
        connectors = []
        for item in data:
            try:
                connectors.append(KafkaConnectConnector.model_validate(item))
            except ValidationError as e:
                raise InvalidInput(f"Connector item invalid: {e}") from e
        return connectors

    try:
        return [KafkaConnectConnector.model_validate(data)]
    except ValidationError as e:
        raise InvalidInput(f"Invalid connector: {e}") from e


def lookup(config: dict[str, str], key: str) -> str | None:
    """Get a config value, matching the key case-insensitively.

    An exact match wins; otherwise the first key (in insertion order)
    equal to ``key`` ignoring case is used.
    """
    if key in config:
        return config[key]
    wanted = key.lower()
    for k, v in config.items():
        if k.lower() == wanted:
            return v
    return None


def split_brokers(bootstrap_servers: str) -> list[str]:
    """Split a ``bootstrap.servers`` value into a list of host:port entries."""
    return [b.strip() for b in bootstrap_servers.split(",") if b.strip()]


def lookup_first(config: dict[str, str], *keys: str, default: str | None = None) -> str | None:
    """Return the value of the first key present in ``config``, else ``default``."""
    for key in keys:
        value = lookup(config, key)
        if value is not None:
            return value
    return default
