"""Resource name helpers."""


def sanitize_name(name: str) -> str:
    """Turn an arbitrary string into a manifest resource name.

    The name is lowercased, every character that is not alphanumeric or a
    hyphen becomes a hyphen, and leading/trailing hyphens are stripped.
    Applying it to an already sanitized name returns the name unchanged.

    Example: "My Connector_v2" -> "my-connector-v2"
    """
    replaced = "".join(c if c.isalnum() or c == "-" else "-" for c in name.lower())
    return replaced.strip("-")


def resolve_name(name: str | None, default: str) -> str:
    """Sanitize ``name``, falling back to ``default`` when nothing is left."""
    if name is None:
        return default
    return sanitize_name(name) or default
