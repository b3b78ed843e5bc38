"""Exceptions shared by the manifest and migration tools."""


class InvalidInput(ValueError):
    """Raised when tool input cannot be turned into a manifest.

    Covers unknown source/sink types, malformed JSON fragments and
    connector configs missing required fields. The message is meant
    to be shown to the caller as-is.
    """
