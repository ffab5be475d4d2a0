"""Errors raised while parsing and validating labels.

None of these are retryable: the caller has to fix the label string.
"""

from __future__ import annotations


class LabelError(ValueError):
    """Base class for label declaration errors."""


class MalformedLabelError(LabelError):
    """A label entry does not follow ``name[:schema[:argument]]``."""

    def __init__(self, entry: str, reason: str = "empty label name") -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"malformed label {entry!r}: {reason}")


class UnsupportedSchemaError(LabelError):
    """A label names a schema outside the configured whitelist.

    The message carries only the schema token, never the label name.
    """

    def __init__(self, schema: str) -> None:
        self.schema = schema
        super().__init__(f"unsupported schema: {schema}")


class DuplicateLabelError(LabelError):
    """The same label name was declared more than once."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"duplicate label: {name}")
