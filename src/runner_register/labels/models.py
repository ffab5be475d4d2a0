"""Value types for runner capability labels."""

from __future__ import annotations

from dataclasses import dataclass


def _join(name: str, schema: str, argument: str) -> str:
    if not schema:
        return name
    if not argument:
        return f"{name}:{schema}"
    return f"{name}:{schema}:{argument}"


@dataclass(frozen=True)
class RawLabelEntry:
    """One entry decomposed from a label string, before validation.

    Attributes:
        name: Label name. Never empty once produced by the parser.
        schema: Execution backend tag, or "" when the entry had none.
        argument: Backend-specific argument (e.g. an image reference), or "".
    """

    name: str
    schema: str = ""
    argument: str = ""

    def __str__(self) -> str:
        return _join(self.name, self.schema, self.argument)


@dataclass(frozen=True)
class LabelSpec:
    """A validated runner label.

    ``str(label)`` gives the form the remote instance expects:
    ``name:schema:argument``, ``name:schema`` or a bare ``name``.
    """

    name: str
    schema: str = ""
    argument: str = ""

    @classmethod
    def from_entry(cls, entry: RawLabelEntry, *, schema: str | None = None) -> LabelSpec:
        """Build a label from a parsed entry, optionally overriding its schema."""
        return cls(
            name=entry.name,
            schema=entry.schema if schema is None else schema,
            argument=entry.argument,
        )

    @property
    def is_bare(self) -> bool:
        return not self.schema

    def __str__(self) -> str:
        return _join(self.name, self.schema, self.argument)
