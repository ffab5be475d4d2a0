"""Schema whitelist and bare-label policy.

The validator takes a :class:`LabelPolicy` value instead of reading a global
table, so callers (and tests) can narrow or widen the whitelist freely.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_SCHEMAS: frozenset[str] = frozenset({"docker", "host", "vm"})
"""Execution backends this build of the runner knows how to drive."""


class LabelPolicy(BaseModel):
    """Immutable rules the validator applies to parsed labels.

    Attributes:
        schemas: Accepted schema tags. Matching is exact and case-sensitive.
        allow_bare_names: Whether a label with no schema is accepted.
        default_schema: If set, bare labels are normalized to this schema.
            Must be one of ``schemas``.
    """

    model_config = ConfigDict(frozen=True)

    schemas: frozenset[str] = DEFAULT_SCHEMAS
    allow_bare_names: bool = True
    default_schema: str | None = None

    @model_validator(mode="after")
    def _check_default_schema(self) -> LabelPolicy:
        if self.default_schema is not None and self.default_schema not in self.schemas:
            raise ValueError(f"default schema {self.default_schema!r} is not in the whitelist")
        return self

    def supports(self, schema: str) -> bool:
        return schema in self.schemas

    def with_schemas(self, *extra: str) -> LabelPolicy:
        """Return a copy of this policy with additional schemas whitelisted."""
        return self.model_copy(update={"schemas": self.schemas | frozenset(extra)})


DEFAULT_POLICY = LabelPolicy()
