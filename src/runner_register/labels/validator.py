"""Label validation and normalization.

:func:`validate_labels` is a pure function: it performs no I/O, does not log,
and reports failure through the returned :class:`ValidationResult` instead of
raising. Checks run in two passes over the entries, in input order:

1. schema whitelist (first unsupported schema wins),
2. name uniqueness (only when every schema passed).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import DuplicateLabelError, LabelError, MalformedLabelError, UnsupportedSchemaError
from .models import LabelSpec, RawLabelEntry
from .parser import parse_labels
from .policy import DEFAULT_POLICY, LabelPolicy


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a set of labels: either labels or an error."""

    labels: tuple[LabelSpec, ...] = ()
    error: LabelError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[LabelSpec]:
        """Return a new list of the labels, or raise the validation error."""
        if self.error is not None:
            raise self.error
        return list(self.labels)

    @classmethod
    def failure(cls, error: LabelError) -> ValidationResult:
        return cls(error=error)


def _normalize(entry: RawLabelEntry, policy: LabelPolicy) -> LabelSpec | LabelError:
    if entry.schema:
        if not policy.supports(entry.schema):
            return UnsupportedSchemaError(entry.schema)
        return LabelSpec.from_entry(entry)
    if not policy.allow_bare_names:
        return MalformedLabelError(str(entry), "missing schema")
    if policy.default_schema is not None:
        return LabelSpec.from_entry(entry, schema=policy.default_schema)
    return LabelSpec.from_entry(entry)


def _first_duplicate(labels: Iterable[LabelSpec]) -> str | None:
    seen: set[str] = set()
    for label in labels:
        if label.name in seen:
            return label.name
        seen.add(label.name)
    return None


def validate_labels(
    entries: Iterable[RawLabelEntry], policy: LabelPolicy = DEFAULT_POLICY
) -> ValidationResult:
    """Check parsed entries against ``policy`` and normalize them.

    Args:
        entries: Parsed entries, in declaration order.
        policy: Whitelist and bare-label rules to apply.

    Returns:
        A successful result holding the labels in input order, or a failed
        result holding the first error found.
    """
    labels: list[LabelSpec] = []
    for entry in entries:
        outcome = _normalize(entry, policy)
        if isinstance(outcome, LabelError):
            return ValidationResult.failure(outcome)
        labels.append(outcome)

    duplicate = _first_duplicate(labels)
    if duplicate is not None:
        return ValidationResult.failure(DuplicateLabelError(duplicate))
    return ValidationResult(labels=tuple(labels))


def check_labels(raw: str, policy: LabelPolicy = DEFAULT_POLICY) -> ValidationResult:
    """Parse and validate a raw label string without raising.

    Useful for validating user input before anything else happens.
    """
    try:
        entries = parse_labels(raw)
    except MalformedLabelError as exc:
        return ValidationResult.failure(exc)
    return validate_labels(entries, policy)
