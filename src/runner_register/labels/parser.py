"""Label string parser.

Splits a raw label string such as ``"ubuntu:host, builder:docker:node:18"``
into :class:`RawLabelEntry` values. Entries are separated by commas or
newlines; each entry is ``name[:schema[:argument]]``. Only the first two
colons split, so an argument may contain colons of its own.

Schemas are not checked here; see :mod:`runner_register.labels.validator`.
"""

from __future__ import annotations

import re

from .errors import MalformedLabelError
from .models import RawLabelEntry

_DELIMITERS = re.compile(r"[,\r\n]")


def split_entries(raw: str) -> list[str]:
    """Split a label string into trimmed, non-blank entries."""
    if not raw:
        return []
    return [part.strip() for part in _DELIMITERS.split(raw) if part.strip()]


def parse_label(entry: str) -> RawLabelEntry:
    """Decompose a single ``name[:schema[:argument]]`` entry.

    Raises:
        MalformedLabelError: If the name part is empty (e.g. ``":docker"``)
            or an argument is given without a schema (``"name::arg"``).
    """
    parts = [p.strip() for p in entry.strip().split(":", 2)]
    name = parts[0]
    if not name:
        raise MalformedLabelError(entry.strip())
    schema = parts[1] if len(parts) > 1 else ""
    argument = parts[2] if len(parts) > 2 else ""
    if argument and not schema:
        raise MalformedLabelError(entry.strip(), "argument without schema")
    return RawLabelEntry(name=name, schema=schema, argument=argument)


def parse_labels(raw: str) -> list[RawLabelEntry]:
    """Parse a comma/newline separated label string.

    Args:
        raw: The label string. Empty or whitespace-only input is valid.

    Returns:
        Entries in input order.

    Raises:
        MalformedLabelError: For the first entry with an empty name.
    """
    return [parse_label(entry) for entry in split_entries(raw)]
