"""Runner label specification language: parsing and validation."""

from .errors import DuplicateLabelError, LabelError, MalformedLabelError, UnsupportedSchemaError
from .models import LabelSpec, RawLabelEntry
from .parser import parse_label, parse_labels, split_entries
from .policy import DEFAULT_POLICY, DEFAULT_SCHEMAS, LabelPolicy
from .validator import ValidationResult, check_labels, validate_labels

__all__ = [
    # Models
    "LabelSpec",
    "RawLabelEntry",
    # Errors
    "LabelError",
    "MalformedLabelError",
    "UnsupportedSchemaError",
    "DuplicateLabelError",
    # Parsing
    "parse_label",
    "parse_labels",
    "split_entries",
    # Validation
    "LabelPolicy",
    "DEFAULT_POLICY",
    "DEFAULT_SCHEMAS",
    "ValidationResult",
    "validate_labels",
    "check_labels",
]
