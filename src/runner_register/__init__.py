"""runner-register: validate runner labels and register runners with an instance."""

from runner_register._version import __version__
from runner_register.client import HttpRegistrationClient
from runner_register.labels import (
    DuplicateLabelError,
    LabelError,
    LabelPolicy,
    LabelSpec,
    MalformedLabelError,
    UnsupportedSchemaError,
    check_labels,
    parse_labels,
    validate_labels,
)
from runner_register.models import RegisterArgs, RegisteredRunner, RegistrationRequest
from runner_register.protocol import RegistrationTransport, TransportError, TransportUnavailableError
from runner_register.registration import RegistrationArgsError, register_non_interactive
from runner_register.runner_file import RunnerFile

__all__ = [
    "__version__",
    # Labels
    "LabelSpec",
    "LabelPolicy",
    "parse_labels",
    "validate_labels",
    "check_labels",
    "LabelError",
    "MalformedLabelError",
    "UnsupportedSchemaError",
    "DuplicateLabelError",
    # Registration
    "RegisterArgs",
    "RegistrationRequest",
    "RegisteredRunner",
    "RegistrationArgsError",
    "RegistrationTransport",
    "RunnerFile",
    "register_non_interactive",
    # Transport
    "TransportError",
    "TransportUnavailableError",
    # HTTP client
    "HttpRegistrationClient",
]
