"""Protocol definitions for the registration transport.

The orchestration in :mod:`runner_register.registration` validates labels and
then hands a :class:`~runner_register.registration.RegistrationRequest` to a
``RegistrationTransport``. The transport talks to the remote instance; its
errors are passed back to the caller untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from runner_register.models import RegisteredRunner, RegistrationRequest


class TransportError(RuntimeError):
    """Raised when the remote instance rejects or fails a registration."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportUnavailableError(TransportError):
    """Raised when the remote instance is not reachable.

    Callers can catch this to print a clean "instance unreachable" message
    instead of an opaque network error.
    """


class RegistrationTransport(Protocol):
    """Sends a validated registration to the remote instance.

    Implementations must not be called before the labels in the request
    have been validated.
    """

    async def register(self, request: RegistrationRequest) -> RegisteredRunner:
        """Register the runner.

        Args:
            request: Token, instance address, runner name and validated labels.

        Returns:
            The runner record issued by the instance (id, uuid, token, ...).

        Raises:
            TransportError: If the instance rejected the registration.
            TransportUnavailableError: If the instance could not be reached.
        """
        ...
