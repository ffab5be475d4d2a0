"""Non-interactive runner registration.

Ties the label parser and validator to a :class:`RegistrationTransport`:

    1. load configuration,
    2. parse and validate labels,
    3. check the remaining arguments,
    4. call the transport,
    5. persist the returned credentials.

Any failure in steps 1-3 is raised before the transport is touched, so a bad
label string never causes network traffic or writes anything to disk.
"""

from __future__ import annotations

import logging
import socket
from pathlib import Path

from runner_register.config import Config, load_config
from runner_register.labels import LabelPolicy, LabelSpec, parse_labels, validate_labels
from runner_register.models import RegisterArgs, RegisteredRunner, RegistrationRequest
from runner_register.protocol import RegistrationTransport
from runner_register.runner_file import RunnerFile

logger = logging.getLogger("runner_register.registration")


class RegistrationArgsError(ValueError):
    """A required registration argument is missing or empty."""


def resolve_labels(raw: str, policy: LabelPolicy, defaults: list[str] | None = None) -> list[LabelSpec]:
    """Parse and validate ``raw``, falling back to ``defaults`` when it is blank.

    Raises:
        LabelError: The first parse or validation error.
    """
    raw = raw.strip()
    if not raw and defaults:
        raw = ",".join(defaults)
    return validate_labels(parse_labels(raw), policy).unwrap()


def _check_args(args: RegisterArgs) -> None:
    if not args.instance_addr.strip():
        raise RegistrationArgsError("instance address is empty")
    if not args.token.strip():
        raise RegistrationArgsError("token is empty")


async def register_non_interactive(
    config_file: str | Path,
    args: RegisterArgs,
    *,
    transport: RegistrationTransport,
    policy: LabelPolicy | None = None,
    runner_file: RunnerFile | None = None,
    config: Config | None = None,
) -> RegisteredRunner:
    """Register a runner from pre-supplied arguments, without prompting.

    Args:
        config_file: Path to a YAML config file, or "" for defaults.
        args: Instance address, token, labels and name.
        transport: Performs the actual registration call.
        policy: Label policy. Defaults to the one built from the config.
        runner_file: Where to persist the result. Defaults to the config's
            ``runner.file``.
        config: Already loaded configuration. When given, ``config_file`` is
            not read again.

    Returns:
        The registered runner as returned by the transport.

    Raises:
        LabelError: If the labels are malformed, use an unsupported schema,
            or repeat a name. The transport is not called.
        RegistrationArgsError: If the instance address or token is empty.
        TransportError: Propagated unchanged from the transport.
    """
    if config is None:
        config = load_config(config_file)
    policy = policy or config.label_policy()

    labels = resolve_labels(args.labels, policy, config.runner.labels)
    logger.debug("Validated %d label(s)", len(labels))
    _check_args(args)

    request = RegistrationRequest(
        token=args.token.strip(),
        instance_addr=args.instance_addr.strip(),
        labels=labels,
        name=args.name.strip() or socket.gethostname(),
    )

    logger.info("Registering runner %s with %s", request.name, request.instance_addr)
    registered = await transport.register(request)

    if not registered.address:
        registered = registered.model_copy(update={"address": request.instance_addr})
    (runner_file or RunnerFile(config.runner.file)).save(registered)
    logger.info("Runner %s registered (id=%s)", registered.name, registered.id)
    return registered
