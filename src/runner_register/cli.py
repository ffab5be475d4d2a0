"""Command line entry point: ``runner-register register``."""

from __future__ import annotations

import asyncio
import logging
import socket

import typer

from runner_register.client import HttpRegistrationClient
from runner_register.config import ConfigError, load_config
from runner_register.labels import LabelError, LabelPolicy, check_labels
from runner_register.models import RegisterArgs
from runner_register.protocol import TransportError
from runner_register.registration import RegistrationArgsError, register_non_interactive

app = typer.Typer(add_completion=False, help="Register a runner with an orchestration instance.")

logger = logging.getLogger("runner_register.cli")


@app.callback()
def main() -> None:
    """Runner registration tools."""


def _setup_logging(level: str, verbose: bool) -> None:
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _prompt_labels(policy: LabelPolicy, default: str) -> str:
    while True:
        raw = typer.prompt("Runner labels (comma separated, empty for defaults)", default=default)
        result = check_labels(raw, policy)
        if result.ok:
            return raw
        typer.echo(f"Invalid labels: {result.error}", err=True)


def _prompt_missing(args: RegisterArgs, policy: LabelPolicy) -> RegisterArgs:
    return RegisterArgs(
        instance_addr=args.instance_addr or typer.prompt("Instance URL"),
        token=args.token or typer.prompt("Runner registration token", hide_input=True),
        name=args.name or typer.prompt("Runner name", default=socket.gethostname()),
        labels=args.labels or _prompt_labels(policy, default=""),
    )


@app.command()
def register(
    instance: str = typer.Option("", "--instance", help="Instance address, e.g. http://localhost:3000"),
    token: str = typer.Option("", "--token", help="Runner registration token"),
    name: str = typer.Option("", "--name", help="Runner name (defaults to the host name)"),
    labels: str = typer.Option("", "--labels", help="Comma separated name[:schema[:argument]] labels"),
    config_path: str = typer.Option("", "--config", "-c", help="Path to a YAML config file"),
    no_interactive: bool = typer.Option(False, "--no-interactive", help="Do not prompt for input"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Register this runner and store its credentials."""
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None
    _setup_logging(cfg.log.level, verbose)

    args = RegisterArgs(instance_addr=instance, token=token, labels=labels, name=name)
    if not no_interactive:
        args = _prompt_missing(args, cfg.label_policy())

    async def _run() -> None:
        async with HttpRegistrationClient(args.instance_addr, timeout_s=cfg.runner.timeout) as client:
            runner = await register_non_interactive(config_path, args, transport=client, config=cfg)
        typer.echo(f"Runner {runner.name} registered (id={runner.id}).")

    try:
        asyncio.run(_run())
    except (LabelError, RegistrationArgsError, ConfigError, TransportError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None
