"""Core data models for runner registration."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from runner_register._version import __version__
from runner_register.labels import LabelSpec


@dataclass
class RegisterArgs:
    """Arguments supplied on the command line for a registration.

    Attributes:
        instance_addr: Base URL of the orchestration instance.
        token: Registration token issued by the instance.
        labels: Raw label string, e.g. ``"ubuntu:host,builder:docker:node:18"``.
            Empty means "use the configured default labels".
        name: Runner name. Defaults to the host name.
    """

    instance_addr: str = ""
    token: str = ""
    labels: str = ""
    name: str = ""


class RegistrationRequest(BaseModel):
    """What the transport receives. Only built from validated labels."""

    token: str
    instance_addr: str
    labels: list[LabelSpec] = Field(default_factory=list)
    name: str = ""
    version: str = __version__

    def label_strings(self) -> list[str]:
        return [str(label) for label in self.labels]


class RegisteredRunner(BaseModel):
    """Runner record returned by the instance and stored in the runner file."""

    id: int = 0
    uuid: str = ""
    name: str = ""
    token: str = ""
    address: str = ""
    labels: list[str] = Field(default_factory=list)
