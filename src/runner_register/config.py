"""YAML configuration for runner registration.

Example::

    log:
      level: info
    runner:
      file: .runner
      labels: ["ubuntu:host"]
      schemas: [docker, host, vm]
      allow_bare_names: true
      default_schema: null
      timeout: 30
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from runner_register.labels import DEFAULT_SCHEMAS, LabelPolicy

logger = logging.getLogger("runner_register.config")


class ConfigError(ValueError):
    """The configuration file is missing or invalid."""


class LogConfig(BaseModel):
    level: str = "info"


class RunnerConfig(BaseModel):
    file: Path = Path(".runner")
    labels: list[str] = Field(default_factory=list)
    schemas: list[str] = Field(default_factory=lambda: sorted(DEFAULT_SCHEMAS))
    allow_bare_names: bool = True
    default_schema: str | None = None
    timeout: float = 30.0


class Config(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)

    def label_policy(self) -> LabelPolicy:
        """Build the label policy described by the ``runner`` section."""
        return LabelPolicy(
            schemas=frozenset(self.runner.schemas),
            allow_bare_names=self.runner.allow_bare_names,
            default_schema=self.runner.default_schema,
        )


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path``, or return defaults when it is empty.

    Raises:
        ConfigError: If the file does not exist, is not a YAML mapping, or
            fails validation.
    """
    if not path:
        return Config()

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    try:
        config = Config.model_validate(raw)
        # Surfaces a default_schema outside the whitelist at load time.
        config.label_policy()
    except ValidationError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc
    logger.debug("Loaded config from %s", path)
    return config
