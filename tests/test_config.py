"""Tests for configuration loading."""

from pathlib import Path

import pytest

from runner_register.config import Config, ConfigError, load_config
from runner_register.labels import DEFAULT_SCHEMAS


def test_defaults_without_path():
    config = load_config("")
    assert config == Config()
    assert config.runner.file == Path(".runner")
    assert config.runner.labels == []
    assert config.label_policy().schemas == DEFAULT_SCHEMAS


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "log:\n"
        "  level: debug\n"
        "runner:\n"
        "  labels: [ubuntu]\n"
        "  schemas: [host]\n"
        "  allow_bare_names: false\n"
        "  timeout: 5\n"
    )
    config = load_config(path)
    assert config.log.level == "debug"
    assert config.runner.timeout == 5.0
    policy = config.label_policy()
    assert policy.schemas == frozenset({"host"})
    assert policy.allow_bare_names is False


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_default_schema_outside_whitelist(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("runner:\n  schemas: [docker]\n  default_schema: host\n")
    with pytest.raises(ConfigError, match="invalid config"):
        load_config(path)
