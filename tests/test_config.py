"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from rolegate.config import Config


def test_defaults(tmp_path: Path) -> None:
    config = Config.load(tmp_path / "missing.yaml")
    assert config.log_level == "WARNING"
    assert config.catalog_path is None


def test_yaml_values(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("log_level: DEBUG\ncatalog_path: /etc/roles.yaml\nunknown: 1\n")
    config = Config.load(path)
    assert config.log_level == "DEBUG"
    assert config.catalog_path == Path("/etc/roles.yaml")


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("log_level: DEBUG\ncatalog_path: /etc/roles.yaml\n")
    monkeypatch.setenv("ROLEGATE_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ROLEGATE_CATALOG", str(tmp_path / "roles.json"))

    config = Config.load(path)
    assert config.log_level == "ERROR"
    assert config.catalog_path == tmp_path / "roles.json"


def test_config_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env-config.yaml"
    path.write_text("log_level: INFO\n")
    monkeypatch.setenv("ROLEGATE_CONFIG", str(path))

    config = Config.load()
    assert config.config_path == path
    assert config.log_level == "INFO"


def test_save_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.yaml"
    config = Config(config_path=path, log_level="INFO", catalog_path=tmp_path / "roles.yaml")
    config.save()

    loaded = Config.load(path)
    assert loaded.log_level == "INFO"
    assert loaded.catalog_path == tmp_path / "roles.yaml"


def test_non_mapping_document_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- log_level\n- DEBUG\n")
    config = Config.load(path)
    assert config.log_level == "WARNING"
    assert config.catalog_path is None
