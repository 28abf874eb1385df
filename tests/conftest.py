"""Shared test fixtures for rolegate."""

from __future__ import annotations

from pathlib import Path

import pytest

from rolegate.models import Role, User


@pytest.fixture
def roles() -> list[Role]:
    return [
        Role(key="editor", permissions=["p:edit", "p:publish"]),
        Role(key="viewer", permissions=["p:view"]),
        Role(key="admin", permissions=["read", "write", "delete"]),
    ]


@pytest.fixture
def editor() -> User:
    return User(id="u-1", roles=["editor", "viewer"], permissions=["p:direct"])


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROLEGATE_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("ROLEGATE_CATALOG", raising=False)
    monkeypatch.delenv("ROLEGATE_LOG_LEVEL", raising=False)
