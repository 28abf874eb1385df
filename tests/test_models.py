"""Tests for User and Role models."""

from __future__ import annotations

from rolegate.catalog import read_list
from rolegate.models import Role, User


def test_user_defaults():
    user = User()
    assert user.id is None
    assert user.roles is None
    assert user.permissions is None
    assert read_list(user, "roles") == []
    assert read_list(user, "permissions") == []


def test_user_ignores_extra_fields():
    user = User.model_validate({"id": "u-1", "roles": ["a"], "email": "x@example.com"})
    assert user.id == "u-1"
    assert user.roles == ["a"]
    assert not hasattr(user, "email")


def test_role_defaults():
    role = Role(key="viewer")
    assert role.permissions is None
    assert role.description is None
    assert read_list(role, "permissions") == []


def test_role_ignores_extra_fields():
    role = Role.model_validate({"key": "viewer", "permissions": ["p:view"], "scope": "all"})
    assert role.permissions == ["p:view"]
    assert not hasattr(role, "scope")
