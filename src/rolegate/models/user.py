"""User model carrying role assignments and direct grants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user with optional role keys and directly granted permissions.

    Both lists keep the order they were given in.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    roles: list[str] | None = None
    permissions: list[str] | None = None
