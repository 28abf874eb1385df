"""Role model for the permission catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Role(BaseModel):
    """A named bundle of permission identifiers."""

    model_config = ConfigDict(extra="ignore")

    key: str
    permissions: list[str] | None = None
    description: str | None = None
