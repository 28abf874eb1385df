"""Role catalog indexing and YAML/JSON loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from rolegate.models.role import Role
from rolegate.models.user import User

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


class CatalogError(Exception):
    """Raised when a catalog or user file cannot be read or parsed."""


def read_field(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-style record, or None."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def as_list(value: Any) -> list[Any]:
    """Coerce a field value to a list.

    Lists and tuples are copied, a lone string becomes a one-item list and
    anything else, None included, is empty.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def read_list(record: Any, name: str) -> list[Any]:
    """Read a list field, treating a missing or malformed value as empty."""
    return as_list(read_field(record, name))


class RoleCatalog:
    """All roles known to the caller, looked up by key.

    Roles keep their given order. When several roles share a key, the first
    one is the only one ever returned by :meth:`get`.
    """

    def __init__(self, roles: Iterable[Role | Mapping[str, Any]] | None = None) -> None:
        self._roles: list[Role | Mapping[str, Any]] = list(roles or [])
        self._index: dict[str, Role | Mapping[str, Any]] = {}
        for role in self._roles:
            key = read_field(role, "key")
            if isinstance(key, str):
                self._index.setdefault(key, role)

    def __iter__(self) -> Iterator[Role | Mapping[str, Any]]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._index

    def get(self, key: Any) -> Role | Mapping[str, Any] | None:
        if not isinstance(key, str):
            return None
        return self._index.get(key)

    def keys(self) -> list[str]:
        return list(self._index)


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
        logger.warning("Unsupported file type: %s", path)
        raise CatalogError(f"Unsupported file type '{suffix}' for {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        raise CatalogError(f"Cannot read {path}") from e
    try:
        if suffix in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.warning("Cannot parse %s: %s", path, e)
        raise CatalogError(f"Cannot parse {path}") from e


def load_catalog(path: str | Path) -> RoleCatalog:
    """Load roles from a YAML or JSON file.

    The document is either a list of role mappings or a mapping whose
    ``roles`` entry is that list.

    Raises:
        CatalogError: If the file is unreadable, unparseable or the wrong shape
    """
    path = Path(path)
    data = _read_document(path)
    if isinstance(data, Mapping):
        data = data.get("roles")
    if not isinstance(data, list):
        logger.warning("Catalog %s has no role list", path)
        raise CatalogError(f"Expected a list of roles in {path}")

    try:
        roles = [Role.model_validate(entry) for entry in data]
    except ValidationError as e:
        logger.warning("Invalid role in %s: %s", path, e)
        raise CatalogError(f"Invalid role definition in {path}") from e

    catalog = RoleCatalog(roles)
    logger.info("Loaded %d roles from %s", len(catalog), path)
    return catalog


def load_user(path: str | Path) -> User:
    """Load a single user mapping from a YAML or JSON file.

    Raises:
        CatalogError: If the file is unreadable, unparseable or not a mapping
    """
    path = Path(path)
    data = _read_document(path)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        logger.warning("User file %s is not a mapping", path)
        raise CatalogError(f"Expected a user mapping in {path}")

    try:
        return User.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid user in %s: %s", path, e)
        raise CatalogError(f"Invalid user definition in {path}") from e
