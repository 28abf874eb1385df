"""Effective permission resolution and authorization checks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from rolegate.catalog import RoleCatalog, read_list
from rolegate.models.role import Role
from rolegate.models.user import User

logger = logging.getLogger(__name__)

UserLike = User | Mapping[str, Any] | None
RolesLike = RoleCatalog | Iterable[Role | Mapping[str, Any]] | None
PermissionFilter = Callable[[list[str]], Sequence[str]]


def _is_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def _as_catalog(all_roles: RolesLike) -> RoleCatalog:
    if isinstance(all_roles, RoleCatalog):
        return all_roles
    if not _is_collection(all_roles):
        return RoleCatalog()
    return RoleCatalog(all_roles)


def _as_keys(permission_keys: Any) -> list[Any]:
    if isinstance(permission_keys, str):
        return [permission_keys]
    if not _is_collection(permission_keys):
        return []
    return list(permission_keys)


def resolve(
    user: UserLike,
    all_roles: RolesLike,
    filter: PermissionFilter | None = None,
) -> Sequence[str]:
    """Merge a user's role permissions with their direct permissions.

    Roles are visited in the order the user lists them, each contributing its
    permissions in stored order; direct permissions follow. Nothing is
    de-duplicated or sorted. Role keys missing from the catalog contribute
    nothing, and fields that are missing or not lists read as empty.

    Args:
        user: The user, a mapping with the same fields, or None
        all_roles: Every known role, as a RoleCatalog or a sequence of roles
        filter: Optional callable applied to the merged list; its result is
            returned as is and any exception it raises propagates

    Returns:
        Flat list of permission identifiers
    """
    catalog = _as_catalog(all_roles)
    permissions: list[str] = []

    for role_key in read_list(user, "roles"):
        role = catalog.get(role_key)
        if role is None:
            logger.debug("Role %r not in catalog, skipping", role_key)
            continue
        permissions.extend(read_list(role, "permissions"))

    permissions.extend(read_list(user, "permissions"))
    logger.debug("Resolved %d permissions", len(permissions))

    if filter is not None:
        return filter(permissions)
    return permissions


def has_one(user: UserLike, permission_key: str, all_roles: RolesLike) -> bool:
    """Check if the user holds a single permission."""
    return permission_key in resolve(user, all_roles)


def all_match(user: UserLike, permission_keys: Iterable[str], all_roles: RolesLike) -> bool:
    """Check if the user holds every permission in ``permission_keys``.

    An empty query is always satisfied.
    """
    return not missing_permissions(user, permission_keys, all_roles)


def any_match(user: UserLike, permission_keys: Iterable[str], all_roles: RolesLike) -> bool:
    """Check if the user holds at least one permission in ``permission_keys``.

    An empty query never matches.
    """
    # Compared as a list: granted entries need not be hashable.
    granted = resolve(user, all_roles)
    return any(key in granted for key in _as_keys(permission_keys))


def missing_permissions(
    user: UserLike, permission_keys: Iterable[str], all_roles: RolesLike
) -> list[str]:
    """Return the requested permissions the user lacks, in query order."""
    granted = resolve(user, all_roles)
    return [key for key in _as_keys(permission_keys) if key not in granted]
