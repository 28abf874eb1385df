"""Role-based permission resolution for rolegate."""

from rolegate.auth import all_match, any_match, dedupe, has_one, missing_permissions, resolve
from rolegate.catalog import CatalogError, RoleCatalog, load_catalog, load_user
from rolegate.models import Role, User

__all__ = [
    "CatalogError",
    "Role",
    "RoleCatalog",
    "User",
    "all_match",
    "any_match",
    "dedupe",
    "has_one",
    "load_catalog",
    "load_user",
    "missing_permissions",
    "resolve",
]
