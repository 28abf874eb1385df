"""Permission resolution and authorization checks."""

from rolegate.auth.filters import dedupe, prefixed, sort_unique
from rolegate.auth.permissions import all_match, any_match, has_one, missing_permissions, resolve

__all__ = [
    "all_match",
    "any_match",
    "dedupe",
    "has_one",
    "missing_permissions",
    "prefixed",
    "resolve",
    "sort_unique",
]
