"""Ready-made filters for :func:`rolegate.auth.permissions.resolve`."""

from __future__ import annotations

from collections.abc import Callable


def dedupe(permissions: list[str]) -> list[str]:
    """Drop repeated permissions, keeping the first occurrence of each."""
    return list(dict.fromkeys(permissions))


def sort_unique(permissions: list[str]) -> list[str]:
    return sorted(set(permissions))


def prefixed(prefix: str) -> Callable[[list[str]], list[str]]:
    """Build a filter that keeps only permissions starting with ``prefix``."""

    def _filter(permissions: list[str]) -> list[str]:
        return [p for p in permissions if p.startswith(prefix)]

    return _filter
