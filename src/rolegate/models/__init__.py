"""rolegate data models."""

from rolegate.models.role import Role
from rolegate.models.user import User

__all__ = ["Role", "User"]
