from __future__ import annotations
from enum import Enum
from typing import Union

from documentlifecycle.exceptions.errors import UnknownRoleError


class SystemRole(str, Enum):
    """Roles an actor can act in. Supplied per call, never persisted."""
    AUTHOR = "Author"
    MODERATOR = "Moderator"
    ADMIN = "Admin"

    @classmethod
    def parse(cls, value: Union["SystemRole", str]) -> "SystemRole":
        """Accept a member or a case-insensitive role name/value."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for role in cls:
            if key in (role.value.lower(), role.name.lower()):
                return role
        raise UnknownRoleError(f"Unknown role: {value!r}")

    def __str__(self) -> str:
        return self.value
