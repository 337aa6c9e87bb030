from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .system_role import SystemRole


@dataclass(frozen=True, slots=True)
class Actor:
    """
    The (role, name) pair attempting an action.

    ``name`` is an opaque identity; equality is the only operation used on it.
    """
    role: SystemRole
    name: str

    @classmethod
    def of(cls, role: Union[SystemRole, str], name: str) -> "Actor":
        return cls(role=SystemRole.parse(role), name=name)

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value})"
