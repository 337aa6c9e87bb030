"""
===============================================================================
Permission Policy – role and ownership guards
-------------------------------------------------------------------------------
Purpose:
    Centralize the two guard primitives the lifecycle states combine:
    role membership and document ownership.

Design:
    - Stateless, pure computations from Actor (+ the document's author).
    - No knowledge of lifecycle states; the states decide which guard
      applies to which action.

Rules:
    - Ownership: role AUTHOR and name equal to the document's author.
    - Role match: the actor's role is one of the required roles; identity
      is not checked.
===============================================================================
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from documentlifecycle.models.actor import Actor
from documentlifecycle.models.system_role import SystemRole

if TYPE_CHECKING:
    from documentlifecycle.models.document import Document


def has_role(actor: Actor, *roles: SystemRole) -> bool:
    """Return True if the actor acts in one of ``roles``."""
    return actor.role in roles


def is_owner(actor: Actor, document: "Document") -> bool:
    """Return True if the actor is the document's author acting as Author."""
    return actor.role is SystemRole.AUTHOR and actor.name == document.author
