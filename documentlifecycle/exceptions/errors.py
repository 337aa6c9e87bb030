"""Document lifecycle exceptions.

Lifecycle rule violations are reported as outcomes, not raised. These types
cover programmer errors and the opt-in ``ActionResult.raise_for_outcome()``.
"""
from __future__ import annotations


class LifecycleError(Exception):
    """Base exception for the document lifecycle feature."""


class UnknownRoleError(LifecycleError, ValueError):
    """Raised when a role string does not name a known system role."""


class PermissionDeniedError(LifecycleError):
    """The actor's role or identity does not satisfy the action's guard."""


class InvalidTransitionError(LifecycleError):
    """The action is not defined for the document's current state."""
