from .errors import (
    InvalidTransitionError,
    LifecycleError,
    PermissionDeniedError,
    UnknownRoleError,
)

__all__ = [
    "LifecycleError",
    "UnknownRoleError",
    "PermissionDeniedError",
    "InvalidTransitionError",
]
