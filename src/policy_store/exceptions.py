"""Custom exceptions for the policy_store package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from policy_store.permissions import Permission


class StoreError(Exception):
    """Base exception for all store-related errors."""


class AccessDeniedError(StoreError):
    """Raised when the resolved permission does not allow the operation."""

    def __init__(self, operation: str, path: str, permission: Permission) -> None:
        self.operation = operation
        self.path = path
        self.permission = permission
        super().__init__(
            f"{operation.capitalize()} access denied for '{path}' "
            f"(permission '{permission.value}')"
        )


class ReadFailureError(StoreError):
    """Raised when enumerating the document fails unexpectedly."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Read failure during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidPathError(StoreError, ValueError):
    """Raised when a path is not a non-empty string."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Invalid store path: {path!r}")


class InvalidPermissionError(StoreError, ValueError):
    """Raised when a permission label is not one of ``r``, ``w``, ``rw``, ``none``."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Unknown permission label: {label!r}")
