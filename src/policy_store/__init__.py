"""policy_store — an in-memory key-value store with per-key access control.

Values live in a nested document addressed by colon-delimited paths.
Every read and write is checked against a per-key permission, falling
back to a store-wide default policy.
"""

from policy_store.config import StoreConfig
from policy_store.exceptions import (
    AccessDeniedError,
    InvalidPathError,
    InvalidPermissionError,
    ReadFailureError,
    StoreError,
)
from policy_store.paths import DELIMITER
from policy_store.permissions import Permission
from policy_store.store import PolicyStore

__all__ = [
    "DELIMITER",
    "AccessDeniedError",
    "InvalidPathError",
    "InvalidPermissionError",
    "Permission",
    "PolicyStore",
    "ReadFailureError",
    "StoreConfig",
    "StoreError",
]
