"""Permission labels and their read/write capabilities."""

from __future__ import annotations

from enum import Enum

from policy_store.exceptions import InvalidPermissionError


class Permission(str, Enum):
    """Access label attached to a top-level key (or used as the default)."""

    READ = "r"
    WRITE = "w"
    READ_WRITE = "rw"
    NONE = "none"

    @classmethod
    def parse(cls, label: Permission | str) -> Permission:
        """Return the member for *label*, accepting either a member or its value."""
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError as exc:
            raise InvalidPermissionError(label) from exc

    @property
    def can_read(self) -> bool:
        return self in (Permission.READ, Permission.READ_WRITE)

    @property
    def can_write(self) -> bool:
        return self in (Permission.WRITE, Permission.READ_WRITE)
