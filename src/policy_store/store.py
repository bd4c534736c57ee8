"""PolicyStore — a permission-gated facade over a nested document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from policy_store.config import StoreConfig
from policy_store.exceptions import AccessDeniedError, ReadFailureError
from policy_store.paths import split_path
from policy_store.permissions import Permission

logger = logging.getLogger(__name__)

# JSON-like values, or a zero-argument callable that is stored but never called.
Value = str | int | float | bool | None | list[Any] | dict[str, Any] | Callable[[], Any]


def _detach(value: Any) -> Any:
    """Rebuild dicts and lists so callers never share structure with the document.

    Every other leaf, callables included, is passed through unchanged.
    """
    if isinstance(value, dict):
        return {key: _detach(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_detach(item) for item in value]
    return value


class PolicyStore:
    """In-memory key-value store with per-key read/write permissions.

    Values live in a nested document addressed by ``":"``-separated paths
    (``"user:profile:name"``).  Each top-level key may carry its own
    :class:`Permission`; keys without one fall back to ``default_policy``.

    ``read`` and ``write`` resolve the permission using the *whole* path as
    the lookup key, whereas ``entries`` uses the bare top-level key.  An
    entry for ``"user"`` therefore governs ``entries()`` and
    ``read("user")`` but not ``read("user:profile")``.

    Parameters:
        default_policy: Permission for keys without an explicit entry.
        permissions:    Initial key → permission table.
    """

    def __init__(
        self,
        *,
        default_policy: Permission | str = Permission.READ_WRITE,
        permissions: Mapping[str, Permission | str] | None = None,
    ) -> None:
        self._default_policy = Permission.parse(default_policy)
        self._permissions: dict[str, Permission] = {
            key: Permission.parse(label) for key, label in (permissions or {}).items()
        }
        self._data: dict[str, Any] = {}

    @classmethod
    def from_config(cls, config: StoreConfig | Mapping[str, Any]) -> PolicyStore:
        """Build a store from a :class:`StoreConfig` or an equivalent dict."""
        if not isinstance(config, StoreConfig):
            config = StoreConfig.model_validate(config)
        return cls(default_policy=config.default_policy, permissions=config.permissions)

    # ── permissions ──────────────────────────────────────────

    @property
    def default_policy(self) -> Permission:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, value: Permission | str) -> None:
        self._default_policy = Permission.parse(value)
        logger.info("Default policy set to '%s'", self._default_policy.value)

    def set_permission(self, key: str, permission: Permission | str) -> None:
        """Attach an explicit permission to *key*, overriding the default."""
        self._permissions[key] = Permission.parse(permission)
        logger.info("Permission for '%s' set to '%s'", key, self._permissions[key].value)

    def get_permission(self, key: str) -> Permission:
        """Return the permission that applies to *key* (explicit or default)."""
        return self._permissions.get(key, self._default_policy)

    def permissions(self) -> dict[str, Permission]:
        """Return a copy of the explicit permission table."""
        return dict(self._permissions)

    def allowed_to_read(self, key: str) -> bool:
        return self.get_permission(key).can_read

    def allowed_to_write(self, key: str) -> bool:
        return self.get_permission(key).can_write

    # ── document access ──────────────────────────────────────

    def read(self, path: str, default: Any = None) -> Any:
        """Return the value stored at *path*, or *default* when absent.

        A missing key, or an intermediate segment that is not a mapping,
        makes the value absent; neither is an error.

        Raises:
            AccessDeniedError: If *path* is not readable.
            InvalidPathError:  If *path* is empty or not a string.
        """
        keys = split_path(path)
        if not self.allowed_to_read(path):
            logger.warning("Read denied for '%s'", path)
            raise AccessDeniedError("read", path, self.get_permission(path))

        current = self._data
        for key in keys[:-1]:
            child = current.get(key)
            if not isinstance(child, dict):
                return default
            current = child

        last = keys[-1]
        if last not in current:
            return default
        logger.debug("Read '%s'", path)
        return _detach(current[last])

    def write(self, path: str, value: Value) -> Value:
        """Store *value* at *path* and return it.

        Intermediate segments that are missing, or that hold anything other
        than a mapping, are replaced with empty mappings.

        Raises:
            AccessDeniedError: If *path* is not writable.
            InvalidPathError:  If *path* is empty or not a string.
        """
        keys = split_path(path)
        if not self.allowed_to_write(path):
            logger.warning("Write denied for '%s'", path)
            raise AccessDeniedError("write", path, self.get_permission(path))

        current = self._data
        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                if key in current:
                    logger.debug("Replacing non-mapping value at '%s' while writing '%s'", key, path)
                current[key] = {}
            current = current[key]

        current[keys[-1]] = _detach(value)
        logger.debug("Wrote '%s'", path)
        return value

    def write_entries(self, entries: Mapping[str, Value]) -> None:
        """Write every ``path -> value`` pair in *entries*.

        Not atomic: pairs written before a denied one stay written.

        Raises:
            AccessDeniedError: On the first pair that is not writable.
        """
        for path, value in entries.items():
            self.write(path, value)

    def entries(self) -> dict[str, Any]:
        """Return the readable top-level entries as a new flat dict.

        Keys that are not readable are omitted.

        Raises:
            ReadFailureError: If building the snapshot fails unexpectedly.
        """
        try:
            return {
                key: _detach(value)
                for key, value in self._data.items()
                if self.allowed_to_read(key)
            }
        except Exception as exc:
            logger.exception("Failed to enumerate store entries")
            raise ReadFailureError("entries", str(exc)) from exc

    # ── introspection ────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the access configuration."""
        return {
            "default_policy": self._default_policy.value,
            "permissions": {key: perm.value for key, perm in self._permissions.items()},
            "key_count": len(self._data),
        }
