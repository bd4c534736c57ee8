"""Shared test fixtures."""

import pytest

from policy_store import Permission, PolicyStore


@pytest.fixture
def store():
    return PolicyStore()


@pytest.fixture
def locked_store():
    return PolicyStore(default_policy=Permission.NONE)


@pytest.fixture
def mixed_store():
    """Read-only by default, with a writable ``drafts`` key and a hidden ``secrets`` key."""
    s = PolicyStore()
    s.write("profile", {"name": "alice", "tags": ["admin"]})
    s.write("drafts", "v1")
    s.write("secrets", {"token": "abc"})
    s.write("settings:theme", "dark")
    s.set_permission("drafts", "rw")
    s.set_permission("secrets", "none")
    s.default_policy = "r"
    return s
