"""Tests for StoreConfig and PolicyStore.from_config."""

import pytest
from pydantic import ValidationError

from policy_store import AccessDeniedError, Permission, PolicyStore, StoreConfig


def test_defaults():
    config = StoreConfig()
    assert config.default_policy is Permission.READ_WRITE
    assert config.permissions == {}


def test_validate_labels():
    config = StoreConfig.model_validate(
        {"default_policy": "r", "permissions": {"profile": "rw", "secrets": "none"}}
    )
    assert config.default_policy is Permission.READ
    assert config.permissions == {
        "profile": Permission.READ_WRITE,
        "secrets": Permission.NONE,
    }


def test_validate_json():
    config = StoreConfig.model_validate_json('{"default_policy": "none"}')
    assert config.default_policy is Permission.NONE


def test_rejects_unknown_label():
    with pytest.raises(ValidationError):
        StoreConfig.model_validate({"permissions": {"a": "read"}})


def test_rejects_unknown_field():
    with pytest.raises(ValidationError):
        StoreConfig.model_validate({"default": "r"})


def test_from_config_model():
    store = PolicyStore.from_config(
        StoreConfig(default_policy=Permission.READ, permissions={"notes": Permission.READ_WRITE})
    )
    assert store.default_policy is Permission.READ
    assert store.write("notes", "hi") == "hi"
    with pytest.raises(AccessDeniedError):
        store.write("other", 1)


def test_from_config_dict():
    store = PolicyStore.from_config({"default_policy": "w", "permissions": {"a": "r"}})
    assert store.allowed_to_read("a")
    assert not store.allowed_to_write("a")
    assert store.allowed_to_write("b")
    assert not store.allowed_to_read("b")
