# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration schema for constructing a :class:`PolicyStore`.

Hosts describe the access rules declaratively (a default policy plus a
per-key permission table) and hand the result to
:meth:`PolicyStore.from_config`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from policy_store.permissions import Permission


class StoreConfig(BaseModel):
    """Access configuration for a store.

    Attributes:
        default_policy: Permission applied to keys without an explicit entry
        permissions: Explicit permission per top-level key

    Example:
        config = StoreConfig.model_validate(
            {"default_policy": "r", "permissions": {"profile": "rw"}}
        )
    """

    model_config = ConfigDict(extra="forbid")

    default_policy: Permission = Permission.READ_WRITE
    permissions: dict[str, Permission] = Field(default_factory=dict)
