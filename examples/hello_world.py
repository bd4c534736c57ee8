"""
policy_store — Hello World

Values live in a nested document addressed by colon-delimited paths.
Every read and write is checked against a per-key permission, falling
back to the store's default policy.
"""

import logging

from policy_store import AccessDeniedError, PolicyStore, StoreConfig


def main():
    logging.basicConfig(level=logging.INFO, format="  [%(levelname)s] %(message)s")

    # ──────────────────────────────────────
    #  1. Create the store from configuration
    # ──────────────────────────────────────
    config = StoreConfig.model_validate(
        {
            "default_policy": "rw",
            "permissions": {"audit": "w", "secrets": "none"},
        }
    )
    store = PolicyStore.from_config(config)

    # ──────────────────────────────────────
    #  2. Write nested values
    # ──────────────────────────────────────
    print("=== Writes ===\n")
    store.write("user:profile:name", "alice")
    store.write("user:profile:roles", ["admin", "editor"])
    store.write_entries({"theme": "dark", "audit": "login at 09:00"})
    print(f"  user:profile = {store.read('user:profile')}")

    # ──────────────────────────────────────
    #  3. Absent values are not errors
    # ──────────────────────────────────────
    print("\n=== Absent values ===\n")
    print(f"  user:missing      = {store.read('user:missing')}")
    print(f"  theme:nested      = {store.read('theme:nested', 'n/a')}")

    # ──────────────────────────────────────
    #  4. Denied operations
    # ──────────────────────────────────────
    print("\n=== Denied operations ===\n")
    for action in (lambda: store.read("audit"), lambda: store.write("secrets", "x")):
        try:
            action()
        except AccessDeniedError as e:
            print(f"  [DENIED] {e}")

    # ──────────────────────────────────────
    #  5. Lock the store down
    # ──────────────────────────────────────
    print("\n=== Readable entries ===\n")
    store.default_policy = "r"
    for key, value in store.entries().items():
        print(f"  {key} = {value}")

    print(f"\n  export = {store.export()}")


if __name__ == "__main__":
    main()
