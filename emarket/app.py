"""The emarket application: its stores, module accounts and genesis handling."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from emarket.address import acc_address_to_bech32, module_address
from emarket.app_config import (
    APP_NAME,
    AUTH,
    AUTH_KV_STORE_KEY,
    GENUTIL,
    GOV,
    VESTING,
    blocked_account_addresses,
    genesis_module_order,
    module_account_permissions,
)
from emarket.genesis import AppModule
from emarket.keeper import KVStore, Keeper
from emarket.types import MODULE_NAME, STORE_KEY

DEFAULT_NODE_HOME = str(Path.home() / f".{APP_NAME}")

CAPABILITY_MEM_STORE_KEY = "memory:capability"
PARAMS_TRANSIENT_STORE_KEY = "transient_params"

# Modules that keep no state of their own and so get no store.
_STATELESS_MODULES = frozenset({GENUTIL, VESTING})
_STORE_KEY_OVERRIDES = {AUTH: AUTH_KV_STORE_KEY}


class StoreKind(Enum):
    KV = "kv"
    MEMORY = "memory"
    TRANSIENT = "transient"


def get_macc_perms() -> dict[str, list[str]]:
    """Return a copy of the module account permissions keyed by account."""
    return {perm.account: list(perm.permissions) for perm in module_account_permissions()}


def blocked_addresses() -> dict[str, bool]:
    """Return the module accounts that may not receive funds."""
    blocked = blocked_account_addresses()
    names = blocked if blocked else list(get_macc_perms())
    return {name: True for name in names}


class App:
    """The application: named stores, the emarket module and its genesis flow."""

    def __init__(self) -> None:
        self.name = APP_NAME
        self._stores: dict[str, tuple[StoreKind, KVStore]] = {}
        for module in genesis_module_order():
            if module in _STATELESS_MODULES:
                continue
            key = _STORE_KEY_OVERRIDES.get(module, module)
            self._stores[key] = (StoreKind.KV, KVStore())
        self._stores[CAPABILITY_MEM_STORE_KEY] = (StoreKind.MEMORY, KVStore())
        self._stores[PARAMS_TRANSIENT_STORE_KEY] = (StoreKind.TRANSIENT, KVStore())

        authority = acc_address_to_bech32(module_address(GOV))
        store = self.get_key(STORE_KEY)
        if store is None:
            raise RuntimeError(f"store {STORE_KEY} is not registered")
        self.emarket_keeper = Keeper(store, authority)
        self.emarket_module = AppModule(self.emarket_keeper)
        self._raw_genesis: dict[str, Any] = {}

    def get_key(self, store_key: str) -> KVStore | None:
        """Return the key-value store registered under store_key, or None."""
        entry = self._stores.get(store_key)
        if entry is None or entry[0] is not StoreKind.KV:
            return None
        return entry[1]

    def kv_store_keys(self) -> dict[str, KVStore]:
        """Return every key-value store of the application by name."""
        return {name: store for name, (kind, store) in self._stores.items() if kind is StoreKind.KV}

    def init_chain(self, app_state: str | bytes | dict[str, Any]) -> None:
        """Initialise module state from an application genesis state."""
        if isinstance(app_state, (str, bytes)):
            try:
                state = json.loads(app_state) if app_state else {}
            except ValueError as exc:
                raise ValueError(f"invalid application genesis state: {exc}") from exc
        else:
            state = dict(app_state)
        if not isinstance(state, dict):
            raise ValueError("application genesis state must be a JSON object")

        emarket_state = state.get(MODULE_NAME)
        data = (
            self.emarket_module.default_genesis()
            if emarket_state is None
            else json.dumps(emarket_state)
        )
        self.emarket_module.validate_genesis(data)
        self.emarket_module.init_genesis(data)
        self._raw_genesis = {name: value for name, value in state.items() if name != MODULE_NAME}

    def export_genesis(self) -> str:
        """Return the application state as indented JSON, modules in genesis order."""
        order = genesis_module_order()
        exported: dict[str, Any] = {}
        for name in order:
            if name == MODULE_NAME:
                exported[name] = json.loads(self.emarket_module.export_genesis())
            elif name in self._raw_genesis:
                exported[name] = self._raw_genesis[name]
        for name, value in self._raw_genesis.items():
            exported.setdefault(name, value)
        return json.dumps(exported, indent=2)