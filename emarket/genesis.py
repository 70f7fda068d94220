"""Genesis import and export, and the module's application wiring."""

from __future__ import annotations

from emarket.keeper import Keeper
from emarket.types import MODULE_NAME, GenesisState, default_genesis

CONSENSUS_VERSION = 1


def init_genesis(keeper: Keeper, gen_state: GenesisState) -> None:
    """Load a genesis state into the keeper's store."""
    for item in gen_state.item_list:
        keeper.set_item(item)
    keeper.set_item_count(gen_state.item_count)
    keeper.set_params(gen_state.params)


def export_genesis(keeper: Keeper) -> GenesisState:
    """Return the current module state as a genesis state."""
    genesis = default_genesis()
    genesis.params = keeper.get_params()
    genesis.item_list = keeper.get_all_item()
    genesis.item_count = keeper.get_item_count()
    return genesis


class AppModule:
    """The emarket module as seen by the application: genesis in JSON form."""

    name = MODULE_NAME

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    def default_genesis(self) -> str:
        """Return the default genesis state as JSON."""
        return default_genesis().to_json()

    def validate_genesis(self, data: str | bytes) -> None:
        """Parse and validate a JSON genesis state, raising ValueError on failure."""
        try:
            gen_state = GenesisState.from_json(data)
        except (ValueError, TypeError, AttributeError) as exc:
            raise ValueError(f"failed to unmarshal {MODULE_NAME} genesis state: {exc}") from exc
        gen_state.validate()

    def init_genesis(self, data: str | bytes) -> None:
        """Load a JSON genesis state into the module's store."""
        init_genesis(self.keeper, GenesisState.from_json(data))

    def export_genesis(self) -> str:
        """Return the module's current state as JSON."""
        return export_genesis(self.keeper).to_json()

    def consensus_version(self) -> int:
        """Return the state-breaking version of the module."""
        return CONSENSUS_VERSION