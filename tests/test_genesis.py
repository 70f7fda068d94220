import json

import pytest

from emarket.genesis import AppModule, export_genesis, init_genesis
from emarket.keeper import create_test_keeper
from emarket.types import GenesisState, Item, default_params


def _sorted(items):
    return sorted(items, key=lambda i: i.id)


def test_genesis_round_trip():
    genesis_state = GenesisState(
        params=default_params(),
        item_list=[Item(id=0), Item(id=1)],
        item_count=2,
    )
    keeper = create_test_keeper()
    init_genesis(keeper, genesis_state)
    got = export_genesis(keeper)
    assert _sorted(got.item_list) == _sorted(genesis_state.item_list)
    assert got.item_count == genesis_state.item_count
    assert got.params == genesis_state.params


def test_export_empty_keeper():
    got = export_genesis(create_test_keeper())
    assert got.item_list == []
    assert got.item_count == 0


def test_init_genesis_sets_count_for_next_append():
    keeper = create_test_keeper()
    init_genesis(keeper, GenesisState(item_list=[Item(id=0), Item(id=1)], item_count=2))
    assert keeper.append_item(Item()) == 2


def test_app_module_json_round_trip():
    source = create_test_keeper()
    source.append_item(Item(creator="a", name="apple", amount=3, price=10))
    source.append_item(Item(creator="b", name="pear", discounted=True))
    exported = AppModule(source).export_genesis()

    target = AppModule(create_test_keeper())
    target.init_genesis(exported)
    assert target.keeper.get_all_item() == source.get_all_item()
    assert target.keeper.get_item_count() == 2
    assert json.loads(target.export_genesis()) == json.loads(exported)


def test_default_genesis_is_valid():
    module = AppModule(create_test_keeper())
    data = module.default_genesis()
    module.validate_genesis(data)
    assert GenesisState.from_json(data).item_list == []


def test_validate_genesis_rejects_duplicates():
    module = AppModule(create_test_keeper())
    bad = GenesisState(item_list=[Item(id=0), Item(id=0)], item_count=2).to_json()
    with pytest.raises(ValueError, match="duplicated id"):
        module.validate_genesis(bad)


def test_validate_genesis_rejects_bad_json():
    module = AppModule(create_test_keeper())
    with pytest.raises(ValueError, match="failed to unmarshal emarket genesis state"):
        module.validate_genesis("{not json")


def test_consensus_version():
    assert AppModule(create_test_keeper()).consensus_version() == 1