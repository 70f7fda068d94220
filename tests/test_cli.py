import json

import pytest

from emarket.address import sample_acc_address
from emarket.cli import main
from emarket.types import GenesisState


def run(capsys, home, *args):
    code = main(["--home", str(home), *args])
    out, err = capsys.readouterr()
    return code, out, err


def create(capsys, home, creator, name="apple"):
    code, out, _ = run(capsys, home, "tx", "create-item", name, "fruit", "5", "20", "true", "--from", creator)
    assert code == 0
    return json.loads(out)["id"]


def test_create_assigns_sequential_ids(tmp_path, capsys):
    creator = sample_acc_address()
    ids = [create(capsys, tmp_path, creator) for _ in range(5)]
    assert ids == [str(i) for i in range(5)]


def test_show_item_returns_created_fields(tmp_path, capsys):
    creator = sample_acc_address()
    item_id = create(capsys, tmp_path, creator, name="banana")
    code, out, _ = run(capsys, tmp_path, "query", "show-item", item_id)
    assert code == 0
    item = json.loads(out)["item"]
    assert item["creator"] == creator
    assert item["name"] == "banana"
    assert item["productType"] == "fruit"
    assert item["amount"] == 5
    assert item["price"] == 20
    assert item["discounted"] is True


def test_show_missing_item_fails(tmp_path, capsys):
    code, _, err = run(capsys, tmp_path, "q", "show-item", "10")
    assert code == 1
    assert "key not found" in err


def test_update_by_other_creator_is_unauthorized(tmp_path, capsys):
    owner = sample_acc_address()
    item_id = create(capsys, tmp_path, owner)
    other = sample_acc_address()
    code, _, err = run(capsys, tmp_path, "tx", "update-item", item_id, "x", "y", "1", "1", "false", "--from", other)
    assert code == 1
    assert "incorrect owner" in err


def test_update_by_owner_changes_item(tmp_path, capsys):
    owner = sample_acc_address()
    item_id = create(capsys, tmp_path, owner)
    code, _, _ = run(capsys, tmp_path, "tx", "update-item", item_id, "kiwi", "fruit", "7", "9", "0", "--from", owner)
    assert code == 0
    _, out, _ = run(capsys, tmp_path, "query", "show-item", item_id)
    item = json.loads(out)["item"]
    assert (item["name"], item["amount"], item["price"], item["discounted"]) == ("kiwi", 7, 9, False)


def test_delete_missing_item_fails(tmp_path, capsys):
    owner = sample_acc_address()
    create(capsys, tmp_path, owner)
    code, _, err = run(capsys, tmp_path, "tx", "delete-item", "10", "--from", owner)
    assert code == 1
    assert "key 10 doesn't exist" in err


def test_delete_removes_item(tmp_path, capsys):
    owner = sample_acc_address()
    item_id = create(capsys, tmp_path, owner)
    code, _, _ = run(capsys, tmp_path, "tx", "delete-item", item_id, "--from", owner)
    assert code == 0
    code, _, _ = run(capsys, tmp_path, "query", "show-item", item_id)
    assert code == 1


def test_invalid_creator_address(tmp_path, capsys):
    code, _, err = run(capsys, tmp_path, "tx", "create-item", "a", "b", "1", "1", "true", "--from", "invalid_address")
    assert code == 1
    assert "invalid address" in err


def test_list_item_total(tmp_path, capsys):
    owner = sample_acc_address()
    for _ in range(3):
        create(capsys, tmp_path, owner)
    code, out, _ = run(capsys, tmp_path, "query", "list-item")
    assert code == 0
    result = json.loads(out)
    assert len(result["item"]) == 3
    assert result["pagination"]["total"] == "3"


def test_params_query(tmp_path, capsys):
    code, out, _ = run(capsys, tmp_path, "query", "params")
    assert code == 0
    assert json.loads(out) == {"params": {}}


def test_invalid_boolean_is_rejected(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--home", str(tmp_path), "tx", "create-item", "a", "b", "1", "1", "maybe", "--from", sample_acc_address()])
    assert info.value.code == 2


def test_state_persists_to_home(tmp_path, capsys):
    owner = sample_acc_address()
    create(capsys, tmp_path, owner)
    create(capsys, tmp_path, owner)
    files = list(tmp_path.rglob("*.json"))
    assert len(files) == 1
    state = GenesisState.from_json(files[0].read_text())
    assert state.item_count == 2
    assert [item.creator for item in state.item_list] == [owner, owner]