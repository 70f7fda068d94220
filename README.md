# emarket

A small marketplace ledger. Sellers list items (name, product type, amount,
price, discount flag); only the account that created an item may update or
delete it. The whole state can be exported to a JSON genesis document and
loaded back, and items can be queried one at a time or page by page.

Accounts are bech32 addresses with the `cosmos` prefix.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from emarket.address import sample_acc_address
from emarket.errors import UnauthorizedError
from emarket.keeper import create_test_keeper
from emarket.msg_server import MsgServer
from emarket.types import MsgCreateItem, MsgUpdateItem

keeper = create_test_keeper()
server = MsgServer(keeper)

seller = sample_acc_address()
item_id = server.create_item(
    MsgCreateItem(creator=seller, name="lamp", product_type="home",
                  amount=3, price=120, discounted=False)
)

try:
    server.update_item(MsgUpdateItem(creator=sample_acc_address(), id=item_id))
except UnauthorizedError:
    print("only the creator may change an item")

print(keeper.get_all_item())
```

- `MsgServer.create_item` returns the new item's id; ids count up from 0.
- `update_item` and `delete_item` raise `KeyNotFoundError` for a missing id
  and `UnauthorizedError` when the creator is not the item's owner.
- `update_params` raises `InvalidSignerError` unless the message's authority
  is the keeper's authority (the `gov` module account).
- `validate_basic()` on the messages raises `InvalidAddressError` when the
  creator (or authority) is not a valid `cosmos` bech32 address.

### Queries

`Keeper.item(id)` returns one item or raises `KeyNotFoundError`.
`Keeper.item_all(PageRequest(...))` returns a list of items and a
`PageResponse`; pages are chosen by `offset` or by `key` (the `next_key` of
the previous page), with `limit` (0 means 100 and implies a total count),
`count_total` and `reverse`. Passing `None` as a request raises
`InvalidRequestError`.

The keeper stores its data in `emarket.keeper.KVStore`, an in-memory
key-value store iterated in key order.

### Genesis

`export_genesis(keeper)` in `emarket.genesis` returns a `GenesisState`
holding every item, the item counter and the module parameters;
`init_genesis(keeper, state)` writes one back. `GenesisState.validate()`
raises `ValueError` on duplicated item ids and on ids that are not below the
item count. `GenesisState.to_json()` / `from_json()` convert to and from
JSON, and `emarket.genesis.AppModule` offers the same steps on JSON text.

### Application wiring

`emarket.app_config` lists the module order used at genesis and in block
processing, the module account permissions and the blocked accounts.
`emarket.app.App` creates a store per module, runs the emarket module on its
store, and with `init_chain()` / `export_genesis()` loads and exports an
application genesis document; sections for other modules are kept and
written back unchanged.

### Testnet helpers

`emarket.testnet_args` parses stake amounts and port lists and makes random
chain ids; `emarket.testnet_files` has file helpers (`write_file`,
`copy_file`, `is_sub_dir`) and builds node directory names and the
persistent-peer list.

## Command line

```
emarketd --help
emarketd init
emarketd tx create-item lamp home 3 120 false --from <address>
emarketd tx update-item 0 lamp home 2 100 true --from <address>
emarketd tx delete-item 0 --from <address>
emarketd query params
emarketd query show-item 0
emarketd query list-item --limit 2 --count-total
```

State is kept as a genesis JSON file in `<home>/data/emarket_state.json`.
The home directory is `--home`, else the `EMARKET_HOME` environment
variable, else `~/.emarket`. Results are printed as JSON; errors go to
standard error with exit status 1. `list-item` also takes `--page-key`
(base64), `--offset` and `--reverse`.

## What it does not do

This is the marketplace's state logic and a local command line only. There
is no blockchain node: no networking, consensus, blocks, transaction
signing, key management or fees. The other modules named in
`emarket.app_config` (bank, staking, governance and so on) are only listed
by name; their state is passed through untouched. The testnet modules help
with names, ports and files but do not generate validator keys or lay out a
full multi-node network.