"""Command line for querying and changing emarket state kept in a home directory."""

from __future__ import annotations

import argparse
import base64
import json
import os
import sys
from pathlib import Path
from typing import Any

from emarket.address import acc_address_to_bech32, module_address
from emarket.errors import EmarketError
from emarket.genesis import AppModule
from emarket.keeper import GOV_MODULE_NAME, KVStore, Keeper
from emarket.msg_server import MsgServer
from emarket.types import (
    MsgCreateItem,
    MsgDeleteItem,
    MsgUpdateItem,
    PageRequest,
    default_genesis,
)

APP_NAME = "emarket"
ENV_PREFIX = APP_NAME.upper()
STATE_FILE = "emarket_state.json"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _default_home() -> str:
    return os.environ.get(f"{ENV_PREFIX}_HOME") or str(Path.home() / f".{APP_NAME}")


def _bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean: {text!r}")


def _ranged_int(low: int, high: int):
    def parse(text: str) -> int:
        try:
            value = int(text, 10)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"value out of range: {text}")
        return value

    return parse


_int32 = _ranged_int(-(2**31), 2**31 - 1)
_uint64 = _ranged_int(0, 2**64 - 1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=f"{APP_NAME}d", description="emarket node state")
    parser.add_argument("--home", default=_default_home(), help="application home directory")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="Write the default genesis state")

    query = commands.add_parser("query", aliases=["q"], help="Querying subcommands")
    queries = query.add_subparsers(dest="query", required=True)
    queries.add_parser("params", help="Shows the parameters of the module")
    list_item = queries.add_parser("list-item", help="List all item")
    list_item.add_argument("--page-key", default="", help="base64 key of the page to start at")
    list_item.add_argument("--offset", type=_uint64, default=0)
    list_item.add_argument("--limit", type=_uint64, default=0)
    list_item.add_argument("--count-total", action="store_true")
    list_item.add_argument("--reverse", action="store_true")
    show_item = queries.add_parser("show-item", help="Shows a item by id")
    show_item.add_argument("id", type=_uint64)

    tx = commands.add_parser("tx", help="Transactions subcommands")
    txs = tx.add_subparsers(dest="tx", required=True)

    def item_fields(p: argparse.ArgumentParser) -> None:
        p.add_argument("name")
        p.add_argument("product_type", metavar="productType")
        p.add_argument("amount", type=_int32)
        p.add_argument("price", type=_int32)
        p.add_argument("discounted", type=_bool)
        p.add_argument("--from", dest="creator", required=True)

    item_fields(txs.add_parser("create-item", help="Create item"))
    update = txs.add_parser("update-item", help="Update item")
    update.add_argument("id", type=_uint64)
    item_fields(update)
    delete = txs.add_parser("delete-item", help="Delete item")
    delete.add_argument("id", type=_uint64)
    delete.add_argument("--from", dest="creator", required=True)
    return parser


def _state_path(home: str) -> Path:
    return Path(home) / "data" / STATE_FILE


def _load(home: str) -> AppModule:
    authority = acc_address_to_bech32(module_address(GOV_MODULE_NAME))
    module = AppModule(Keeper(KVStore(), authority))
    path = _state_path(home)
    data = path.read_text() if path.exists() else default_genesis().to_json()
    module.validate_genesis(data)
    module.init_genesis(data)
    return module


def _save(home: str, module: AppModule) -> None:
    path = _state_path(home)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(module.export_genesis())


def _run_query(args: argparse.Namespace, module: AppModule) -> dict[str, Any]:
    keeper = module.keeper
    if args.query == "params":
        return {"params": keeper.params(object()).to_dict()}
    if args.query == "show-item":
        return {"item": keeper.item(args.id).to_dict()}
    request = PageRequest(
        key=base64.b64decode(args.page_key) if args.page_key else None,
        offset=args.offset,
        limit=args.limit,
        count_total=args.count_total,
        reverse=args.reverse,
    )
    items, page = keeper.item_all(request)
    return {
        "item": [item.to_dict() for item in items],
        "pagination": {
            "next_key": base64.b64encode(page.next_key).decode() if page.next_key else None,
            "total": str(page.total),
        },
    }


def _run_tx(args: argparse.Namespace, module: AppModule) -> dict[str, Any]:
    server = MsgServer(module.keeper)
    if args.tx == "delete-item":
        msg = MsgDeleteItem(creator=args.creator, id=args.id)
        msg.validate_basic()
        server.delete_item(msg)
        return {}
    fields = dict(
        creator=args.creator,
        name=args.name,
        product_type=args.product_type,
        amount=args.amount,
        price=args.price,
        discounted=args.discounted,
    )
    if args.tx == "create-item":
        create = MsgCreateItem(**fields)
        create.validate_basic()
        return {"id": str(server.create_item(create))}
    update = MsgUpdateItem(id=args.id, **fields)
    update.validate_basic()
    server.update_item(update)
    return {}


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "init":
            module = _load(args.home)
            _save(args.home, module)
            result: dict[str, Any] = json.loads(module.export_genesis())
        elif args.command in ("query", "q"):
            result = _run_query(args, _load(args.home))
        else:
            module = _load(args.home)
            result = _run_tx(args, module)
            _save(args.home, module)
    except (EmarketError, ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())