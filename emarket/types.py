"""State, messages and genesis types of the emarket module."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from emarket.address import acc_address_from_bech32
from emarket.errors import InvalidAddressError

MODULE_NAME = "emarket"
STORE_KEY = MODULE_NAME
MEM_STORE_KEY = "mem_emarket"
PARAMS_KEY = b"p_emarket"
ITEM_KEY = "Item/value/"
ITEM_COUNT_KEY = "Item/count/"
DEFAULT_INDEX = 1

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_UINT64_MAX = 2**64 - 1


def key_prefix(p: str) -> bytes:
    """Return the store key prefix for a string."""
    return p.encode()


def _check_int32(name: str, value: int) -> None:
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{name} out of int32 range: {value}")


def _check_uint64(name: str, value: int) -> None:
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"{name} out of uint64 range: {value}")


@dataclass
class Item:
    id: int = 0
    creator: str = ""
    name: str = ""
    product_type: str = ""
    amount: int = 0
    price: int = 0
    discounted: bool = False

    def __post_init__(self) -> None:
        _check_uint64("id", self.id)
        _check_int32("amount", self.amount)
        _check_int32("price", self.price)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "creator": self.creator,
            "name": self.name,
            "productType": self.product_type,
            "amount": self.amount,
            "price": self.price,
            "discounted": self.discounted,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(
            id=int(data.get("id", 0)),
            creator=data.get("creator", ""),
            name=data.get("name", ""),
            product_type=data.get("productType", ""),
            amount=int(data.get("amount", 0)),
            price=int(data.get("price", 0)),
            discounted=bool(data.get("discounted", False)),
        )

    def to_bytes(self) -> bytes:
        """Serialise the item for storage."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":")).encode()

    @classmethod
    def from_bytes(cls, data: bytes) -> Item:
        """Deserialise an item written by to_bytes."""
        return cls.from_dict(json.loads(data))


@dataclass
class Params:
    """Module parameters; the module currently defines none."""

    def validate(self) -> None:
        """Validate the parameter set."""

    def to_dict(self) -> dict[str, Any]:
        return {}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Params:
        return cls()

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict()).encode()

    @classmethod
    def from_bytes(cls, data: bytes) -> Params:
        return cls.from_dict(json.loads(data))


def default_params() -> Params:
    return Params()


@dataclass
class GenesisState:
    params: Params = field(default_factory=Params)
    item_list: list[Item] = field(default_factory=list)
    item_count: int = 0

    def validate(self) -> None:
        """Raise ValueError on duplicated or out-of-range item ids."""
        seen: set[int] = set()
        for item in self.item_list:
            if item.id in seen:
                raise ValueError("duplicated id for item")
            if item.id >= self.item_count:
                raise ValueError("item id should be lower or equal than the last id")
            seen.add(item.id)
        self.params.validate()

    def to_json(self) -> str:
        return json.dumps(
            {
                "params": self.params.to_dict(),
                "itemList": [item.to_dict() for item in self.item_list],
                "itemCount": str(self.item_count),
            }
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> GenesisState:
        raw = json.loads(data)
        return cls(
            params=Params.from_dict(raw.get("params") or {}),
            item_list=[Item.from_dict(d) for d in raw.get("itemList") or []],
            item_count=int(raw.get("itemCount", 0)),
        )


def default_genesis() -> GenesisState:
    return GenesisState(params=default_params(), item_list=[])


def _validate_creator(creator: str) -> None:
    try:
        acc_address_from_bech32(creator)
    except ValueError as exc:
        raise InvalidAddressError(f"invalid creator address ({exc})") from exc


@dataclass
class MsgCreateItem:
    creator: str = ""
    name: str = ""
    product_type: str = ""
    amount: int = 0
    price: int = 0
    discounted: bool = False

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgUpdateItem:
    creator: str = ""
    id: int = 0
    name: str = ""
    product_type: str = ""
    amount: int = 0
    price: int = 0
    discounted: bool = False

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgDeleteItem:
    creator: str = ""
    id: int = 0

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgUpdateParams:
    authority: str = ""
    params: Params = field(default_factory=Params)

    def validate_basic(self) -> None:
        try:
            acc_address_from_bech32(self.authority)
        except ValueError as exc:
            raise InvalidAddressError(f"invalid authority address: {exc}") from exc
        self.params.validate()


@dataclass
class PageRequest:
    key: bytes | None = None
    offset: int = 0
    limit: int = 0
    count_total: bool = False
    reverse: bool = False


@dataclass
class PageResponse:
    next_key: bytes | None = None
    total: int = 0


MESSAGE_TYPES = (MsgCreateItem, MsgUpdateItem, MsgDeleteItem, MsgUpdateParams)