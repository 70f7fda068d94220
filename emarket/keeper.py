"""State access and queries of the emarket module."""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator

from emarket.address import acc_address_from_bech32, acc_address_to_bech32, module_address
from emarket.errors import InternalError, InvalidRequestError, KeyNotFoundError
from emarket.types import (
    ITEM_COUNT_KEY,
    ITEM_KEY,
    MODULE_NAME,
    PARAMS_KEY,
    Item,
    PageRequest,
    PageResponse,
    Params,
    default_params,
    key_prefix,
)

DEFAULT_LIMIT = 100
GOV_MODULE_NAME = "gov"


class KVStore:
    """An in-memory key-value store iterated in byte order of its keys."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: bytes) -> bytes | None:
        """Return the value under key, or None when absent."""
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        """Store value under key; keys must be non-empty."""
        if not key:
            raise ValueError("key is nil")
        if value is None:
            raise ValueError("value is nil")
        self._data[bytes(key)] = bytes(value)

    def delete(self, key: bytes) -> None:
        """Remove key if present."""
        self._data.pop(bytes(key), None)

    def items(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Yield (key, value) pairs whose key starts with prefix, in key order."""
        for key in sorted(self._data):
            if key.startswith(prefix):
                yield key, self._data[key]


def item_id_bytes(id_: int) -> bytes:
    """Return the store key of an item id."""
    return key_prefix(ITEM_KEY) + b"/" + id_.to_bytes(8, "big")


def paginate(
    store: KVStore, prefix: bytes, page_request: PageRequest | None
) -> tuple[list[tuple[bytes, bytes]], PageResponse]:
    """Return one page of the entries under prefix, with keys relative to prefix."""
    request = page_request or PageRequest()
    key = request.key or None
    limit = request.limit
    count_total = request.count_total
    if request.offset > 0 and key is not None:
        raise ValueError("invalid request, either offset or key is expected, got both")
    if limit == 0:
        limit = DEFAULT_LIMIT
        count_total = True

    entries = [(k[len(prefix):], v) for k, v in store.items(prefix)]

    if key is not None:
        idx = bisect.bisect_left([k for k, _ in entries], key)
        if request.reverse:
            candidates = list(reversed(entries[: idx + 1]))
        else:
            candidates = entries[idx:]
        next_key = candidates[limit][0] if len(candidates) > limit else None
        return candidates[:limit], PageResponse(next_key=next_key)

    ordered = list(reversed(entries)) if request.reverse else entries
    end = request.offset + limit
    next_key = ordered[end][0] if len(ordered) > end else None
    total = len(ordered) if count_total else 0
    return ordered[request.offset : end], PageResponse(next_key=next_key, total=total)


class Keeper:
    """Reads and writes the module's items and parameters in a store."""

    def __init__(self, store: KVStore, authority: str) -> None:
        try:
            acc_address_from_bech32(authority)
        except ValueError:
            raise ValueError(f"invalid authority address: {authority}") from None
        self.store = store
        self.authority = authority
        self.logger = logging.getLogger(f"x/{MODULE_NAME}")

    def get_item_count(self) -> int:
        """Return the number of items ever appended."""
        raw = self.store.get(key_prefix(ITEM_COUNT_KEY))
        return 0 if raw is None else int.from_bytes(raw, "big")

    def set_item_count(self, count: int) -> None:
        self.store.set(key_prefix(ITEM_COUNT_KEY), count.to_bytes(8, "big"))

    def _item_key(self, id_: int) -> bytes:
        return key_prefix(ITEM_KEY) + item_id_bytes(id_)

    def append_item(self, item: Item) -> int:
        """Store item under the next id, advance the count and return the id."""
        count = self.get_item_count()
        item.id = count
        self.store.set(self._item_key(count), item.to_bytes())
        self.set_item_count(count + 1)
        return count

    def set_item(self, item: Item) -> None:
        self.store.set(self._item_key(item.id), item.to_bytes())

    def get_item(self, id_: int) -> Item | None:
        """Return the item with id_, or None when it does not exist."""
        raw = self.store.get(self._item_key(id_))
        return None if raw is None else Item.from_bytes(raw)

    def remove_item(self, id_: int) -> None:
        self.store.delete(self._item_key(id_))

    def get_all_item(self) -> list[Item]:
        """Return every stored item in key order."""
        return [Item.from_bytes(v) for _, v in self.store.items(key_prefix(ITEM_KEY))]

    def get_params(self) -> Params:
        raw = self.store.get(PARAMS_KEY)
        return Params() if raw is None else Params.from_bytes(raw)

    def set_params(self, params: Params) -> None:
        self.store.set(PARAMS_KEY, params.to_bytes())

    def item_all(self, request: PageRequest | None) -> tuple[list[Item], PageResponse]:
        """Return one page of items and the page response."""
        if request is None:
            raise InvalidRequestError()
        try:
            entries, page = paginate(self.store, key_prefix(ITEM_KEY), request)
            items = [Item.from_bytes(v) for _, v in entries]
        except ValueError as exc:
            raise InternalError(str(exc)) from exc
        return items, page

    def item(self, request: int | None) -> Item:
        """Return the item whose id is request."""
        if request is None:
            raise InvalidRequestError()
        found = self.get_item(request)
        if found is None:
            raise KeyNotFoundError()
        return found

    def params(self, request: object) -> Params:
        """Answer a parameter query; request must not be None."""
        if request is None:
            raise InvalidRequestError()
        return self.get_params()


def create_test_keeper() -> Keeper:
    """Return a keeper over a fresh in-memory store with default parameters."""
    authority = acc_address_to_bech32(module_address(GOV_MODULE_NAME))
    keeper = Keeper(KVStore(), authority)
    keeper.set_params(default_params())
    return keeper