"""Message handlers of the emarket module."""

from __future__ import annotations

from emarket.errors import InvalidSignerError, KeyNotFoundError, UnauthorizedError
from emarket.keeper import Keeper
from emarket.types import Item, MsgCreateItem, MsgDeleteItem, MsgUpdateItem, MsgUpdateParams


class MsgServer:
    """Executes the module's transactions against a keeper."""

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    def _check_owner(self, id_: int, creator: str) -> None:
        current = self.keeper.get_item(id_)
        if current is None:
            raise KeyNotFoundError(f"key {id_} doesn't exist")
        if creator != current.creator:
            raise UnauthorizedError("incorrect owner")

    def create_item(self, msg: MsgCreateItem) -> int:
        """Append a new item and return its id."""
        item = Item(
            creator=msg.creator,
            name=msg.name,
            product_type=msg.product_type,
            amount=msg.amount,
            price=msg.price,
            discounted=msg.discounted,
        )
        return self.keeper.append_item(item)

    def update_item(self, msg: MsgUpdateItem) -> None:
        """Replace an existing item owned by the message creator."""
        item = Item(
            id=msg.id,
            creator=msg.creator,
            name=msg.name,
            product_type=msg.product_type,
            amount=msg.amount,
            price=msg.price,
            discounted=msg.discounted,
        )
        self._check_owner(msg.id, msg.creator)
        self.keeper.set_item(item)

    def delete_item(self, msg: MsgDeleteItem) -> None:
        """Remove an existing item owned by the message creator."""
        self._check_owner(msg.id, msg.creator)
        self.keeper.remove_item(msg.id)

    def update_params(self, msg: MsgUpdateParams) -> None:
        """Set the module parameters; only the authority may do so."""
        if self.keeper.authority != msg.authority:
            raise InvalidSignerError(
                f"invalid authority; expected {self.keeper.authority}, got {msg.authority}"
            )
        self.keeper.set_params(msg.params)