"""Argument parsing for multi-node testnet initialisation."""

from __future__ import annotations

import random
import string

DEFAULT_BOND_DENOM = "stake"
DEFAULT_NUM_VALIDATORS = 4
DEFAULT_OUTPUT_DIR = "./.testnets"
DEFAULT_NODE_DIR_PREFIX = "validator"
DEFAULT_STAKE_AMOUNTS = "100000000,100000000,100000000,100000000"
DEFAULT_STARTING_IP_ADDRESS = "localhost"
DEFAULT_KEYRING_BACKEND = "test"
DEFAULT_MIN_GAS_PRICES = f"0.0001{DEFAULT_BOND_DENOM}"
BASE_RPC_PORT = 26657
PORT_STEP = 3

_CHARSET = string.ascii_lowercase + string.digits
_MAX_INT_BITS = 256


def _parse_int(text: str) -> int | None:
    try:
        value = int(text, 0)
    except ValueError:
        return None
    if value.bit_length() > _MAX_INT_BITS:
        return None
    return value


def parse_stake_amounts(text: str) -> dict[int, int]:
    """Map validator index to stake amount (in the bond denom); invalid entries are skipped."""
    amounts = (_parse_int(part) for part in text.split(","))
    return dict(enumerate(a for a in amounts if a is not None))


def parse_ports(text: str, num_validators: int) -> dict[int, str]:
    """Map validator index to RPC port, defaulting to descending ports from 26657."""
    if not text:
        return {i: str(BASE_RPC_PORT - PORT_STEP * i) for i in range(num_validators)}
    return dict(enumerate(text.split(",")))


def generate_random_string(length: int) -> str:
    """Return a random string of lowercase letters and digits."""
    return "".join(random.choice(_CHARSET) for _ in range(length))


def default_chain_id() -> str:
    """Return a random chain id of the form chain-xxxxxx."""
    return "chain-" + generate_random_string(6)