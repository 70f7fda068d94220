"""Bech32 account addresses as used by the chain."""

from __future__ import annotations

import hashlib
import os
from collections.abc import Iterable, Sequence

ACCOUNT_ADDRESS_PREFIX = "cosmos"
ACCOUNT_PUBKEY_PREFIX = ACCOUNT_ADDRESS_PREFIX + "pub"
VALIDATOR_ADDRESS_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valoper"
VALIDATOR_PUBKEY_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valoperpub"
CONSENSUS_NODE_ADDRESS_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valcons"
CONSENSUS_NODE_PUBKEY_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valconspub"

ADDRESS_LENGTH = 20
MAX_ADDRESS_LENGTH = 255

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_LENGTH = 1023
_CHECKSUM_LENGTH = 6


def _polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: Sequence[int]) -> list[int]:
    pm = _polymod([*_hrp_expand(hrp), *data, *([0] * _CHECKSUM_LENGTH)]) ^ 1
    return [(pm >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_LENGTH)]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError(f"invalid data value {value}")
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise ValueError("invalid padding in bech32 data")
    return out


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode raw bytes as a bech32 string with the given human-readable part."""
    if not hrp:
        raise ValueError("human-readable part must not be empty")
    hrp = hrp.lower()
    five_bit = _convert_bits(data, 8, 5, True)
    checksum = _create_checksum(hrp, five_bit)
    return hrp + "1" + "".join(_CHARSET[d] for d in [*five_bit, *checksum])


def bech32_decode(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and raw bytes."""
    if len(text) > _MAX_LENGTH:
        raise ValueError(f"invalid bech32 string length {len(text)}")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise ValueError("invalid character in bech32 string")
    if text.lower() != text and text.upper() != text:
        raise ValueError("string not all lowercase or all uppercase")
    text = text.lower()
    sep = text.rfind("1")
    if sep < 1 or sep + _CHECKSUM_LENGTH + 1 > len(text):
        raise ValueError("invalid separator position in bech32 string")
    hrp = text[:sep]
    try:
        data = [_CHARSET.index(c) for c in text[sep + 1 :]]
    except ValueError:
        raise ValueError("invalid character in bech32 data part") from None
    if _polymod([*_hrp_expand(hrp), *data]) != 1:
        raise ValueError("invalid bech32 checksum")
    return hrp, bytes(_convert_bits(data[:-_CHECKSUM_LENGTH], 5, 8, False))


def _verify_address_format(address_bytes: bytes) -> None:
    if not address_bytes:
        raise ValueError("addresses cannot be empty: unknown address")
    if len(address_bytes) > MAX_ADDRESS_LENGTH:
        raise ValueError(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(address_bytes)}: unknown address"
        )


def acc_address_from_bech32(address: str, prefix: str = ACCOUNT_ADDRESS_PREFIX) -> bytes:
    """Parse a bech32 account address, checking its prefix and length."""
    if not address.strip():
        raise ValueError("empty address string is not allowed")
    try:
        hrp, address_bytes = bech32_decode(address)
    except ValueError as exc:
        raise ValueError(f"decoding bech32 failed: {exc}") from exc
    if hrp != prefix:
        raise ValueError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    _verify_address_format(address_bytes)
    return address_bytes


def acc_address_to_bech32(address_bytes: bytes, prefix: str = ACCOUNT_ADDRESS_PREFIX) -> str:
    """Render raw address bytes as a bech32 account address."""
    _verify_address_format(address_bytes)
    return bech32_encode(prefix, address_bytes)


def module_address(name: str) -> bytes:
    """Return the deterministic account address of a module account."""
    return hashlib.sha256(name.encode()).digest()[:ADDRESS_LENGTH]


def sample_acc_address() -> str:
    """Return a fresh random account address, as derived from a new public key."""
    public_key = os.urandom(32)
    return acc_address_to_bech32(hashlib.sha256(public_key).digest()[:ADDRESS_LENGTH])