"""Errors raised by the emarket module."""

from __future__ import annotations


class EmarketError(Exception):
    """Base error; carries a codespace, a code and a fixed description."""

    codespace = "sdk"
    code = 1
    description = "internal error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{detail}: {self.description}" if detail else self.description)


class KeyNotFoundError(EmarketError):
    code = 38
    description = "key not found"


class UnauthorizedError(EmarketError):
    code = 4
    description = "unauthorized"


class InvalidAddressError(EmarketError):
    code = 7
    description = "invalid address"


class InvalidSignerError(EmarketError):
    codespace = "emarket"
    code = 1100
    description = "expected gov account as only signer for proposal message"


class InvalidRequestError(EmarketError):
    codespace = "grpc"
    code = 3
    description = "invalid request"


class InternalError(EmarketError):
    codespace = "grpc"
    code = 13
    description = "internal error"