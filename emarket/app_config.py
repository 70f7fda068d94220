"""Module ordering and module-account configuration of the application."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from emarket.address import ACCOUNT_ADDRESS_PREFIX
from emarket.types import MODULE_NAME as EMARKET

APP_NAME = "emarket"

CAPABILITY = "capability"
AUTH = "auth"
BANK = "bank"
DISTRIBUTION = "distribution"
STAKING = "staking"
SLASHING = "slashing"
GOV = "gov"
MINT = "mint"
CRISIS = "crisis"
IBC = "ibc"
GENUTIL = "genutil"
EVIDENCE = "evidence"
AUTHZ = "authz"
TRANSFER = "transfer"
INTERCHAIN_ACCOUNTS = "interchainaccounts"
FEE_IBC = "feeibc"
FEEGRANT = "feegrant"
PARAMS = "params"
UPGRADE = "upgrade"
VESTING = "vesting"
NFT = "nft"
GROUP = "group"
CONSENSUS = "consensus"
CIRCUIT = "circuit"
RUNTIME = "runtime"
TX = "tx"

FEE_COLLECTOR = "fee_collector"
BONDED_POOL = "bonded_tokens_pool"
NOT_BONDED_POOL = "not_bonded_tokens_pool"

MINTER = "minter"
BURNER = "burner"

AUTH_KV_STORE_KEY = "acc"
VALIDATOR_ADDRESS_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valoper"
CONSENSUS_ADDRESS_PREFIX = ACCOUNT_ADDRESS_PREFIX + "valcons"
GROUP_MAX_EXECUTION_PERIOD = timedelta(seconds=1209600)
GROUP_MAX_METADATA_LEN = 255


@dataclass(frozen=True)
class ModuleAccountPermission:
    """A module account and the permissions it holds."""

    account: str
    permissions: tuple[str, ...] = ()


# Capability must come first so that other modules can claim capabilities in
# InitChain; genutil must come after staking and auth.
_GENESIS_MODULE_ORDER = (
    CAPABILITY,
    AUTH,
    BANK,
    DISTRIBUTION,
    STAKING,
    SLASHING,
    GOV,
    MINT,
    CRISIS,
    IBC,
    GENUTIL,
    EVIDENCE,
    AUTHZ,
    TRANSFER,
    INTERCHAIN_ACCOUNTS,
    FEE_IBC,
    FEEGRANT,
    PARAMS,
    UPGRADE,
    VESTING,
    NFT,
    GROUP,
    CONSENSUS,
    CIRCUIT,
    EMARKET,
)

_BEGIN_BLOCKERS = (
    MINT,
    DISTRIBUTION,
    SLASHING,
    EVIDENCE,
    STAKING,
    AUTHZ,
    GENUTIL,
    CAPABILITY,
    IBC,
    TRANSFER,
    INTERCHAIN_ACCOUNTS,
    FEE_IBC,
    EMARKET,
)

_END_BLOCKERS = (
    CRISIS,
    GOV,
    STAKING,
    FEEGRANT,
    GROUP,
    GENUTIL,
    IBC,
    TRANSFER,
    CAPABILITY,
    INTERCHAIN_ACCOUNTS,
    FEE_IBC,
    EMARKET,
)

_PRE_BLOCKERS = (UPGRADE,)

_MODULE_ACCOUNT_PERMISSIONS = (
    ModuleAccountPermission(FEE_COLLECTOR),
    ModuleAccountPermission(DISTRIBUTION),
    ModuleAccountPermission(MINT, (MINTER,)),
    ModuleAccountPermission(BONDED_POOL, (BURNER, STAKING)),
    ModuleAccountPermission(NOT_BONDED_POOL, (BURNER, STAKING)),
    ModuleAccountPermission(GOV, (BURNER,)),
    ModuleAccountPermission(NFT),
    ModuleAccountPermission(TRANSFER, (MINTER, BURNER)),
    ModuleAccountPermission(FEE_IBC),
    ModuleAccountPermission(INTERCHAIN_ACCOUNTS),
)

# The gov module account is deliberately allowed to receive funds.
_BLOCKED_ACCOUNT_ADDRESSES = (
    FEE_COLLECTOR,
    DISTRIBUTION,
    MINT,
    BONDED_POOL,
    NOT_BONDED_POOL,
    NFT,
)


def module_account_permissions() -> list[ModuleAccountPermission]:
    """Return the module accounts and their permissions, in declaration order."""
    return list(_MODULE_ACCOUNT_PERMISSIONS)


def blocked_account_addresses() -> list[str]:
    """Return the module accounts that may not receive funds."""
    return list(_BLOCKED_ACCOUNT_ADDRESSES)


def genesis_module_order() -> list[str]:
    """Return the order in which modules initialise their genesis state."""
    return list(_GENESIS_MODULE_ORDER)


def begin_blockers() -> list[str]:
    """Return the order of the modules' begin-block hooks."""
    return list(_BEGIN_BLOCKERS)


def end_blockers() -> list[str]:
    """Return the order of the modules' end-block hooks."""
    return list(_END_BLOCKERS)


def pre_blockers() -> list[str]:
    """Return the modules run before each block."""
    return list(_PRE_BLOCKERS)