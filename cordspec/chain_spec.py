"""CORD chain configurations.

One factory per network profile.  Each factory fetches the runtime blob,
prepares the profile's :class:`~cordspec.genesis.GenesisInputs` and wraps
them with the profile metadata in a :class:`ChainSpec`.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from .accounts import (
    CREDIT_TREASURY,
    STAGING_AUTHORITIES,
    STAGING_ENDOWED_ACCOUNTS,
    author_accounts,
    testnet_accounts,
)
from .authority import AuthorityRecord, authority_keys_from_seed
from .config import (
    DEFAULT_PROTOCOL_ID,
    DEV_ENDOWMENT,
    SS58_FORMAT,
    STAGING_ENDOWMENT,
    STAGING_TELEMETRY_URL,
    STASH,
    TOKEN_DECIMALS,
    TOKEN_SYMBOL,
)
from .endpoints import TelemetryEndpoints, parse_boot_nodes
from .errors import UnknownChainError
from .genesis import GenesisInputs, GenesisRecord, assemble
from .keys import AccountId, get_account_id_from_seed
from .runtime import RuntimeProvider, require_runtime

logger = logging.getLogger(__name__)


class ChainType(enum.Enum):
    DEVELOPMENT = "Development"
    LOCAL = "Local"
    LIVE = "Live"


@dataclass(frozen=True)
class Properties:
    """Display properties shown by wallets and explorers."""

    token_symbol: str
    token_decimals: int
    ss58_format: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokenSymbol": self.token_symbol,
            "tokenDecimals": self.token_decimals,
            "ss58Format": self.ss58_format,
        }


def get_properties(symbol: str, decimals: int, ss58_format: int) -> Properties:
    return Properties(symbol, decimals, ss58_format)


@dataclass(frozen=True)
class Extensions:
    """Chain spec extensions.

    ``fork_blocks`` pins block numbers to known hashes, ``bad_blocks`` lists
    hashes to reject and ``light_sync_state`` carries the state served to
    light clients.
    """

    fork_blocks: Optional[Tuple[Tuple[int, str], ...]] = None
    bad_blocks: Optional[Tuple[str, ...]] = None
    light_sync_state: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "forkBlocks": None if self.fork_blocks is None else [list(x) for x in self.fork_blocks],
            "badBlocks": None if self.bad_blocks is None else list(self.bad_blocks),
            "lightSyncState": self.light_sync_state,
        }


@dataclass(frozen=True)
class ChainSpec:
    """A network profile together with the inputs of its genesis record."""

    name: str
    id: str
    chain_type: ChainType
    genesis_inputs: GenesisInputs = field(repr=False)
    boot_nodes: Tuple[str, ...] = ()
    telemetry_endpoints: Optional[TelemetryEndpoints] = None
    protocol_id: Optional[str] = None
    fork_id: Optional[str] = None
    properties: Optional[Properties] = None
    extensions: Extensions = field(default_factory=Extensions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "boot_nodes", parse_boot_nodes(self.boot_nodes))

    def build_genesis(self) -> GenesisRecord:
        return assemble(self.genesis_inputs)

    def to_dict(self) -> Dict[str, Any]:
        """Render the spec, including its genesis, as chain spec JSON."""
        ss58_format = self.properties.ss58_format if self.properties else SS58_FORMAT
        data: Dict[str, Any] = {
            "name": self.name,
            "id": self.id,
            "chainType": self.chain_type.value,
            "bootNodes": list(self.boot_nodes),
            "telemetryEndpoints": (
                self.telemetry_endpoints.to_list() if self.telemetry_endpoints else None
            ),
            "protocolId": self.protocol_id,
            "forkId": self.fork_id,
            "properties": self.properties.to_dict() if self.properties else None,
        }
        data.update(self.extensions.to_dict())
        data["codeSubstitutes"] = {}
        data["genesis"] = {"runtime": self.build_genesis().to_dict(ss58_format)}
        return data

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


DEFAULT_PROPERTIES = get_properties(TOKEN_SYMBOL, TOKEN_DECIMALS, SS58_FORMAT)


# genesis inputs ----------------------------------------------------------------
def development_genesis(
    code: bytes,
    initial_authorities: Sequence[AuthorityRecord],
    root_key: AccountId,
    endowed_accounts: Optional[Sequence[AccountId]] = None,
) -> GenesisInputs:
    """Genesis inputs shared by the development and local profiles."""
    if endowed_accounts is None:
        endowed_accounts = testnet_accounts()
    return GenesisInputs(
        code=code,
        authorities=tuple(initial_authorities),
        root_key=root_key,
        endowed_accounts=tuple(endowed_accounts),
        extra_endowed_accounts=(CREDIT_TREASURY,),
        authors=author_accounts(),
        endowment=DEV_ENDOWMENT,
        stash=STASH,
    )


def development_config_genesis(code: bytes) -> GenesisInputs:
    return development_genesis(
        code,
        [authority_keys_from_seed("Alice")],
        get_account_id_from_seed("Alice"),
    )


def local_testnet_config_genesis(code: bytes) -> GenesisInputs:
    return development_genesis(
        code,
        [authority_keys_from_seed("Alice"), authority_keys_from_seed("Bob")],
        get_account_id_from_seed("Alice"),
    )


def staging_config_genesis(code: bytes) -> GenesisInputs:
    return GenesisInputs(
        code=code,
        authorities=STAGING_AUTHORITIES,
        root_key=STAGING_ENDOWED_ACCOUNTS[0],
        endowed_accounts=STAGING_ENDOWED_ACCOUNTS,
        authors=author_accounts(),
        endowment=STAGING_ENDOWMENT,
        stash=STASH,
    )


# profiles ------------------------------------------------------------------------
def development_config(
    runtime: RuntimeProvider, *, properties: Optional[Properties] = None
) -> ChainSpec:
    """Single-authority development chain."""
    code = require_runtime(runtime, "CORD development")
    logger.info("building development chain spec")
    return ChainSpec(
        name="Dev. Node",
        id="cord_dev",
        chain_type=ChainType.DEVELOPMENT,
        genesis_inputs=development_config_genesis(code),
        protocol_id=DEFAULT_PROTOCOL_ID,
        properties=properties or DEFAULT_PROPERTIES,
    )


def local_testnet_config(
    runtime: RuntimeProvider, *, properties: Optional[Properties] = None
) -> ChainSpec:
    """Two-authority local testnet."""
    code = require_runtime(runtime, "CORD local testnet")
    logger.info("building local testnet chain spec")
    return ChainSpec(
        name="Local",
        id="cord_local",
        chain_type=ChainType.LOCAL,
        genesis_inputs=local_testnet_config_genesis(code),
        protocol_id=DEFAULT_PROTOCOL_ID,
        properties=properties or DEFAULT_PROPERTIES,
    )


def staging_config(
    runtime: RuntimeProvider,
    *,
    properties: Optional[Properties] = None,
    boot_nodes: Iterable[str] = (),
    telemetry_url: str = STAGING_TELEMETRY_URL,
) -> ChainSpec:
    """Staging testnet with hard-coded authorities."""
    code = require_runtime(runtime, "CORD staging")
    telemetry = TelemetryEndpoints([(telemetry_url, 0)])
    logger.info("building staging chain spec")
    return ChainSpec(
        name="CORD Staging Testnet",
        id="cord_staging_testnet",
        chain_type=ChainType.LIVE,
        genesis_inputs=staging_config_genesis(code),
        boot_nodes=tuple(boot_nodes),
        telemetry_endpoints=telemetry,
        protocol_id=DEFAULT_PROTOCOL_ID,
        properties=properties or DEFAULT_PROPERTIES,
    )


CHAIN_FACTORIES: Dict[str, Callable[[RuntimeProvider], ChainSpec]] = {
    "dev": development_config,
    "cord_dev": development_config,
    "local": local_testnet_config,
    "cord_local": local_testnet_config,
    "staging": staging_config,
    "cord_staging_testnet": staging_config,
}


def load_spec(chain_id: str, runtime: RuntimeProvider) -> ChainSpec:
    """Return the chain spec registered under ``chain_id``."""
    try:
        factory = CHAIN_FACTORIES[chain_id]
    except KeyError:
        raise UnknownChainError(f"unknown chain {chain_id!r}") from None
    return factory(runtime)


__all__ = [
    "ChainType",
    "Properties",
    "get_properties",
    "Extensions",
    "ChainSpec",
    "DEFAULT_PROPERTIES",
    "development_genesis",
    "development_config_genesis",
    "local_testnet_config_genesis",
    "staging_config_genesis",
    "development_config",
    "local_testnet_config",
    "staging_config",
    "CHAIN_FACTORIES",
    "load_spec",
]
