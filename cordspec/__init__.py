from .chain_spec import (
    ChainSpec,
    ChainType,
    development_config,
    load_spec,
    local_testnet_config,
    staging_config,
)
from .genesis import GenesisInputs, GenesisRecord, assemble
from .keys import AccountId, KeyScheme, derive_account_id, derive_key

__all__ = [
    "ChainSpec",
    "ChainType",
    "development_config",
    "local_testnet_config",
    "staging_config",
    "load_spec",
    "GenesisInputs",
    "GenesisRecord",
    "assemble",
    "AccountId",
    "KeyScheme",
    "derive_account_id",
    "derive_key",
]
