"""Authority records and session key bundles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .keys import (
    AccountId,
    BlockProductionKey,
    DiscoveryKey,
    FinalityKey,
    KeyScheme,
    LivenessKey,
    get_account_id_from_seed,
    get_from_seed,
)


@dataclass(frozen=True)
class SessionKeys:
    """Role keys registered against one validator, in registration order."""

    block_production: BlockProductionKey
    finality: FinalityKey
    liveness: LivenessKey
    discovery: DiscoveryKey

    def as_tuple(self) -> Tuple[BlockProductionKey, FinalityKey, LivenessKey, DiscoveryKey]:
        return (self.block_production, self.finality, self.liveness, self.discovery)

    def encode(self) -> bytes:
        """Concatenate the raw key bytes in role order."""
        return b"".join(key.data for key in self.as_tuple())

    def to_dict(self, ss58_format: int) -> dict:
        return {
            "babe": self.block_production.to_ss58(ss58_format),
            "grandpa": self.finality.to_ss58(ss58_format),
            "imOnline": self.liveness.to_ss58(ss58_format),
            "authorityDiscovery": self.discovery.to_ss58(ss58_format),
        }


@dataclass(frozen=True)
class AuthorityRecord:
    """One network participant: its accounts and its four role keys."""

    stash: AccountId
    controller: AccountId
    block_production: BlockProductionKey
    finality: FinalityKey
    liveness: LivenessKey
    discovery: DiscoveryKey

    @classmethod
    def from_hex(
        cls,
        stash: str,
        controller: str,
        block_production: str,
        finality: str,
        liveness: str,
        discovery: str,
    ) -> "AuthorityRecord":
        """Build a record from hard-coded public key material."""
        return cls(
            AccountId.from_hex(stash),
            AccountId.from_hex(controller),
            BlockProductionKey.from_hex(block_production),
            FinalityKey.from_hex(finality),
            LivenessKey.from_hex(liveness),
            DiscoveryKey.from_hex(discovery),
        )


def authority_keys_from_seed(seed: str) -> AuthorityRecord:
    """Generate stash, controller and session keys from ``seed``."""
    return AuthorityRecord(
        stash=get_account_id_from_seed(f"{seed}//stash"),
        controller=get_account_id_from_seed(seed),
        block_production=get_from_seed(KeyScheme.BLOCK_PRODUCTION, seed),
        finality=get_from_seed(KeyScheme.FINALITY, seed),
        liveness=get_from_seed(KeyScheme.LIVENESS, seed),
        discovery=get_from_seed(KeyScheme.DISCOVERY, seed),
    )


def session_keys(record: AuthorityRecord) -> SessionKeys:
    return SessionKeys(
        record.block_production,
        record.finality,
        record.liveness,
        record.discovery,
    )


__all__ = [
    "SessionKeys",
    "AuthorityRecord",
    "authority_keys_from_seed",
    "session_keys",
]
