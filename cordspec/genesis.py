"""Assembly of the runtime genesis record.

:func:`assemble` is a pure transform from :class:`GenesisInputs` to a
:class:`GenesisRecord`.  Every subsystem of the runtime receives an explicit
configuration, even when it is empty, so consumers always get a total
record.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass, field
from itertools import chain
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from .authority import AuthorityRecord, SessionKeys, session_keys
from .config import DEV_ENDOWMENT, STASH
from .keys import AccountId, PublicKey

logger = logging.getLogger(__name__)

Balance = int


class AllowedSlots(enum.Enum):
    PRIMARY_SLOTS = "PrimarySlots"
    PRIMARY_AND_SECONDARY_PLAIN_SLOTS = "PrimaryAndSecondaryPlainSlots"
    PRIMARY_AND_SECONDARY_VRF_SLOTS = "PrimaryAndSecondaryVRFSlots"


@dataclass(frozen=True)
class EpochConfiguration:
    """Block production epoch parameters.

    ``c`` is the probability that a slot gets a primary block producer,
    expressed as a ``(numerator, denominator)`` pair.
    """

    c: Tuple[int, int]
    allowed_slots: AllowedSlots

    def to_dict(self) -> Dict[str, Any]:
        return {"c": list(self.c), "allowed_slots": self.allowed_slots.value}


# Network-wide constant; profiles never vary it.
BABE_GENESIS_EPOCH_CONFIG = EpochConfiguration(
    c=(1, 4), allowed_slots=AllowedSlots.PRIMARY_AND_SECONDARY_VRF_SLOTS
)


# subsystem configurations ---------------------------------------------------
@dataclass(frozen=True)
class SystemConfig:
    code: bytes = field(repr=False)


@dataclass(frozen=True)
class BalancesConfig:
    balances: Tuple[Tuple[AccountId, Balance], ...] = ()

    def balance_of(self, account: AccountId) -> Balance:
        return sum(amount for who, amount in self.balances if who == account)


@dataclass(frozen=True)
class IndicesConfig:
    indices: Tuple[Tuple[int, AccountId], ...] = ()


@dataclass(frozen=True)
class AuthorityManagerConfig:
    authorities: Tuple[AccountId, ...] = ()


@dataclass(frozen=True)
class SessionConfig:
    keys: Tuple[Tuple[AccountId, AccountId, SessionKeys], ...] = ()


@dataclass(frozen=True)
class BabeConfig:
    authorities: Tuple[Tuple[PublicKey, int], ...] = ()
    epoch_config: Optional[EpochConfiguration] = None


@dataclass(frozen=True)
class GrandpaConfig:
    authorities: Tuple[Tuple[PublicKey, int], ...] = ()


@dataclass(frozen=True)
class ImOnlineConfig:
    keys: Tuple[PublicKey, ...] = ()


@dataclass(frozen=True)
class ExtrinsicAuthorshipConfig:
    authors: Tuple[Tuple[AccountId, None], ...] = ()


@dataclass(frozen=True)
class MembershipConfig:
    members: Tuple[AccountId, ...] = ()


@dataclass(frozen=True)
class DemocracyConfig:
    pass


@dataclass(frozen=True)
class TreasuryConfig:
    pass


@dataclass(frozen=True)
class TransactionPaymentConfig:
    pass


@dataclass(frozen=True)
class AuthorityDiscoveryConfig:
    keys: Tuple[PublicKey, ...] = ()


@dataclass(frozen=True)
class SudoConfig:
    key: Optional[AccountId] = None


@dataclass(frozen=True)
class GenesisRecord:
    """Initial state of every runtime subsystem."""

    system: SystemConfig
    balances: BalancesConfig
    indices: IndicesConfig
    authority_manager: AuthorityManagerConfig
    session: SessionConfig
    babe: BabeConfig
    grandpa: GrandpaConfig
    im_online: ImOnlineConfig
    extrinsic_authorship: ExtrinsicAuthorshipConfig
    democracy: DemocracyConfig
    council: MembershipConfig
    technical_committee: MembershipConfig
    technical_membership: MembershipConfig
    treasury: TreasuryConfig
    transaction_payment: TransactionPaymentConfig
    authority_discovery: AuthorityDiscoveryConfig
    sudo: SudoConfig

    def subsystems(self) -> Dict[str, Any]:
        """Return the subsystem name -> configuration mapping."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}

    def to_dict(self, ss58_format: int) -> Dict[str, Any]:
        """Render the record as runtime genesis JSON.

        Accounts and keys are shown as SS58 addresses in ``ss58_format`` and
        the runtime code as ``0x``-prefixed hex.
        """
        return {
            _camel(name): _to_json(config, ss58_format)
            for name, config in self.subsystems().items()
        }


@dataclass(frozen=True)
class GenesisInputs:
    """Everything :func:`assemble` needs to build a genesis record."""

    code: bytes = field(repr=False)
    authorities: Tuple[AuthorityRecord, ...]
    root_key: AccountId
    endowed_accounts: Tuple[AccountId, ...]
    extra_endowed_accounts: Tuple[AccountId, ...] = ()
    authors: Tuple[Tuple[AccountId, None], ...] = ()
    endowment: Balance = DEV_ENDOWMENT
    stash: Balance = STASH

    def __post_init__(self) -> None:
        for name in ("authorities", "endowed_accounts", "extra_endowed_accounts", "authors"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "code", bytes(self.code))


# helpers ---------------------------------------------------------------------
def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _to_json(value: Any, ss58_format: int) -> Any:
    if isinstance(value, (AccountId, PublicKey)):
        return value.to_ss58(ss58_format)
    if isinstance(value, SessionKeys):
        return value.to_dict(ss58_format)
    if isinstance(value, EpochConfiguration):
        return value.to_dict()
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if dataclasses.is_dataclass(value):
        return {
            _camel(f.name): _to_json(getattr(value, f.name), ss58_format)
            for f in dataclasses.fields(value)
        }
    if isinstance(value, (tuple, list)):
        return [_to_json(item, ss58_format) for item in value]
    return value


def council_size(num_endowed: int) -> int:
    """Leading half of the endowed accounts, rounded up."""
    return (num_endowed + 1) // 2


def council_members(endowed_accounts: Sequence[AccountId]) -> Tuple[AccountId, ...]:
    return tuple(endowed_accounts[: council_size(len(endowed_accounts))])


def sum_balances(
    credits: Iterable[Tuple[AccountId, Balance]],
) -> Tuple[Tuple[AccountId, Balance], ...]:
    """Merge ``credits`` per account, keeping first-appearance order."""
    totals: Dict[AccountId, Balance] = {}
    for account, amount in credits:
        totals[account] = totals.get(account, 0) + amount
    return tuple(totals.items())


# assembly ----------------------------------------------------------------------
def assemble(inputs: GenesisInputs) -> GenesisRecord:
    """Build the genesis record described by ``inputs``."""
    balances = sum_balances(
        chain(
            ((account, inputs.endowment) for account in inputs.endowed_accounts),
            ((account, inputs.endowment) for account in inputs.extra_endowed_accounts),
            ((record.stash, inputs.stash) for record in inputs.authorities),
        )
    )
    members = council_members(inputs.endowed_accounts)

    record = GenesisRecord(
        system=SystemConfig(code=inputs.code),
        balances=BalancesConfig(balances=balances),
        indices=IndicesConfig(indices=()),
        authority_manager=AuthorityManagerConfig(
            authorities=tuple(x.stash for x in inputs.authorities)
        ),
        session=SessionConfig(
            keys=tuple((x.stash, x.stash, session_keys(x)) for x in inputs.authorities)
        ),
        babe=BabeConfig(authorities=(), epoch_config=BABE_GENESIS_EPOCH_CONFIG),
        grandpa=GrandpaConfig(),
        im_online=ImOnlineConfig(),
        extrinsic_authorship=ExtrinsicAuthorshipConfig(authors=inputs.authors),
        democracy=DemocracyConfig(),
        council=MembershipConfig(members=members),
        technical_committee=MembershipConfig(members=members),
        technical_membership=MembershipConfig(),
        treasury=TreasuryConfig(),
        transaction_payment=TransactionPaymentConfig(),
        authority_discovery=AuthorityDiscoveryConfig(keys=()),
        sudo=SudoConfig(key=inputs.root_key),
    )
    logger.debug(
        "assembled genesis with %d balances, %d authorities, %d council members",
        len(balances),
        len(inputs.authorities),
        len(members),
    )
    return record


def authority_accounts_resolvable(record: GenesisRecord) -> bool:
    """Return ``True`` if authority and session registries are consistent.

    Every referenced account must be a valid :class:`AccountId` and the two
    registries must list the same stash accounts in the same order.
    """
    authorities = record.authority_manager.authorities
    keys = record.session.keys
    if len(authorities) != len(keys):
        return False
    for authority, (stash, controller, bundle) in zip(authorities, keys):
        if not all(isinstance(a, AccountId) for a in (authority, stash, controller)):
            return False
        if authority != stash or not isinstance(bundle, SessionKeys):
            return False
    return True


__all__ = [
    "AllowedSlots",
    "EpochConfiguration",
    "BABE_GENESIS_EPOCH_CONFIG",
    "SystemConfig",
    "BalancesConfig",
    "IndicesConfig",
    "AuthorityManagerConfig",
    "SessionConfig",
    "BabeConfig",
    "GrandpaConfig",
    "ImOnlineConfig",
    "ExtrinsicAuthorshipConfig",
    "MembershipConfig",
    "DemocracyConfig",
    "TreasuryConfig",
    "TransactionPaymentConfig",
    "AuthorityDiscoveryConfig",
    "SudoConfig",
    "GenesisRecord",
    "GenesisInputs",
    "council_size",
    "council_members",
    "sum_balances",
    "assemble",
    "authority_accounts_resolvable",
]
