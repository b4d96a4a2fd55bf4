"""Account catalogs used to populate genesis.

Development and local profiles derive their accounts from well-known seeds.
The staging profile uses hard-coded public keys only; no seed for them is
published.
"""

from __future__ import annotations

from typing import Tuple

from .authority import AuthorityRecord
from .keys import AccountId, get_account_id_from_seed

# Pallet account ``modlpy/crdit`` padded to 32 bytes.
CREDIT_TREASURY = AccountId.from_hex(
    "6d6f646c70792f63726469740000000000000000000000000000000000000000"
)

STAGING_AUTHORITIES: Tuple[AuthorityRecord, ...] = (
    AuthorityRecord.from_hex(
        "6ab68082628ad0cfab68b1a00377170ff0dea4da06030cdd0c21a364ecbbc23b",
        "e41d2833b0b2f629e52a1bc1ace3079c395673bab26a14626b52c132b1fb5f1c",
        "b4a78c7de7cc60ed9a99029fcf487f40a3c4b5d5d78a7080387507a680ecb75e",
        "a5b6331fcff809f2b3419332678fd7b23a2a9320240ec36652337fe66a7337e0",
        "962cc02d5dddbb2fc03bd8d511844ec47e798b3bc20d9daf7400b3d09533d518",
        "424af4547d488e65307cb14ffae20257b6e000658913f985824da5629afff13c",
    ),
    AuthorityRecord.from_hex(
        "6efebd6198dc606b9074d7b3cd205261f36e143701a393ee880d29ebab55e92d",
        "186f6e121c08e7d2951f086cec0d6cf90e5b964a321175914ab5cb938cb51006",
        "c0d386cbb0f71fd8c22fe5724b02bb747a92d5241cfcb7ee81f2611491a4ec2f",
        "c9b4beb11d90a463dbf7dfc9a20d00538333429e1f93874bf3937de98e49939f",
        "1e35b40417a5631c4762974cfd37128985aa626366d659eb37b7d19eca5ce676",
        "2ceb10e043fd67269c33758d0f65d245a2edcd293049b2cb78a807106643ed4c",
    ),
    AuthorityRecord.from_hex(
        "0218be44e37405b283cd8e2ddf9fb73ec9bde2efc1b6567f2df55fc311bd4502",
        "c227e25885b199a75429484278681c276062e6b0639c75aba6d7eba622ae773d",
        "caf72037137297537c8e00dfe6259a640801d62c71a55d825d9994a26d743b7d",
        "f2079c41fe0f05f17138e205da91e90958212daf50605d99699baf081daae49d",
        "924daa7728eab557869188f55b30fd8d4810cbd60ad3280c6562e0a8cad3943a",
        "3a39c922f4c6f6efe8893260b7d326964b12686c28b84a3b83b973c279215243",
    ),
)

STAGING_ENDOWED_ACCOUNTS: Tuple[AccountId, ...] = tuple(
    AccountId.from_hex(value)
    for value in (
        "903c379067968d241b2293784ff353d533837f77bcb72154e278ed06e1026a4b",
        "eceb211f4c13366434d1b8d96f91099e4810e5ce7f195d2de489baf207ce4576",
        "0684d85c98b64e8af9cb23db1e5e5ed9acc2b65c4dbefc6c3feaba8176da3f13",
        "02c7c55d71abbaffb9590bcaf48ad687b783c035f9ad1e94208b776ff4a6e13f",
        "ae2b60ce50c8a6a0f9f1eba33eec5106facfb366e946a59591633bd30c090d7d",
    )
)


def testnet_accounts() -> Tuple[AccountId, ...]:
    """Well-known development accounts.

    Order is significant: governance takes the leading half of this list.
    """
    return tuple(
        get_account_id_from_seed(seed)
        for seed in ("Alice", "Bob", "Charlie", "Alice//stash", "Bob//stash")
    )


def author_accounts() -> Tuple[Tuple[AccountId, None], ...]:
    """Accounts allowed to submit extrinsics at genesis.

    The second slot of each pair is reserved for per-author metadata.
    """
    return tuple(
        (get_account_id_from_seed(seed), None) for seed in ("Alice", "Bob", "Charlie")
    )


__all__ = [
    "CREDIT_TREASURY",
    "STAGING_AUTHORITIES",
    "STAGING_ENDOWED_ACCOUNTS",
    "testnet_accounts",
    "author_accounts",
]
