"""Deterministic key derivation from textual seeds.

A seed is a secret URI of the form ``phrase//hard//path///password``.  The
phrase may be omitted, in which case :data:`cordspec.config.DEV_PHRASE` is
used, or it may be a raw ``0x``-prefixed 32-byte hex seed.  Every hard
junction in the path mixes a chain code into the secret, so ``//Alice`` and
``//Alice//stash`` yield unrelated keys from the same base phrase.

Each network role signs with its own key.  The derived secret is specialised
per :class:`KeyScheme` before it reaches Ed25519, and every scheme has its own
public key class, so a key of one role can never stand in for another.
"""

from __future__ import annotations

import enum
import hashlib
import logging
import re
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Tuple, Type, cast

from nacl import exceptions as nacl_exceptions
from nacl import signing

from .config import DEV_PHRASE, SS58_FORMAT
from .errors import InvalidSeedError
from .ss58 import ss58_decode, ss58_encode

logger = logging.getLogger(__name__)

_PHRASE_RE = re.compile(r"[\w ]*")
_PATH_RE = re.compile(r"(//?[^/]+)*")
_HDKD_TAG = b"Ed25519HDKD"
_JUNCTION_ID_LEN = 32


class KeyScheme(enum.Enum):
    """Key roles, valued by their four-byte key type id."""

    ACCOUNT = "acco"
    BLOCK_PRODUCTION = "babe"
    FINALITY = "gran"
    LIVENESS = "imon"
    DISCOVERY = "audi"

    @property
    def key_type_id(self) -> bytes:
        return self.value.encode("ascii")

    @property
    def public_class(self) -> Type["PublicKey"]:
        return _PUBLIC_CLASSES[self]


@dataclass(frozen=True)
class PublicKey:
    """32-byte Ed25519 public key bound to one :class:`KeyScheme`.

    Only the role-specific subclasses are instantiable.  Keys of different
    roles never compare equal, even when their bytes match.
    """

    data: bytes
    scheme: ClassVar[KeyScheme]

    def __post_init__(self) -> None:
        if type(self) is PublicKey:
            raise TypeError("use a role-specific public key class")
        if len(self.data) != 32:
            raise ValueError(f"{type(self).__name__} must be 32 bytes")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_hex(cls, value: str) -> "PublicKey":
        """Build a key from hex without checking it lies on the curve."""
        if value.startswith("0x"):
            value = value[2:]
        return cls(bytes.fromhex(value))

    def hex(self) -> str:
        return self.data.hex()

    def to_ss58(self, ss58_format: int = SS58_FORMAT) -> str:
        return ss58_encode(self.data, ss58_format)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Return ``True`` if ``signature`` over ``message`` is valid."""
        try:
            signing.VerifyKey(self.data).verify(message, signature)
        except (nacl_exceptions.BadSignatureError, ValueError):
            return False
        return True


class AccountPublic(PublicKey):
    scheme = KeyScheme.ACCOUNT


class BlockProductionKey(PublicKey):
    scheme = KeyScheme.BLOCK_PRODUCTION


class FinalityKey(PublicKey):
    scheme = KeyScheme.FINALITY


class LivenessKey(PublicKey):
    scheme = KeyScheme.LIVENESS


class DiscoveryKey(PublicKey):
    scheme = KeyScheme.DISCOVERY


_PUBLIC_CLASSES: Dict[KeyScheme, Type[PublicKey]] = {
    cls.scheme: cls
    for cls in (AccountPublic, BlockProductionKey, FinalityKey, LivenessKey, DiscoveryKey)
}


@dataclass(frozen=True, eq=False)
class KeyPair:
    """Signing key of one scheme."""

    scheme: KeyScheme
    signing_key: signing.SigningKey = field(repr=False)

    @property
    def public(self) -> PublicKey:
        return self.scheme.public_class(self.signing_key.verify_key.encode())

    def sign(self, message: bytes) -> bytes:
        return self.signing_key.sign(message).signature


@dataclass(frozen=True, order=True)
class AccountId:
    """Network account identifier; ordered by raw bytes."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 32:
            raise ValueError("AccountId must be 32 bytes")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_hex(cls, value: str) -> "AccountId":
        if value.startswith("0x"):
            value = value[2:]
        return cls(bytes.fromhex(value))

    @classmethod
    def from_ss58(cls, address: str) -> "AccountId":
        _, data = ss58_decode(address)
        return cls(data)

    def hex(self) -> str:
        return self.data.hex()

    def to_ss58(self, ss58_format: int = SS58_FORMAT) -> str:
        return ss58_encode(self.data, ss58_format)

    def __str__(self) -> str:
        return "0x" + self.data.hex()


def _blake2_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def _compact_len(length: int) -> bytes:
    """SCALE compact encoding of a length prefix."""
    if length < 1 << 6:
        return bytes([length << 2])
    if length < 1 << 14:
        return ((length << 2) | 0b01).to_bytes(2, "little")
    if length < 1 << 30:
        return ((length << 2) | 0b10).to_bytes(4, "little")
    raise InvalidSeedError("derivation junction too long")


def _chain_code(junction: str) -> bytes:
    if junction.isascii() and junction.isdigit() and int(junction) < 1 << 64:
        encoded = int(junction).to_bytes(8, "little")
    else:
        raw = junction.encode("utf-8")
        encoded = _compact_len(len(raw)) + raw
    if len(encoded) > _JUNCTION_ID_LEN:
        return _blake2_256(encoded)
    return encoded.ljust(_JUNCTION_ID_LEN, b"\0")


def parse_seed(seed: str) -> Tuple[str, List[Tuple[bool, str]], str]:
    """Split ``seed`` into ``(phrase, junctions, password)``.

    Junctions are ``(hard, name)`` pairs in path order.
    """
    body, sep, password = seed.partition("///")
    if sep and not password:
        raise InvalidSeedError("empty password in seed")

    slash = body.find("/")
    phrase, path = (body, "") if slash < 0 else (body[:slash], body[slash:])
    if not _PHRASE_RE.fullmatch(phrase):
        raise InvalidSeedError(f"invalid characters in seed phrase {phrase!r}")
    if not _PATH_RE.fullmatch(path):
        raise InvalidSeedError(f"malformed derivation path {path!r}")

    phrase = phrase.strip()
    junctions: List[Tuple[bool, str]] = []
    # A single word such as ``Alice`` names a hard junction under the dev phrase.
    if phrase and " " not in phrase and not phrase.startswith("0x"):
        junctions.append((True, phrase))
        phrase = ""
    for match in re.finditer(r"(//?)([^/]+)", path):
        junctions.append((match.group(1) == "//", match.group(2)))
    return phrase, junctions, password


def _root_secret(phrase: str, password: str) -> bytes:
    if not phrase:
        phrase = DEV_PHRASE
    if phrase.startswith("0x"):
        try:
            secret = bytes.fromhex(phrase[2:])
        except ValueError as exc:
            raise InvalidSeedError(f"invalid hex seed: {exc}") from exc
        if len(secret) != 32:
            raise InvalidSeedError("hex seed must be 32 bytes")
        return secret
    key = _blake2_256(password.encode("utf-8")) if password else b""
    return hashlib.blake2b(
        phrase.encode("utf-8"), digest_size=32, key=key, person=b"cord-phrase"
    ).digest()


def derive_secret(seed: str) -> bytes:
    """Return the scheme-independent 32-byte secret for ``seed``."""
    phrase, junctions, password = parse_seed(seed)
    secret = _root_secret(phrase, password)
    for hard, name in junctions:
        if not hard:
            raise InvalidSeedError(f"soft derivation /{name} is not supported for ed25519 keys")
        encoded_tag = _compact_len(len(_HDKD_TAG)) + _HDKD_TAG
        secret = _blake2_256(encoded_tag + secret + _chain_code(name))
    return secret


def derive_key(scheme: KeyScheme, seed: str) -> KeyPair:
    """Derive the ``scheme`` key pair for ``seed``.

    The same ``(scheme, seed)`` always yields the same key.  Raises
    :class:`InvalidSeedError` if ``seed`` is malformed.
    """
    secret = derive_secret(seed)
    role_seed = hashlib.blake2b(
        secret, digest_size=32, person=b"cord-role-" + scheme.key_type_id
    ).digest()
    pair = KeyPair(scheme, signing.SigningKey(role_seed))
    logger.debug("derived %s key %s", scheme.name, pair.public.hex())
    return pair


def get_from_seed(scheme: KeyScheme, seed: str) -> PublicKey:
    """Return the ``scheme`` public key for the development seed ``//seed``."""
    return derive_key(scheme, f"//{seed}").public


def derive_account_id(public: AccountPublic) -> AccountId:
    """Return the account identifier owned by an account-signing key."""
    if not isinstance(public, AccountPublic):
        raise TypeError(f"{type(public).__name__} cannot identify an account")
    return AccountId(public.data)


def get_account_id_from_seed(seed: str) -> AccountId:
    """Return the account identifier for the development seed ``//seed``."""
    return derive_account_id(cast(AccountPublic, get_from_seed(KeyScheme.ACCOUNT, seed)))


__all__ = [
    "KeyScheme",
    "PublicKey",
    "AccountPublic",
    "BlockProductionKey",
    "FinalityKey",
    "LivenessKey",
    "DiscoveryKey",
    "KeyPair",
    "AccountId",
    "parse_seed",
    "derive_secret",
    "derive_key",
    "get_from_seed",
    "derive_account_id",
    "get_account_id_from_seed",
]
