"""SS58 address encoding for 32-byte account identifiers."""

from __future__ import annotations

import hashlib
from typing import Tuple

import base58

_PREFIX = b"SS58PRE"
_CHECKSUM_LEN = 2
_MAX_FORMAT = 16383


def _checksum(payload: bytes) -> bytes:
    return hashlib.blake2b(_PREFIX + payload, digest_size=64).digest()[:_CHECKSUM_LEN]


def _encode_prefix(ss58_format: int) -> bytes:
    if ss58_format < 0 or ss58_format > _MAX_FORMAT or ss58_format in (46, 47):
        raise ValueError(f"invalid ss58 format {ss58_format}")
    if ss58_format < 64:
        return bytes([ss58_format])
    first = ((ss58_format & 0b1111_1100) >> 2) | 0b0100_0000
    second = (ss58_format >> 8) | ((ss58_format & 0b11) << 6)
    return bytes([first, second])


def ss58_encode(data: bytes, ss58_format: int) -> str:
    """Return the SS58 address of ``data`` under ``ss58_format``."""
    if len(data) != 32:
        raise ValueError("ss58 payload must be 32 bytes")
    payload = _encode_prefix(ss58_format) + bytes(data)
    return base58.b58encode(payload + _checksum(payload)).decode("ascii")


def ss58_decode(address: str) -> Tuple[int, bytes]:
    """Return ``(ss58_format, data)`` for ``address``.

    Raises :class:`ValueError` if the address is not valid base58, uses a
    reserved prefix, has an unexpected length or carries a bad checksum.
    """
    raw = base58.b58decode(address)
    if not raw:
        raise ValueError("empty address")
    if raw[0] & 0b1000_0000:
        raise ValueError(f"reserved address prefix byte {raw[0]}")
    if raw[0] & 0b0100_0000:
        if len(raw) < 2:
            raise ValueError("truncated address prefix")
        lower = ((raw[0] << 2) | (raw[1] >> 6)) & 0xFF
        upper = raw[1] & 0b0011_1111
        ss58_format = lower | (upper << 8)
        prefix_len = 2
    else:
        ss58_format = raw[0]
        prefix_len = 1
    if ss58_format in (46, 47):
        raise ValueError(f"reserved ss58 format {ss58_format}")

    if len(raw) != prefix_len + 32 + _CHECKSUM_LEN:
        raise ValueError("unexpected address length")
    payload, checksum = raw[:-_CHECKSUM_LEN], raw[-_CHECKSUM_LEN:]
    if _checksum(payload) != checksum:
        raise ValueError("invalid address checksum")
    return ss58_format, payload[prefix_len:]


__all__ = ["ss58_encode", "ss58_decode"]
