"""Telemetry endpoints and boot node addresses."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import base58
from websockets.exceptions import InvalidURI
from websockets.uri import parse_uri

from .errors import InvalidEndpointConfiguration

MAX_VERBOSITY = 255

# Multiaddr protocols accepted in boot node addresses, mapped to whether
# they take a value.
_PROTOCOLS = {
    "ip4": True,
    "ip6": True,
    "dns": True,
    "dns4": True,
    "dns6": True,
    "tcp": True,
    "udp": True,
    "ws": False,
    "wss": False,
    "quic": False,
    "quic-v1": False,
    "p2p": True,
}


@dataclass(frozen=True, init=False)
class TelemetryEndpoints:
    """Telemetry servers paired with the verbosity level sent to each."""

    endpoints: Tuple[Tuple[str, int], ...]

    def __init__(self, endpoints: Iterable[Tuple[str, int]]) -> None:
        checked: List[Tuple[str, int]] = []
        for url, verbosity in endpoints:
            try:
                parse_uri(url)
            except InvalidURI as exc:
                raise InvalidEndpointConfiguration(f"invalid telemetry url {url!r}: {exc}") from exc
            if (
                not isinstance(verbosity, int)
                or isinstance(verbosity, bool)
                or not 0 <= verbosity <= MAX_VERBOSITY
            ):
                raise InvalidEndpointConfiguration(
                    f"telemetry verbosity for {url!r} must be within 0..{MAX_VERBOSITY}"
                )
            checked.append((url, verbosity))
        object.__setattr__(self, "endpoints", tuple(checked))

    def to_list(self) -> List[List[object]]:
        return [[url, verbosity] for url, verbosity in self.endpoints]


def _check_value(protocol: str, value: str, addr: str) -> None:
    try:
        if protocol == "ip4":
            ipaddress.IPv4Address(value)
        elif protocol == "ip6":
            ipaddress.IPv6Address(value)
        elif protocol in ("tcp", "udp"):
            if not value.isdigit() or not 0 <= int(value) <= 65535:
                raise ValueError(f"invalid port {value!r}")
        elif protocol == "p2p":
            raw = base58.b58decode(value)
            # multihash: code byte, digest length byte, digest
            if len(raw) < 3 or raw[1] + 2 != len(raw):
                raise ValueError(f"peer id {value!r} is not a multihash")
        elif not value:
            raise ValueError(f"empty {protocol} value")
    except ValueError as exc:
        raise InvalidEndpointConfiguration(f"invalid boot node {addr!r}: {exc}") from exc


def parse_boot_node(addr: str) -> str:
    """Validate a boot node multiaddr ending in ``/p2p/<peer id>``.

    Returns ``addr`` unchanged.
    """
    if not addr.startswith("/"):
        raise InvalidEndpointConfiguration(f"boot node {addr!r} must start with '/'")
    parts = addr[1:].split("/")
    seen: List[str] = []
    idx = 0
    while idx < len(parts):
        protocol = parts[idx]
        if protocol not in _PROTOCOLS:
            raise InvalidEndpointConfiguration(
                f"unsupported protocol {protocol!r} in boot node {addr!r}"
            )
        if _PROTOCOLS[protocol]:
            if idx + 1 >= len(parts):
                raise InvalidEndpointConfiguration(f"missing {protocol} value in boot node {addr!r}")
            _check_value(protocol, parts[idx + 1], addr)
            idx += 2
        else:
            idx += 1
        seen.append(protocol)

    if not seen or seen[-1] != "p2p" or seen.count("p2p") != 1:
        raise InvalidEndpointConfiguration(f"boot node {addr!r} must end with a single /p2p/<peer id>")
    return addr


def parse_boot_nodes(addrs: Iterable[str]) -> Tuple[str, ...]:
    return tuple(parse_boot_node(addr) for addr in addrs)


__all__ = [
    "MAX_VERBOSITY",
    "TelemetryEndpoints",
    "parse_boot_node",
    "parse_boot_nodes",
]
