"""Exceptions raised while building chain specifications.

All of them are configuration errors: they are raised at build time and
abort the requested profile.  Nothing here is retried.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Base class for chain specification build failures."""


class MissingRuntimeArtifact(ConfigurationError):
    """The runtime code provider returned nothing for a profile."""

    def __init__(self, profile: str) -> None:
        super().__init__(f"{profile} wasm not available")
        self.profile = profile


class InvalidEndpointConfiguration(ConfigurationError):
    """A telemetry endpoint or boot node address is malformed."""


class InvalidSeedError(ConfigurationError):
    """A seed string cannot be turned into key material."""


class UnknownChainError(ConfigurationError, KeyError):
    """No profile is registered under the requested chain id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ConfigurationError",
    "MissingRuntimeArtifact",
    "InvalidEndpointConfiguration",
    "InvalidSeedError",
    "UnknownChainError",
]
