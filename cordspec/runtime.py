"""Providers of the compiled runtime code blob."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .errors import MissingRuntimeArtifact

logger = logging.getLogger(__name__)

# A provider is any zero-argument callable returning the blob or ``None``.
RuntimeProvider = Callable[[], Optional[bytes]]


class WasmFileProvider:
    """Read the runtime blob from ``path``; ``None`` if it does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __call__(self) -> Optional[bytes]:
        if not self.path.is_file():
            logger.debug("runtime blob %s not found", self.path)
            return None
        data = self.path.read_bytes()
        return data or None


class StaticRuntimeProvider:
    """Serve an in-memory runtime blob."""

    def __init__(self, blob: Optional[bytes]) -> None:
        self.blob = blob

    def __call__(self) -> Optional[bytes]:
        return self.blob


def require_runtime(provider: RuntimeProvider, profile: str) -> bytes:
    """Return the runtime blob or raise :class:`MissingRuntimeArtifact`."""
    blob = provider()
    if not blob:
        raise MissingRuntimeArtifact(profile)
    return blob


__all__ = [
    "RuntimeProvider",
    "WasmFileProvider",
    "StaticRuntimeProvider",
    "require_runtime",
]
