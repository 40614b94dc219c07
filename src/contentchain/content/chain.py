"""Process-wide provider priority used by :meth:`ProviderMap.chain`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

logger = logging.getLogger(__name__)

_lock = Lock()
_provider_chain: tuple[str, ...] = ()


def normalise_provider_order(order: Iterable[str]) -> tuple[str, ...]:
    """Return ``order`` as a tuple of provider names, rejecting bare strings."""

    if isinstance(order, (str, bytes)):
        raise TypeError("Provider order must be a sequence of names, not a single string")

    names = tuple(order)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Provider names must be strings, got {type(name).__name__}")
    return names


def set_global_provider_chain(order: Iterable[str]) -> None:
    """Replace the global provider priority for every subsequent merge."""

    global _provider_chain

    names = normalise_provider_order(order)
    with _lock:
        previous = _provider_chain
        _provider_chain = names

    if previous != names:
        logger.info("Global provider chain set to %s", list(names))


def get_global_provider_chain() -> tuple[str, ...]:
    """Return the provider priority currently in effect."""

    with _lock:
        return _provider_chain


__all__ = [
    "get_global_provider_chain",
    "normalise_provider_order",
    "set_global_provider_chain",
]
