"""Resolve display strings from multi-provider, multi-language content."""

from .content import (
    DecodeError,
    EncodeError,
    ProviderMap,
    Translation,
    deserialize,
    get_global_provider_chain,
    serialize,
    set_global_provider_chain,
)

__all__ = [
    "DecodeError",
    "EncodeError",
    "ProviderMap",
    "Translation",
    "deserialize",
    "get_global_provider_chain",
    "serialize",
    "set_global_provider_chain",
]
