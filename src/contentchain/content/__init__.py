"""Multi-provider, multi-language content resolution."""

from .chain import get_global_provider_chain, set_global_provider_chain
from .codec import CodecError, DecodeError, EncodeError, deserialize, serialize
from .provider import ProviderMap
from .translation import Translation, lang_chain

__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
    "ProviderMap",
    "Translation",
    "deserialize",
    "get_global_provider_chain",
    "lang_chain",
    "serialize",
    "set_global_provider_chain",
]
