"""Per-provider translations and the provider priority merge."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping

from .chain import get_global_provider_chain, normalise_provider_order
from .translation import Translation


class ProviderMap(MutableMapping[str, Translation]):
    """Translations of a single piece of content keyed by the provider supplying them.

    Assigned values, :class:`Translation` instances included, are copied so a
    map never shares its entries with the caller or with another map.
    """

    __slots__ = ("_providers",)

    def __init__(
        self, source: Mapping[str, Mapping[str, str] | None] | None = None
    ) -> None:
        self._providers: dict[str, Translation] = {}
        if source:
            for name, translation in source.items():
                self._providers[name] = Translation(translation)

    def __getitem__(self, name: str) -> Translation:
        return self._providers[name]

    def __setitem__(self, name: str, translation: Mapping[str, str] | None) -> None:
        self._providers[name] = Translation(translation)

    def __delitem__(self, name: str) -> None:
        del self._providers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_mapping()!r})"

    def chain(self) -> Translation:
        """Merge the providers following the global provider chain."""

        return self.custom_chain(get_global_provider_chain())

    def custom_chain(self, order: Iterable[str]) -> Translation:
        """Merge the providers following ``order``, ignoring the global chain.

        Each language is taken from the first provider in ``order`` that defines
        it, so lower priority providers only fill the gaps left by the ones
        before them. Providers missing from ``order`` are never consulted.
        """

        result = Translation()
        for name in normalise_provider_order(order):
            translation = self._providers.get(name)
            if translation is None:
                continue
            for lang, value in translation.items():
                if lang not in result:
                    result[lang] = value
        return result

    def set_value(self, provider: str, lang: str, value: str) -> None:
        """Set ``lang`` for ``provider``, creating the provider when needed."""

        translation = self._providers.get(provider)
        if translation is None:
            translation = self._providers[provider] = Translation()
        translation.set(lang, value)

    def provider(self, name: str) -> Translation:
        """Return the translation of ``name`` or an empty one when absent."""

        translation = self._providers.get(name)
        return translation if translation is not None else Translation()

    def as_mapping(self) -> dict[str, dict[str, str]]:
        return {name: translation.as_mapping() for name, translation in self._providers.items()}


__all__ = ["ProviderMap"]
