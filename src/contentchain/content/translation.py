"""Language-keyed display strings and the fixed language fallback chain."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping

_ENGLISH = "en"
_SPANISH = "es"


def lang_chain(translations: Mapping[str, str], lang: str) -> str:
    """Return a value following a prearranged chain of preference.

    The chain gives preference to the requested lang, then english and finally
    spanish if no other translation is available.
    """

    value = translations.get(lang) or ""
    if value:
        return value
    value = translations.get(_ENGLISH) or ""
    if value:
        return value
    return translations.get(_SPANISH) or ""


class Translation(MutableMapping[str, str]):
    """Mapping of language code to display string for one piece of content."""

    __slots__ = ("_values",)

    def __init__(self, source: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(source) if source else {}

    def __getitem__(self, lang: str) -> str:
        return self._values[lang]

    def __setitem__(self, lang: str, value: str) -> None:
        self._values[lang] = value

    def __delitem__(self, lang: str) -> None:
        del self._values[lang]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def get(self, lang: str) -> str:  # type: ignore[override]
        """Return the value for ``lang`` or an empty string when absent."""

        return self._values.get(lang, "")

    def set(self, lang: str, value: str) -> None:
        self._values[lang] = value

    def lang_chain(self, lang: str) -> str:
        """Resolve a single display string for ``lang``; see :func:`lang_chain`."""

        return lang_chain(self._values, lang)

    def as_mapping(self) -> dict[str, str]:
        """Expose the associations as a plain dictionary copy."""

        return dict(self._values)


__all__ = ["Translation", "lang_chain"]
