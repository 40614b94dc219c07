"""Unit coverage for translations and the language fallback chain."""

from __future__ import annotations

from contentchain.content import Translation, lang_chain


def test_set_translation() -> None:
    translation = Translation({"es": "foo"})
    translation.set("en", "bar")

    assert translation.get("es") == "foo"
    assert translation.get("en") == "bar"


def test_set_translation_without_source() -> None:
    translation = Translation(None)
    translation.set("en", "bar")

    assert translation.get("en") == "bar"


def test_missing_language_reads_as_empty_string() -> None:
    translation = Translation({"es": "foo"})

    assert translation.get("de") == ""
    assert "de" not in translation


def test_source_mapping_is_copied() -> None:
    source = {"es": "foo"}
    translation = Translation(source)

    source["es"] = "changed"
    source["en"] = "added"
    translation.set("it", "baz")

    assert translation.as_mapping() == {"es": "foo", "it": "baz"}
    assert source == {"es": "changed", "en": "added"}


def test_as_mapping_returns_translations() -> None:
    translation = Translation({"es": "foo"})
    translation.set("en", "bar")

    mapping = translation.as_mapping()

    assert mapping == {"es": "foo", "en": "bar"}
    assert type(mapping) is dict


def test_lang_chain_prefers_requested_language() -> None:
    translation = Translation({"es": "foo", "en": "bar", "it": "baz"})

    assert translation.lang_chain("es") == "foo"
    assert translation.lang_chain("en") == "bar"
    assert translation.lang_chain("it") == "baz"


def test_lang_chain_prefers_english_over_spanish() -> None:
    translation = Translation({"es": "foo", "en": "bar", "it": "baz"})

    assert translation.lang_chain("de") == "bar"


def test_lang_chain_uses_spanish_as_backup() -> None:
    translation = Translation({"es": "foo", "it": "baz"})

    assert translation.lang_chain("de") == "foo"
    assert translation.lang_chain("en") == "foo"


def test_lang_chain_uses_english_without_spanish() -> None:
    translation = Translation({"en": "bar", "it": "baz"})

    assert translation.lang_chain("en") == "bar"
    assert translation.lang_chain("it") == "baz"
    assert translation.lang_chain("de") == "bar"


def test_lang_chain_skips_empty_values() -> None:
    translation = Translation({"de": "", "en": "", "es": "foo"})

    assert translation.lang_chain("de") == "foo"


def test_lang_chain_on_empty_translation() -> None:
    assert Translation().lang_chain("de") == ""


def test_lang_chain_accepts_plain_mappings() -> None:
    assert lang_chain({"en": "bar", "it": "baz"}, "fr") == "bar"
    assert lang_chain({}, "fr") == ""


def test_translation_compares_equal_to_mappings() -> None:
    translation = Translation({"es": "foo"})

    assert translation == {"es": "foo"}
    assert translation == Translation({"es": "foo"})
    assert translation != Translation({"es": "bar"})
    assert len(translation) == 1
    assert list(translation) == ["es"]
