"""JSON codec storing a :class:`ProviderMap` inside a single text column."""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .provider import ProviderMap


class CodecError(ValueError):
    """Base class for persistence codec failures."""


class DecodeError(CodecError):
    """Raised when stored content is not a valid nested provider encoding."""


class EncodeError(CodecError):
    """Raised when a provider map holds values that cannot be stored."""


# ``null`` decodes as empty both for the whole map and for a single provider.
_STORED_SHAPE: TypeAdapter[dict[str, dict[str, str] | None] | None] = TypeAdapter(
    dict[str, dict[str, str] | None] | None
)


def _check_encodable(provider_map: ProviderMap) -> None:
    for name, translation in provider_map.items():
        if not isinstance(name, str):
            raise EncodeError(f"Provider names must be strings, got {type(name).__name__}")
        for lang, value in translation.items():
            if not isinstance(lang, str) or not isinstance(value, str):
                raise EncodeError(
                    f"Provider {name!r} holds a non-string entry for language {lang!r}"
                )


def serialize(provider_map: ProviderMap) -> str:
    """Encode ``provider_map`` as a JSON object of objects of strings."""

    if not isinstance(provider_map, ProviderMap):
        try:
            provider_map = ProviderMap(provider_map)
        except (AttributeError, TypeError, ValueError) as error:
            raise EncodeError(f"Cannot serialize provider map: {error}") from error

    _check_encodable(provider_map)
    try:
        return json.dumps(provider_map.as_mapping(), ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError) as error:  # pragma: no cover - guarded above
        raise EncodeError(f"Cannot serialize provider map: {error}") from error


def _as_text(blob: Any) -> str:
    if isinstance(blob, str):
        return blob
    if isinstance(blob, (bytes, bytearray, memoryview)):
        try:
            return bytes(blob).decode("utf-8")
        except UnicodeDecodeError as error:
            raise DecodeError(f"Stored content is not valid UTF-8: {error}") from error
    raise TypeError(f"Cannot decode stored content of type {type(blob).__name__}")


def deserialize(blob: Any) -> ProviderMap:
    """Rebuild a :class:`ProviderMap` from the output of :func:`serialize`.

    Raises ``TypeError`` when ``blob`` is neither text nor bytes and
    :class:`DecodeError` when its contents are not a nested provider encoding.
    """

    text = _as_text(blob)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise DecodeError(f"Stored content is not valid JSON: {error}") from error
    except RecursionError as error:
        raise DecodeError("Stored content is nested too deeply to decode") from error

    try:
        providers = _STORED_SHAPE.validate_python(payload, strict=True)
    except ValidationError as error:
        raise DecodeError(f"Stored content has an unexpected shape: {error}") from error

    return ProviderMap(providers)


__all__ = ["CodecError", "DecodeError", "EncodeError", "deserialize", "serialize"]
