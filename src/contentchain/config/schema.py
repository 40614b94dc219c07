"""Pydantic models describing the content resolution settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class ContentSettings(ImmutableModel):
    """Settings applied to the content layer when the process starts."""

    provider_chain: tuple[str, ...] = Field(default=())

    @field_validator("provider_chain", mode="before")
    @classmethod
    def _normalise_provider_chain(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ConfigurationError("The provider chain must be a list of provider names")

        names: list[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise ConfigurationError("Provider names must be strings")
            name = entry.strip()
            if not name:
                raise ConfigurationError("Provider names must not be empty")
            if name in names:
                raise ConfigurationError(f"Provider {name!r} is listed more than once")
            names.append(name)
        return tuple(names)


__all__ = ["ConfigurationError", "ContentSettings", "ImmutableModel"]
