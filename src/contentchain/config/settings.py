"""Load content settings from YAML and apply them to the running process."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from contentchain.content.chain import set_global_provider_chain

from .schema import ConfigurationError, ContentSettings

logger = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
DEFAULT_CONFIG_FILE = CONFIG_DIRECTORY / "content.yaml"

CONFIG_ENV = "CONTENTCHAIN_CONFIG"
PROVIDER_CHAIN_ENV = "CONTENTCHAIN_PROVIDER_CHAIN"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ConfigurationError(
                f"Configuration file {path.name} is not valid YAML: {error}"
            ) from error
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _resolve_config_path(path: str | os.PathLike[str] | None) -> Path:
    if path is not None:
        return Path(path)
    configured = os.getenv(CONFIG_ENV)
    if configured:
        return Path(configured)
    return DEFAULT_CONFIG_FILE


def _parse_provider_chain(raw: str | None) -> list[str] | None:
    """Convert the environment override into provider names, if one is set."""

    if raw is None:
        return None

    names = [name.strip() for name in raw.split(",") if name.strip()]
    if not names:
        logger.warning("Ignoring empty value for %s: %r", PROVIDER_CHAIN_ENV, raw)
        return None
    return names


def _read_settings(config_path: Path) -> ContentSettings:
    if not config_path.exists():
        raise FileNotFoundError(f"Content configuration not found: {config_path}")

    raw_settings = _load_yaml(config_path)

    override = _parse_provider_chain(os.getenv(PROVIDER_CHAIN_ENV))
    if override is not None:
        raw_settings["provider_chain"] = override

    try:
        return ContentSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(
            f"Configuration validation failed for {config_path.name}: {error}"
        ) from error


@lru_cache(maxsize=1)
def load_default_settings() -> ContentSettings:
    """Load and cache the settings chosen by the environment or bundled defaults."""

    return _read_settings(_resolve_config_path(None))


def load_settings(path: str | os.PathLike[str] | None = None) -> ContentSettings:
    """Load settings from ``path``, ``$CONTENTCHAIN_CONFIG`` or the bundled file.

    A comma-separated ``$CONTENTCHAIN_PROVIDER_CHAIN`` replaces the chain read
    from the file. Loads without an explicit ``path`` are cached.
    """

    if path is None:
        return load_default_settings()
    return _read_settings(Path(path))


def configure(path: str | os.PathLike[str] | None = None) -> ContentSettings:
    """Load settings and install their provider chain as the global default."""

    settings = load_settings(path)
    set_global_provider_chain(settings.provider_chain)
    return settings


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_ENV",
    "DEFAULT_CONFIG_FILE",
    "PROVIDER_CHAIN_ENV",
    "configure",
    "load_default_settings",
    "load_settings",
]
