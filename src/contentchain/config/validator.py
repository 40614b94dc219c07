"""Utilities for validating content settings files and surfacing issues."""

from __future__ import annotations

import argparse
from typing import Sequence

from contentchain.version import get_project_version

from .schema import ConfigurationError, ContentSettings
from .settings import DEFAULT_CONFIG_FILE, load_settings


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def validate_settings(settings: ContentSettings) -> list[str]:
    """Return the issues found in ``settings`` that the schema does not reject."""

    errors: list[str] = []

    if not settings.provider_chain:
        errors.append(
            _format_scope(
                "provider_chain",
                "no providers configured, every merge will resolve to empty content",
            )
        )

    mixed_case = [name for name in settings.provider_chain if name != name.lower()]
    if mixed_case:
        errors.append(
            _format_scope(
                "provider_chain",
                f"provider names should be lowercase identifiers: {mixed_case}",
            )
        )

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate content settings files and report issues before deploying."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help=f"Settings files to validate (defaults to {DEFAULT_CONFIG_FILE.name})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_project_version()}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    paths = args.paths or [str(DEFAULT_CONFIG_FILE)]

    exit_code = 0

    for path in paths:
        try:
            settings = load_settings(path)
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{path}] failed to load configuration: {error}")
            exit_code = 1
            continue

        issues = validate_settings(settings)
        if issues:
            exit_code = 1
            print(f"[{path}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{path}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
