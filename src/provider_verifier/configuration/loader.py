"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, VerifierSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    verifier = _parse_verifier_section(parsed.get("verifier"))
    return Configuration(path=path, verifier=verifier)


def _parse_verifier_section(value: Any) -> VerifierSettings:
    if value is None:
        return VerifierSettings()
    section = _require_mapping(value, "verifier")
    generate_diff = _optional_setting_text(section.get("generate_diff"), "verifier.generate_diff")
    return VerifierSettings(generate_diff=generate_diff)


def _optional_setting_text(value: Any, field_name: str) -> str | None:
    """Normalize scalar YAML values; YAML booleans become "true"/"false"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string, boolean or integer.")
    return value.strip()


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value
