"""Configuration value resolvers.

A resolver is a callable ``(key, default) -> str | None``. Keys are dotted names such as
``provider_verifier.generate_diff``; the environment resolver also accepts the
``PROVIDER_VERIFIER_GENERATE_DIFF`` spelling so the value can be set from a shell.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping

from .runtime_settings import GENERATE_DIFF_KEY, VerifierSettings

ValueResolver = Callable[[str, str | None], str | None]

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")


def environment_value_resolver(environ: Mapping[str, str] | None = None) -> ValueResolver:
    """Resolve keys from the process environment (or an explicit environment mapping)."""

    def resolve(key: str, default: str | None) -> str | None:
        source = os.environ if environ is None else environ
        for candidate in (key, environment_variable_name(key)):
            if candidate in source:
                return source[candidate]
        return default

    return resolve


def mapping_value_resolver(values: Mapping[str, str | None]) -> ValueResolver:
    """Resolve keys from a fixed mapping; a key mapped to None counts as absent."""

    def resolve(key: str, default: str | None) -> str | None:
        value = values.get(key)
        return default if value is None else value

    return resolve


def settings_value_resolver(settings: VerifierSettings) -> ValueResolver:
    """Resolve keys from loaded verifier settings."""
    return mapping_value_resolver({GENERATE_DIFF_KEY: settings.generate_diff})


def chain_value_resolvers(*resolvers: ValueResolver) -> ValueResolver:
    """Return the first value any resolver knows, else the default."""

    def resolve(key: str, default: str | None) -> str | None:
        for resolver in resolvers:
            value = resolver(key, None)
            if value is not None:
                return value
        return default

    return resolve


def environment_variable_name(key: str) -> str:
    """Translate a dotted key into its environment variable spelling."""
    return _NON_ALPHANUMERIC.sub("_", key).strip("_").upper()
