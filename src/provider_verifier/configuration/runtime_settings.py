"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

GENERATE_DIFF_KEY = "provider_verifier.generate_diff"


@dataclass(frozen=True)
class VerifierSettings:
    """Verification behaviour switches."""

    generate_diff: str | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    verifier: VerifierSettings
