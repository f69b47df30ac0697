"""Comparison result entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from provider_verifier.structural_matching.mismatch_models import (
    BodyMismatch,
    BodyTypeMismatch,
    HeaderMismatch,
    MetadataMismatch,
    StatusMismatch,
)


@dataclass(frozen=True)
class BodyComparisonResult:
    """Body mismatches grouped by structural path, plus the rendered diff."""

    mismatches: Mapping[str, tuple[BodyMismatch, ...]] = field(default_factory=dict)
    diff: tuple[str, ...] = ()

    @property
    def is_ok(self) -> bool:
        """Return True when no path reported a mismatch."""
        return not any(self.mismatches.values())

    def to_json(self) -> dict[str, object]:
        """Return a JSON-ready view with mismatch descriptions and the joined diff."""
        return {
            "mismatches": {
                path: [mismatch.description for mismatch in mismatches]
                for path, mismatches in self.mismatches.items()
            },
            "diff": "\n".join(self.diff),
        }


@dataclass(frozen=True)
class BodyTypeFailure:
    """Bodies were structurally incomparable; no per-path mismatches exist."""

    mismatch: BodyTypeMismatch

    @property
    def is_ok(self) -> bool:
        return False


BodyComparisonOutcome = BodyComparisonResult | BodyTypeFailure


@dataclass(frozen=True)
class ComparisonResult:
    """Mismatches of one verification, partitioned by kind."""

    status_mismatch: StatusMismatch | None = None
    header_mismatches: Mapping[str, tuple[HeaderMismatch, ...]] = field(default_factory=dict)
    body_mismatches: BodyComparisonOutcome = field(default_factory=BodyComparisonResult)
    metadata_mismatches: Mapping[str, tuple[MetadataMismatch, ...]] = field(default_factory=dict)

    @property
    def has_mismatches(self) -> bool:
        """Return True when any mismatch group is non-empty."""
        return (
            self.status_mismatch is not None
            or any(self.header_mismatches.values())
            or not self.body_mismatches.is_ok
            or any(self.metadata_mismatches.values())
        )

    @property
    def is_ok(self) -> bool:
        return not self.has_mismatches
