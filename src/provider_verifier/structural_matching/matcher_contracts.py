"""Collaborator contracts shared by structural matchers and the comparison engine."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from provider_verifier.contract_model.interaction_models import OptionalBody

from .mismatch_models import BodyMismatch, MetadataMismatch


@dataclass(frozen=True)
class MatchingContext:
    """Category-scoped matching rules handed to body and metadata matchers."""

    matchers: Mapping[str, Any] = field(default_factory=dict)
    allow_unexpected_keys: bool = True


@dataclass(frozen=True)
class BodyItemMatchResult:
    """Mismatches reported for one body item key."""

    key: str
    result: tuple[BodyMismatch, ...]


@dataclass(frozen=True)
class BodyMatchResult:
    """Grouped outcome of one body matcher call."""

    body_results: tuple[BodyItemMatchResult, ...] = ()

    @property
    def mismatches(self) -> list[BodyMismatch]:
        """Flatten item results in reporting order."""
        return [mismatch for item in self.body_results for mismatch in item.result]

    @classmethod
    def of(cls, mismatches: Sequence[BodyMismatch]) -> BodyMatchResult:
        """Group mismatches by path, keeping first-seen path order."""
        grouped: dict[str, list[BodyMismatch]] = {}
        for mismatch in mismatches:
            grouped.setdefault(mismatch.path, []).append(mismatch)
        return cls(
            body_results=tuple(
                BodyItemMatchResult(key=path, result=tuple(items))
                for path, items in grouped.items()
            )
        )


BodyMatcher = Callable[[OptionalBody, OptionalBody, MatchingContext], BodyMatchResult]
MetadataMatcher = Callable[
    [Mapping[str, Any], Mapping[str, Any], MatchingContext], list[MetadataMismatch]
]
