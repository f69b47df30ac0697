"""Partitioning of flat matcher output into a comparison result."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from provider_verifier.configuration.runtime_settings import GENERATE_DIFF_KEY
from provider_verifier.configuration.value_resolvers import ValueResolver
from provider_verifier.contract_model.content_types import ContentType
from provider_verifier.contract_model.interaction_models import OptionalBody
from provider_verifier.structural_matching.mismatch_models import (
    BodyMismatch,
    BodyTypeMismatch,
    HeaderMismatch,
    MetadataMismatch,
    Mismatch,
    MismatchKind,
    StatusMismatch,
)

from .body_diff import (
    JsonPrettyPrinter,
    TextDiffer,
    diff_lines,
    pretty_print_json,
    render_body_diff,
)
from .comparison_outcomes import BodyComparisonOutcome, BodyComparisonResult, BodyTypeFailure
from .diff_policy import DiffPolicyError, should_generate_diff

_LOGGER = logging.getLogger("provider_verifier.comparison")


@dataclass(frozen=True)
class BodyComparisonSubject:
    """Both bodies of one comparison, with the content facts needed to format them."""

    expected_body: OptionalBody
    expected_is_json: bool
    actual_content_type: ContentType
    actual_body: OptionalBody | None


def extract_status(mismatches: Sequence[Mismatch]) -> StatusMismatch | None:
    """Return the first status mismatch.

    Matchers report at most one; any further status mismatches are dropped.
    """
    statuses = _of_kind(mismatches, MismatchKind.STATUS)
    return statuses[0] if statuses else None


def extract_headers(
    mismatches: Sequence[Mismatch],
    expected_header_names: Iterable[str],
) -> dict[str, tuple[HeaderMismatch, ...]]:
    """Group header mismatches under exactly the expected header names."""
    grouped: dict[str, list[HeaderMismatch]] = {}
    for mismatch in _of_kind(mismatches, MismatchKind.HEADER):
        grouped.setdefault(mismatch.header_key, []).append(mismatch)
    return {name: tuple(grouped.get(name, ())) for name in expected_header_names}


def extract_body(
    mismatches: Sequence[Mismatch],
    resolver: ValueResolver,
    subject: BodyComparisonSubject,
    *,
    differ: TextDiffer = diff_lines,
    pretty_printer: JsonPrettyPrinter = pretty_print_json,
) -> BodyComparisonOutcome:
    """Build the body outcome: a body-type failure, or path-grouped mismatches with a diff."""
    body_type_mismatches: list[BodyTypeMismatch] = _of_kind(mismatches, MismatchKind.BODY_TYPE)
    if body_type_mismatches:
        return BodyTypeFailure(mismatch=body_type_mismatches[0])

    grouped: dict[str, list[BodyMismatch]] = {}
    for mismatch in _of_kind(mismatches, MismatchKind.BODY):
        grouped.setdefault(mismatch.path, []).append(mismatch)

    return BodyComparisonResult(
        mismatches={path: tuple(items) for path, items in grouped.items()},
        diff=tuple(_body_diff(resolver, subject, differ, pretty_printer)),
    )


def extract_metadata(mismatches: Sequence[Mismatch]) -> dict[str, tuple[MetadataMismatch, ...]]:
    """Group metadata mismatches by metadata key."""
    grouped: dict[str, list[MetadataMismatch]] = {}
    for mismatch in _of_kind(mismatches, MismatchKind.METADATA):
        grouped.setdefault(mismatch.key, []).append(mismatch)
    return {key: tuple(items) for key, items in grouped.items()}


def _body_diff(
    resolver: ValueResolver,
    subject: BodyComparisonSubject,
    differ: TextDiffer,
    pretty_printer: JsonPrettyPrinter,
) -> list[str]:
    expected_body = subject.expected_body.value_as_string()
    actual = subject.actual_body or OptionalBody.missing()
    decision = should_generate_diff(resolver, max(actual.size, len(expected_body)))
    if isinstance(decision, DiffPolicyError):
        _LOGGER.warning("Invalid value for '%s' - %s", GENERATE_DIFF_KEY, decision.reason)
        return []
    if not decision.enabled:
        return []

    actual_charset = (
        subject.actual_content_type.charset if subject.actual_content_type.is_known else None
    )
    return render_body_diff(
        expected_body=expected_body,
        expected_is_json=subject.expected_is_json,
        actual_body=actual.value_as_string(actual_charset),
        actual_is_json=subject.actual_content_type.is_json,
        differ=differ,
        pretty_printer=pretty_printer,
    )


def _of_kind(mismatches: Sequence[Mismatch], kind: MismatchKind) -> list:
    return [mismatch for mismatch in mismatches if mismatch.kind == kind]
