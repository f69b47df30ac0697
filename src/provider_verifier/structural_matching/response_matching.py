"""Default response and metadata matchers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from provider_verifier.contract_model.interaction_models import (
    OptionalBody,
    ProviderResponse,
    ResponseInteraction,
    header_values,
)

from .content_matchers import ContentMatcherRegistry, default_content_matcher_registry
from .matcher_contracts import MatchingContext
from .mismatch_models import (
    BodyTypeMismatch,
    HeaderMismatch,
    MetadataMismatch,
    Mismatch,
    StatusMismatch,
)

ResponseMatcher = Callable[[ResponseInteraction, ProviderResponse], list[Mismatch]]

_DEFAULT_STATUS = 200
_IGNORED_METADATA_KEYS = frozenset({"contenttype", "content-type"})


def match_response(
    expected: ResponseInteraction,
    actual: ProviderResponse,
    registry: ContentMatcherRegistry | None = None,
) -> list[Mismatch]:
    """Return status, header and body mismatches between expected and actual responses."""
    resolved_registry = registry or default_content_matcher_registry()
    mismatches: list[Mismatch] = []

    actual_status = actual.status_code if actual.status_code is not None else _DEFAULT_STATUS
    if expected.status != actual_status:
        mismatches.append(StatusMismatch(expected=expected.status, actual=actual_status))

    mismatches.extend(_match_headers(expected.headers, actual.headers or {}))
    mismatches.extend(_match_response_body(expected, actual, resolved_registry))
    return mismatches


def match_metadata(
    expected: Mapping[str, Any],
    actual: Mapping[str, Any],
    context: MatchingContext,
) -> list[MetadataMismatch]:
    """Return one mismatch per expected metadata key that is absent or unequal."""
    del context
    mismatches: list[MetadataMismatch] = []
    for key, expected_value in expected.items():
        if key.lower() in _IGNORED_METADATA_KEYS:
            continue
        if key not in actual:
            mismatches.append(
                MetadataMismatch(
                    key=key,
                    expected=expected_value,
                    actual=None,
                    description=(
                        f"Expected metadata key '{key}' to have value '{expected_value}' "
                        "but was missing"
                    ),
                )
            )
            continue
        actual_value = actual[key]
        if _normalize_metadata_value(expected_value) != _normalize_metadata_value(actual_value):
            mismatches.append(
                MetadataMismatch(
                    key=key,
                    expected=expected_value,
                    actual=actual_value,
                    description=(
                        f"Expected metadata key '{key}' to have value '{expected_value}' "
                        f"but was '{actual_value}'"
                    ),
                )
            )
    return mismatches


def _match_headers(
    expected_headers: Mapping[str, Sequence[str]],
    actual_headers: Mapping[str, Sequence[str]],
) -> list[HeaderMismatch]:
    mismatches: list[HeaderMismatch] = []
    for header_key, expected_values in expected_headers.items():
        expected_text = ", ".join(expected_values)
        actual_values = header_values(actual_headers, header_key)
        if actual_values is None:
            mismatches.append(
                HeaderMismatch(
                    header_key=header_key,
                    expected=expected_text,
                    actual="",
                    description=f"Expected a header '{header_key}' but was missing",
                )
            )
            continue
        actual_text = ", ".join(actual_values)
        if _split_header_values(expected_values) != _split_header_values(actual_values):
            mismatches.append(
                HeaderMismatch(
                    header_key=header_key,
                    expected=expected_text,
                    actual=actual_text,
                    description=(
                        f"Expected header '{header_key}' to have value '{expected_text}' "
                        f"but was '{actual_text}'"
                    ),
                )
            )
    return mismatches


def _match_response_body(
    expected: ResponseInteraction,
    actual: ProviderResponse,
    registry: ContentMatcherRegistry,
) -> list[Mismatch]:
    expected_body = expected.body
    actual_body = actual.body or OptionalBody.missing()
    expected_type = expected.content_type
    actual_type = actual.effective_content_type

    if (
        expected_body.is_present
        and actual_body.is_present
        and expected_type.is_known
        and actual_type.is_known
        and expected_type.base_type != actual_type.base_type
    ):
        return [BodyTypeMismatch(expected=expected_type.base_type, actual=actual_type.base_type)]

    context = MatchingContext(
        matchers=expected.matching_rules.rules_for_category("body"),
        allow_unexpected_keys=True,
    )
    matcher = registry.matcher_for(expected_type)
    return list(matcher(expected_body, actual_body, context).mismatches)


def _split_header_values(values: Sequence[str]) -> list[str]:
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


def _normalize_metadata_value(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
