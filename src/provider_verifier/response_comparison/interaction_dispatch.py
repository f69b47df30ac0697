"""Response and message comparison entry points."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from provider_verifier.configuration.value_resolvers import (
    ValueResolver,
    environment_value_resolver,
)
from provider_verifier.contract_model.content_types import TEXT_PLAIN, ContentType
from provider_verifier.contract_model.interaction_models import (
    AsyncMessageInteraction,
    MatchingRules,
    MessageInteraction,
    OptionalBody,
    PlainMessageInteraction,
    ProviderResponse,
    ResponseInteraction,
)
from provider_verifier.structural_matching.content_matchers import (
    ContentMatcherRegistry,
    default_content_matcher_registry,
)
from provider_verifier.structural_matching.matcher_contracts import (
    MatchingContext,
    MetadataMatcher,
)
from provider_verifier.structural_matching.mismatch_models import BodyMismatch, Mismatch
from provider_verifier.structural_matching.response_matching import (
    ResponseMatcher,
    match_metadata,
    match_response,
)

from .comparison_outcomes import ComparisonResult
from .mismatch_partitioning import (
    BodyComparisonSubject,
    extract_body,
    extract_headers,
    extract_metadata,
    extract_status,
)


class UnsupportedInteractionError(NotImplementedError):
    """Raised when an interaction variant has no comparison support."""


@dataclass(frozen=True)
class _MessageParts:
    """Message variant normalized for the shared body/metadata path."""

    contents: OptionalBody
    content_type: ContentType
    metadata: Mapping[str, Any]
    matching_rules: MatchingRules


def _async_message_parts(message: AsyncMessageInteraction) -> _MessageParts:
    return _MessageParts(
        contents=message.contents.contents,
        content_type=_or_text_plain(message.contents.content_type),
        metadata=message.contents.metadata,
        matching_rules=message.contents.matching_rules,
    )


def _plain_message_parts(message: PlainMessageInteraction) -> _MessageParts:
    return _MessageParts(
        contents=message.contents,
        content_type=_or_text_plain(message.content_type),
        metadata=message.metadata,
        matching_rules=message.matching_rules,
    )


_MESSAGE_PART_EXTRACTORS: Mapping[type, Callable[[Any], _MessageParts]] = {
    AsyncMessageInteraction: _async_message_parts,
    PlainMessageInteraction: _plain_message_parts,
}


def compare_response(
    expected: ResponseInteraction,
    actual: ProviderResponse,
    *,
    registry: ContentMatcherRegistry | None = None,
    response_matcher: ResponseMatcher | None = None,
    resolver: ValueResolver | None = None,
) -> ComparisonResult:
    """Compare an expected HTTP response with the provider's actual response."""
    resolved_registry = registry or default_content_matcher_registry()
    resolved_resolver = resolver or environment_value_resolver()

    mismatches: list[Mismatch]
    if response_matcher is None:
        mismatches = match_response(expected, actual, resolved_registry)
    else:
        mismatches = response_matcher(expected, actual)

    subject = BodyComparisonSubject(
        expected_body=expected.body,
        expected_is_json=expected.is_json_body,
        actual_content_type=actual.effective_content_type,
        actual_body=actual.body,
    )
    return ComparisonResult(
        status_mismatch=extract_status(mismatches),
        header_mismatches=extract_headers(mismatches, expected.headers.keys()),
        body_mismatches=extract_body(mismatches, resolved_resolver, subject),
    )


def compare_message(
    message: MessageInteraction,
    actual: OptionalBody,
    metadata: Mapping[str, Any] | None = None,
    *,
    registry: ContentMatcherRegistry | None = None,
    metadata_matcher: MetadataMatcher = match_metadata,
    resolver: ValueResolver | None = None,
) -> ComparisonResult:
    """Compare an expected message with the actual payload and, when given, its metadata.

    Raises:
      UnsupportedInteractionError: If ``message`` is not a supported message variant.
    """
    parts = _message_parts(message)
    resolved_resolver = resolver or environment_value_resolver()

    body_context = MatchingContext(
        matchers=parts.matching_rules.rules_for_category("body"),
        allow_unexpected_keys=True,
    )
    body_mismatches = _match_message_body(parts, actual, body_context, registry)

    metadata_mismatches: list[Mismatch] = []
    if metadata is not None:
        metadata_context = MatchingContext(
            matchers=parts.matching_rules.rules_for_category("metadata"),
            allow_unexpected_keys=True,
        )
        metadata_mismatches.extend(metadata_matcher(parts.metadata, metadata, metadata_context))

    subject = BodyComparisonSubject(
        expected_body=parts.contents,
        expected_is_json=parts.content_type.is_json,
        actual_content_type=parts.content_type,
        actual_body=actual,
    )
    return ComparisonResult(
        body_mismatches=extract_body(body_mismatches, resolved_resolver, subject),
        metadata_mismatches=extract_metadata(metadata_mismatches),
    )


def compare_message_body(
    message: MessageInteraction,
    actual: OptionalBody,
    context: MatchingContext,
    *,
    registry: ContentMatcherRegistry | None = None,
) -> list[BodyMismatch]:
    """Match a message payload with the body matcher registered for its content type.

    Raises:
      UnsupportedInteractionError: If ``message`` is not a supported message variant.
    """
    return _match_message_body(_message_parts(message), actual, context, registry)


def _match_message_body(
    parts: _MessageParts,
    actual: OptionalBody,
    context: MatchingContext,
    registry: ContentMatcherRegistry | None,
) -> list[BodyMismatch]:
    resolved_registry = registry or default_content_matcher_registry()
    matcher = resolved_registry.matcher_for(parts.content_type)
    return matcher(parts.contents, actual, context).mismatches


def _message_parts(message: MessageInteraction) -> _MessageParts:
    extractor = _MESSAGE_PART_EXTRACTORS.get(type(message))
    if extractor is None:
        raise UnsupportedInteractionError(
            f"Matching a {type(message).__name__} is not implemented"
        )
    return extractor(message)


def _or_text_plain(content_type: ContentType) -> ContentType:
    return content_type if content_type.is_known else TEXT_PLAIN
