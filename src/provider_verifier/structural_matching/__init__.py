"""Structural matching exports."""

from .content_matchers import (
    ContentMatcherRegistry,
    default_content_matcher_registry,
    match_json_body,
    match_literal_body,
)
from .matcher_contracts import (
    BodyItemMatchResult,
    BodyMatcher,
    BodyMatchResult,
    MatchingContext,
    MetadataMatcher,
)
from .mismatch_models import (
    BodyMismatch,
    BodyTypeMismatch,
    HeaderMismatch,
    MetadataMismatch,
    Mismatch,
    MismatchKind,
    StatusMismatch,
)
from .response_matching import ResponseMatcher, match_metadata, match_response

__all__ = [
    "MismatchKind",
    "Mismatch",
    "StatusMismatch",
    "HeaderMismatch",
    "BodyMismatch",
    "BodyTypeMismatch",
    "MetadataMismatch",
    "MatchingContext",
    "BodyItemMatchResult",
    "BodyMatchResult",
    "BodyMatcher",
    "MetadataMatcher",
    "ResponseMatcher",
    "ContentMatcherRegistry",
    "default_content_matcher_registry",
    "match_json_body",
    "match_literal_body",
    "match_response",
    "match_metadata",
]
