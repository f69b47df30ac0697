"""Contract model exports."""

from .content_types import (
    APPLICATION_JSON,
    TEXT_PLAIN,
    UNKNOWN_CONTENT_TYPE,
    ContentType,
    parse_content_type,
)
from .interaction_models import (
    AsyncMessageInteraction,
    BodyState,
    MessageInteraction,
    MatchingRules,
    MessageContents,
    OptionalBody,
    PlainMessageInteraction,
    ProviderResponse,
    ResponseInteraction,
    header_values,
)

__all__ = [
    "ContentType",
    "APPLICATION_JSON",
    "TEXT_PLAIN",
    "UNKNOWN_CONTENT_TYPE",
    "parse_content_type",
    "BodyState",
    "OptionalBody",
    "MatchingRules",
    "ResponseInteraction",
    "ProviderResponse",
    "MessageContents",
    "AsyncMessageInteraction",
    "PlainMessageInteraction",
    "MessageInteraction",
    "header_values",
]
