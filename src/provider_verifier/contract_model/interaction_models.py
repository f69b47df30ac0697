"""Contract interaction entities consumed by the comparison engine."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .content_types import (
    UNKNOWN_CONTENT_TYPE,
    ContentType,
    known_charset,
    parse_content_type,
)

_METADATA_CONTENT_TYPE_KEYS = ("contentType", "content-type", "Content-Type")


class BodyState(str, Enum):
    """Presence state of an interaction body."""

    MISSING = "missing"
    EMPTY = "empty"
    PRESENT = "present"


@dataclass(frozen=True)
class OptionalBody:
    """Body that is either missing, empty or present with raw bytes."""

    state: BodyState
    value: bytes = b""
    content_type: ContentType = UNKNOWN_CONTENT_TYPE

    @classmethod
    def missing(cls) -> OptionalBody:
        return cls(state=BodyState.MISSING)

    @classmethod
    def empty(cls, content_type: ContentType = UNKNOWN_CONTENT_TYPE) -> OptionalBody:
        return cls(state=BodyState.EMPTY, content_type=content_type)

    @classmethod
    def of(
        cls, value: str | bytes | None, content_type: ContentType = UNKNOWN_CONTENT_TYPE
    ) -> OptionalBody:
        """Build a body from text or bytes, classifying None and empty input."""
        if value is None:
            return cls(state=BodyState.MISSING, content_type=content_type)
        raw = value.encode(content_type.charset) if isinstance(value, str) else value
        if not raw:
            return cls.empty(content_type)
        return cls(state=BodyState.PRESENT, value=raw, content_type=content_type)

    @property
    def is_present(self) -> bool:
        return self.state == BodyState.PRESENT

    @property
    def is_missing_or_empty(self) -> bool:
        return self.state != BodyState.PRESENT

    @property
    def size(self) -> int:
        """Return the raw byte length of the body."""
        return len(self.value) if self.is_present else 0

    def value_as_string(self, charset: str | None = None) -> str:
        """Decode the body, returning an empty string when missing or empty."""
        if not self.is_present:
            return ""
        resolved_charset = known_charset(charset or self.content_type.charset)
        return self.value.decode(resolved_charset, errors="replace")


@dataclass(frozen=True)
class MatchingRules:
    """Matching rules partitioned by category ("body", "metadata", ...)."""

    categories: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def rules_for_category(self, category: str) -> Mapping[str, Any]:
        """Return the rules of one category; unknown categories have no rules."""
        return self.categories.get(category, {})


@dataclass(frozen=True)
class ResponseInteraction:
    """Expected HTTP response of a request/response interaction."""

    status: int = 200
    headers: Mapping[str, Sequence[str]] = field(default_factory=dict)
    body: OptionalBody = field(default_factory=OptionalBody.missing)
    matching_rules: MatchingRules = field(default_factory=MatchingRules)

    @property
    def content_type(self) -> ContentType:
        """Return the Content-Type header when declared, else the body content type."""
        declared = header_values(self.headers, "Content-Type")
        if declared:
            return parse_content_type(declared[0])
        return self.body.content_type

    @property
    def is_json_body(self) -> bool:
        return self.content_type.is_json


@dataclass(frozen=True)
class ProviderResponse:
    """Response observed from the provider under verification."""

    status_code: int | None = None
    headers: Mapping[str, Sequence[str]] | None = None
    content_type: ContentType = UNKNOWN_CONTENT_TYPE
    body: OptionalBody | None = None

    @property
    def effective_content_type(self) -> ContentType:
        """Return the declared content type, else the content type of the body."""
        if self.content_type.is_known or self.body is None:
            return self.content_type
        return self.body.content_type


@dataclass(frozen=True)
class MessageContents:
    """Body, metadata and rules of an asynchronous message."""

    contents: OptionalBody = field(default_factory=OptionalBody.missing)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    matching_rules: MatchingRules = field(default_factory=MatchingRules)

    @property
    def content_type(self) -> ContentType:
        return message_content_type(self.metadata, self.contents)


@dataclass(frozen=True)
class AsyncMessageInteraction:
    """Asynchronous message interaction whose payload lives in nested contents."""

    description: str
    contents: MessageContents = field(default_factory=MessageContents)


@dataclass(frozen=True)
class PlainMessageInteraction:
    """Message interaction with payload, metadata and rules on the interaction itself."""

    description: str
    contents: OptionalBody = field(default_factory=OptionalBody.missing)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    matching_rules: MatchingRules = field(default_factory=MatchingRules)

    @property
    def content_type(self) -> ContentType:
        return message_content_type(self.metadata, self.contents)


MessageInteraction = AsyncMessageInteraction | PlainMessageInteraction


def header_values(headers: Mapping[str, Sequence[str]], name: str) -> Sequence[str] | None:
    """Look up header values by case-insensitive name."""
    lowered = name.lower()
    for header_name, values in headers.items():
        if header_name.lower() == lowered:
            return values
    return None


def message_content_type(metadata: Mapping[str, Any], body: OptionalBody) -> ContentType:
    """Resolve a message content type from metadata first, then from the body."""
    for key in _METADATA_CONTENT_TYPE_KEYS:
        declared = metadata.get(key)
        if isinstance(declared, str) and declared.strip():
            return parse_content_type(declared)
    return body.content_type
