"""Body matchers and their content-type registry."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from provider_verifier.contract_model.content_types import ContentType, parse_content_type
from provider_verifier.contract_model.interaction_models import OptionalBody

from .matcher_contracts import BodyMatcher, BodyMatchResult, MatchingContext
from .mismatch_models import BodyMismatch

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_JSON_MEDIA_TYPE = "application/json"


def match_literal_body(
    expected: OptionalBody, actual: OptionalBody, context: MatchingContext
) -> BodyMatchResult:
    """Compare bodies verbatim; an empty expected body accepts anything."""
    del context
    expected_body = expected.value_as_string()
    if not expected_body:
        return BodyMatchResult()
    if actual.is_missing_or_empty:
        return BodyMatchResult.of([_missing_body_mismatch(expected_body)])
    actual_body = actual.value_as_string()
    if actual_body != expected_body:
        return BodyMatchResult.of(
            [
                BodyMismatch(
                    expected=expected_body,
                    actual=actual_body,
                    description=(
                        f"Actual body '{actual_body}' is not equal to the expected body "
                        f"'{expected_body}'"
                    ),
                )
            ]
        )
    return BodyMatchResult()


def match_json_body(
    expected: OptionalBody, actual: OptionalBody, context: MatchingContext
) -> BodyMatchResult:
    """Compare JSON bodies structurally, reporting one mismatch per differing path."""
    if expected.is_missing_or_empty:
        return BodyMatchResult()
    expected_body = expected.value_as_string()
    if actual.is_missing_or_empty:
        return BodyMatchResult.of([_missing_body_mismatch(expected_body)])

    actual_body = actual.value_as_string()
    try:
        expected_document = json.loads(expected_body)
    except json.JSONDecodeError as exc:
        return BodyMatchResult.of([_unparseable_body_mismatch("expected", expected_body, exc)])
    try:
        actual_document = json.loads(actual_body)
    except json.JSONDecodeError as exc:
        return BodyMatchResult.of([_unparseable_body_mismatch("actual", actual_body, exc)])

    mismatches: list[BodyMismatch] = []
    _compare_json_values("$", expected_document, actual_document, context, mismatches)
    return BodyMatchResult.of(mismatches)


@dataclass(frozen=True)
class ContentMatcherRegistry:
    """Explicit mapping from base media type to body matcher, with a literal fallback."""

    matchers: Mapping[str, BodyMatcher] = field(default_factory=dict)
    fallback: BodyMatcher = match_literal_body

    def lookup(self, content_type: ContentType | str) -> BodyMatcher | None:
        """Return the registered matcher for a media type, or None when unregistered."""
        resolved = (
            parse_content_type(content_type) if isinstance(content_type, str) else content_type
        )
        matcher = self.matchers.get(resolved.base_type)
        if matcher is None and resolved.is_json:
            matcher = self.matchers.get(_JSON_MEDIA_TYPE)
        return matcher

    def matcher_for(self, content_type: ContentType | str) -> BodyMatcher:
        """Return the registered matcher for a media type or the fallback matcher."""
        return self.lookup(content_type) or self.fallback

    def with_matcher(self, media_type: str, matcher: BodyMatcher) -> ContentMatcherRegistry:
        """Return a copy of this registry with one more media type registered."""
        normalized = parse_content_type(media_type).base_type
        return ContentMatcherRegistry(
            matchers={**self.matchers, normalized: matcher},
            fallback=self.fallback,
        )


def default_content_matcher_registry() -> ContentMatcherRegistry:
    """Registry with the built-in JSON matcher."""
    return ContentMatcherRegistry(matchers={_JSON_MEDIA_TYPE: match_json_body})


def _compare_json_values(
    path: str,
    expected: Any,
    actual: Any,
    context: MatchingContext,
    mismatches: list[BodyMismatch],
) -> None:
    if isinstance(expected, Mapping) and isinstance(actual, Mapping):
        _compare_json_objects(path, expected, actual, context, mismatches)
        return
    if _is_json_array(expected) and _is_json_array(actual):
        _compare_json_arrays(path, expected, actual, context, mismatches)
        return
    if _json_type_name(expected) != _json_type_name(actual):
        mismatches.append(
            BodyMismatch(
                expected=expected,
                actual=actual,
                description=(
                    f"Type mismatch: Expected {_json_type_name(expected)} {_render(expected)} "
                    f"but received {_json_type_name(actual)} {_render(actual)}"
                ),
                path=path,
            )
        )
        return
    if expected != actual:
        mismatches.append(
            BodyMismatch(
                expected=expected,
                actual=actual,
                description=f"Expected {_render(expected)} but received {_render(actual)}",
                path=path,
            )
        )


def _compare_json_objects(
    path: str,
    expected: Mapping[str, Any],
    actual: Mapping[str, Any],
    context: MatchingContext,
    mismatches: list[BodyMismatch],
) -> None:
    for key, expected_value in expected.items():
        child_path = _child_path(path, key)
        if key not in actual:
            mismatches.append(
                BodyMismatch(
                    expected=expected_value,
                    actual=None,
                    description=f"Expected {key}={_render(expected_value)} but was missing",
                    path=child_path,
                )
            )
            continue
        _compare_json_values(child_path, expected_value, actual[key], context, mismatches)

    if context.allow_unexpected_keys:
        return
    for key in actual:
        if key not in expected:
            mismatches.append(
                BodyMismatch(
                    expected=None,
                    actual=actual[key],
                    description=f"Unexpected key '{key}' with value {_render(actual[key])}",
                    path=_child_path(path, key),
                )
            )


def _compare_json_arrays(
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    context: MatchingContext,
    mismatches: list[BodyMismatch],
) -> None:
    if len(expected) != len(actual):
        mismatches.append(
            BodyMismatch(
                expected=list(expected),
                actual=list(actual),
                description=(
                    f"Expected a List with {len(expected)} elements but received "
                    f"{len(actual)} elements"
                ),
                path=path,
            )
        )
    for index, (expected_item, actual_item) in enumerate(zip(expected, actual)):
        _compare_json_values(f"{path}[{index}]", expected_item, actual_item, context, mismatches)


def _child_path(path: str, key: str) -> str:
    if _IDENTIFIER_PATTERN.fullmatch(key):
        return f"{path}.{key}"
    escaped = key.replace("'", "\\'")
    return f"{path}['{escaped}']"


def _is_json_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Integer"
    if isinstance(value, float):
        return "Decimal"
    if isinstance(value, str):
        return "String"
    if isinstance(value, Mapping):
        return "Map"
    return "List"


def _render(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _missing_body_mismatch(expected_body: str) -> BodyMismatch:
    return BodyMismatch(
        expected=expected_body,
        actual=None,
        description=f"Expected body '{expected_body}' but was missing",
    )


def _unparseable_body_mismatch(side: str, body: str, exc: json.JSONDecodeError) -> BodyMismatch:
    return BodyMismatch(
        expected=body if side == "expected" else None,
        actual=body if side == "actual" else None,
        description=f"Failed to parse the {side} body as JSON: {exc}",
        path="$",
    )
