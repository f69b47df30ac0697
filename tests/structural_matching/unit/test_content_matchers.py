"""Body matcher and registry tests."""

from __future__ import annotations

from provider_verifier.contract_model import APPLICATION_JSON, OptionalBody, parse_content_type
from provider_verifier.structural_matching import (
    BodyMatchResult,
    ContentMatcherRegistry,
    MatchingContext,
    default_content_matcher_registry,
    match_json_body,
    match_literal_body,
)


def _json(text: str | None) -> OptionalBody:
    return OptionalBody.of(text, APPLICATION_JSON)


def _paths(result: BodyMatchResult) -> list[str]:
    return [item.key for item in result.body_results]


def test_literal_matcher_accepts_identical_bodies() -> None:
    result = match_literal_body(OptionalBody.of("abc"), OptionalBody.of("abc"), MatchingContext())

    assert result.mismatches == []


def test_literal_matcher_reports_both_values_on_inequality() -> None:
    result = match_literal_body(OptionalBody.of("abc"), OptionalBody.of("abd"), MatchingContext())

    assert len(result.mismatches) == 1
    mismatch = result.mismatches[0]
    assert mismatch.description == "Actual body 'abd' is not equal to the expected body 'abc'"
    assert mismatch.expected == "abc"
    assert mismatch.actual == "abd"


def test_literal_matcher_reports_missing_actual_body() -> None:
    result = match_literal_body(OptionalBody.of("abc"), OptionalBody.missing(), MatchingContext())

    assert [mismatch.description for mismatch in result.mismatches] == [
        "Expected body 'abc' but was missing"
    ]


def test_literal_matcher_ignores_actual_when_nothing_expected() -> None:
    result = match_literal_body(OptionalBody.empty(), OptionalBody.of("abc"), MatchingContext())

    assert result.mismatches == []


def test_json_matcher_reports_nested_paths() -> None:
    result = match_json_body(
        _json('{"a": 1, "items": [{"id": 1}, {"id": 2}], "x-id": "q"}'),
        _json('{"a": 2, "items": [{"id": 1}, {"id": 3}], "x-id": "q", "extra": true}'),
        MatchingContext(),
    )

    assert _paths(result) == ["$.a", "$.items[1].id"]
    assert result.mismatches[0].description == "Expected 1 but received 2"


def test_json_matcher_reports_missing_keys_and_type_changes() -> None:
    result = match_json_body(
        _json('{"a": {"b": 1}, "c": "x", "x-id": 1}'),
        _json('{"a": [1], "c": "x"}'),
        MatchingContext(),
    )

    descriptions = {item.key: item.result[0].description for item in result.body_results}
    assert descriptions["$.a"] == 'Type mismatch: Expected Map {"b":1} but received List [1]'
    assert descriptions["$['x-id']"] == "Expected x-id=1 but was missing"


def test_json_matcher_reports_list_length_difference() -> None:
    result = match_json_body(_json("[1, 2]"), _json("[1]"), MatchingContext())

    assert [mismatch.description for mismatch in result.mismatches] == [
        "Expected a List with 2 elements but received 1 elements"
    ]


def test_json_matcher_rejects_unexpected_keys_when_not_allowed() -> None:
    result = match_json_body(
        _json('{"a": 1}'),
        _json('{"a": 1, "b": 2}'),
        MatchingContext(allow_unexpected_keys=False),
    )

    assert _paths(result) == ["$.b"]


def test_json_matcher_reports_missing_body_instead_of_type_failure() -> None:
    result = match_json_body(_json('{"a":1}'), OptionalBody.missing(), MatchingContext())

    assert [mismatch.description for mismatch in result.mismatches] == [
        """Expected body '{"a":1}' but was missing"""
    ]


def test_json_matcher_reports_unparseable_actual_body() -> None:
    result = match_json_body(_json('{"a":1}'), _json("not json"), MatchingContext())

    assert _paths(result) == ["$"]
    assert result.mismatches[0].description.startswith("Failed to parse the actual body as JSON")


def test_registry_resolves_json_variants_and_falls_back_for_unknown_types() -> None:
    registry = default_content_matcher_registry()

    assert registry.lookup("application/json; charset=utf-8") is match_json_body
    assert registry.lookup(parse_content_type("application/vnd.api+json")) is match_json_body
    assert registry.lookup("application/x-custom") is None
    assert registry.matcher_for("application/x-custom") is match_literal_body


def test_registry_with_matcher_normalizes_media_type() -> None:
    def custom_matcher(expected, actual, context) -> BodyMatchResult:
        return BodyMatchResult()

    registry = ContentMatcherRegistry().with_matcher("Application/X-Custom; v=1", custom_matcher)

    assert registry.lookup("application/x-custom") is custom_matcher
    assert ContentMatcherRegistry().lookup("application/x-custom") is None
