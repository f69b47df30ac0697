"""Contract model tests."""

from __future__ import annotations

from provider_verifier.contract_model import (
    AsyncMessageInteraction,
    BodyState,
    MatchingRules,
    MessageContents,
    OptionalBody,
    PlainMessageInteraction,
    ProviderResponse,
    ResponseInteraction,
    parse_content_type,
)


def test_parse_content_type_strips_parameters_from_base_type() -> None:
    content_type = parse_content_type("Application/JSON; charset=ISO-8859-1")

    assert content_type.base_type == "application/json"
    assert content_type.charset == "ISO-8859-1"
    assert content_type.is_json


def test_content_type_json_detection() -> None:
    assert parse_content_type("application/hal+json").is_json
    assert parse_content_type("application/vnd.api+json").is_json
    assert not parse_content_type("text/plain").is_json
    assert not parse_content_type(None).is_known
    assert parse_content_type("text/plain").charset == "utf-8"


def test_optional_body_classifies_presence() -> None:
    assert OptionalBody.of(None).state == BodyState.MISSING
    assert OptionalBody.of("").state == BodyState.EMPTY
    assert OptionalBody.of(b"abc").state == BodyState.PRESENT
    assert OptionalBody.missing().value_as_string() == ""
    assert OptionalBody.empty().is_missing_or_empty


def test_optional_body_size_counts_encoded_bytes() -> None:
    body = OptionalBody.of("é")

    assert body.size == 2
    assert body.value_as_string() == "é"


def test_unknown_charset_falls_back_to_utf8() -> None:
    content_type = parse_content_type("text/plain; charset=bogus")
    body = OptionalBody(state=BodyState.PRESENT, value="é".encode(), content_type=content_type)

    assert content_type.charset == "utf-8"
    assert OptionalBody.of("é", content_type).value == "é".encode()
    assert body.value_as_string() == "é"
    assert body.value_as_string("no-such-codec") == "é"
    assert OptionalBody.of(b"abc").value_as_string("latin-1") == "abc"


def test_response_content_type_prefers_header() -> None:
    response = ResponseInteraction(
        headers={"content-type": ["application/json"]},
        body=OptionalBody.of("{}", parse_content_type("text/plain")),
    )

    assert response.content_type.base_type == "application/json"
    assert response.is_json_body


def test_message_content_type_prefers_metadata_over_body() -> None:
    plain = PlainMessageInteraction(
        description="plain",
        contents=OptionalBody.of("x", parse_content_type("text/plain")),
        metadata={"contentType": "application/json"},
    )
    nested = AsyncMessageInteraction(
        description="async",
        contents=MessageContents(contents=OptionalBody.of("x", parse_content_type("text/xml"))),
    )

    assert plain.content_type.base_type == "application/json"
    assert nested.contents.content_type.base_type == "text/xml"


def test_matching_rules_unknown_category_is_empty() -> None:
    rules = MatchingRules(categories={"body": {"$.id": [{"match": "type"}]}})

    assert rules.rules_for_category("body") == {"$.id": [{"match": "type"}]}
    assert rules.rules_for_category("metadata") == {}


def test_provider_response_content_type_falls_back_to_body() -> None:
    declared = ProviderResponse(
        content_type=parse_content_type("text/plain"),
        body=OptionalBody.of("{}", parse_content_type("application/json")),
    )
    body_only = ProviderResponse(body=OptionalBody.of("{}", parse_content_type("application/json")))

    assert declared.effective_content_type.base_type == "text/plain"
    assert body_only.effective_content_type.base_type == "application/json"
    assert not ProviderResponse().effective_content_type.is_known
