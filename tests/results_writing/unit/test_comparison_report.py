"""Comparison report rendering tests."""

from __future__ import annotations

from provider_verifier.response_comparison import (
    BodyComparisonResult,
    BodyTypeFailure,
    ComparisonResult,
)
from provider_verifier.results_writing import render_comparison_report
from provider_verifier.structural_matching import (
    BodyMismatch,
    BodyTypeMismatch,
    HeaderMismatch,
    MetadataMismatch,
    StatusMismatch,
)


def test_clean_result_reports_no_mismatches() -> None:
    result = ComparisonResult(header_mismatches={"X-Env": ()})

    assert render_comparison_report(result) == ["No mismatches found."]


def test_report_lists_every_populated_group() -> None:
    result = ComparisonResult(
        status_mismatch=StatusMismatch(expected=200, actual=500),
        header_mismatches={
            "X-Env": (
                HeaderMismatch(
                    header_key="X-Env", expected="prod", actual="dev", description="bad env"
                ),
            ),
            "Content-Type": (),
        },
        body_mismatches=BodyComparisonResult(
            mismatches={
                "$.a": (BodyMismatch(expected=1, actual=2, description="a differs", path="$.a"),)
            },
            diff=("-1", "+2"),
        ),
        metadata_mismatches={
            "destination": (
                MetadataMismatch(key="destination", expected="a", actual="b", description="dest"),
            )
        },
    )

    assert render_comparison_report(result) == [
        "Status:",
        "    expected status of 200 but was 500",
        "Headers:",
        "    X-Env:",
        "        bad env",
        "Body:",
        "    $.a:",
        "        a differs",
        "Diff:",
        "    -1",
        "    +2",
        "Metadata:",
        "    destination:",
        "        dest",
    ]


def test_report_shows_body_type_failure() -> None:
    result = ComparisonResult(
        body_mismatches=BodyTypeFailure(
            mismatch=BodyTypeMismatch(expected="application/json", actual="text/plain")
        )
    )

    assert render_comparison_report(result) == [
        "Body:",
        "    Expected a body of 'application/json' but the actual content type was 'text/plain'",
    ]
