"""Console report rendering for comparison results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from provider_verifier.response_comparison.comparison_outcomes import (
    BodyComparisonResult,
    BodyTypeFailure,
    ComparisonResult,
)

_INDENT = "    "


def render_comparison_report(result: ComparisonResult) -> list[str]:
    """Render every non-empty mismatch group as indented report lines."""
    if result.is_ok:
        return ["No mismatches found."]

    lines: list[str] = []
    if result.status_mismatch is not None:
        lines.append("Status:")
        lines.append(f"{_INDENT}{result.status_mismatch.description}")

    lines.extend(_render_keyed_group("Headers:", result.header_mismatches))
    lines.extend(_render_body(result))
    lines.extend(_render_keyed_group("Metadata:", result.metadata_mismatches))
    return lines


def _render_body(result: ComparisonResult) -> list[str]:
    outcome = result.body_mismatches
    if isinstance(outcome, BodyTypeFailure):
        return ["Body:", f"{_INDENT}{outcome.mismatch.description}"]
    if outcome.is_ok:
        return []
    lines = _render_keyed_group("Body:", outcome.mismatches)
    lines.extend(_render_diff(outcome))
    return lines


def _render_diff(outcome: BodyComparisonResult) -> list[str]:
    if not outcome.diff:
        return []
    return ["Diff:", *(f"{_INDENT}{line}" for line in outcome.diff)]


def _render_keyed_group(title: str, grouped: Mapping[str, Sequence]) -> list[str]:
    populated = {key: mismatches for key, mismatches in grouped.items() if mismatches}
    if not populated:
        return []
    lines = [title]
    for key, mismatches in populated.items():
        lines.append(f"{_INDENT}{key}:")
        lines.extend(f"{_INDENT * 2}{mismatch.description}" for mismatch in mismatches)
    return lines
