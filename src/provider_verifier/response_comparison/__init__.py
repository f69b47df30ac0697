"""Response and message comparison exports."""

from .body_diff import diff_lines, pretty_print_json, render_body_diff
from .comparison_outcomes import (
    BodyComparisonOutcome,
    BodyComparisonResult,
    BodyTypeFailure,
    ComparisonResult,
)
from .diff_policy import (
    DiffDecision,
    DiffPolicyError,
    DiffPolicyResult,
    SizeParseError,
    parse_size,
    should_generate_diff,
)
from .interaction_dispatch import (
    UnsupportedInteractionError,
    compare_message,
    compare_message_body,
    compare_response,
)
from .mismatch_partitioning import (
    BodyComparisonSubject,
    extract_body,
    extract_headers,
    extract_metadata,
    extract_status,
)

__all__ = [
    "ComparisonResult",
    "BodyComparisonResult",
    "BodyTypeFailure",
    "BodyComparisonOutcome",
    "BodyComparisonSubject",
    "DiffDecision",
    "DiffPolicyError",
    "DiffPolicyResult",
    "SizeParseError",
    "UnsupportedInteractionError",
    "parse_size",
    "should_generate_diff",
    "diff_lines",
    "pretty_print_json",
    "render_body_diff",
    "extract_status",
    "extract_headers",
    "extract_body",
    "extract_metadata",
    "compare_response",
    "compare_message",
    "compare_message_body",
]
