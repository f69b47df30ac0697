"""Body diff rendering."""

from __future__ import annotations

import difflib
import json
from collections.abc import Callable

TextDiffer = Callable[[str, str], list[str]]
JsonPrettyPrinter = Callable[[str], str]


def pretty_print_json(text: str) -> str:
    """Re-indent a JSON document with two spaces; malformed JSON is returned unchanged."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        return text
    return json.dumps(document, indent=2, ensure_ascii=False)


def diff_lines(expected_text: str, actual_text: str) -> list[str]:
    """Line diff listing every line with a " ", "-" or "+" marker."""
    return [
        f"{line[0]}{line[2:]}"
        for line in difflib.ndiff(expected_text.splitlines(), actual_text.splitlines())
        if not line.startswith("? ")
    ]


def render_body_diff(
    *,
    expected_body: str,
    expected_is_json: bool,
    actual_body: str,
    actual_is_json: bool,
    differ: TextDiffer = diff_lines,
    pretty_printer: JsonPrettyPrinter = pretty_print_json,
) -> list[str]:
    """Render the diff between expected and actual bodies, pretty-printing JSON sides."""
    expected_text = _format_side(expected_body, expected_is_json, pretty_printer)
    actual_text = _format_side(actual_body, actual_is_json, pretty_printer)
    return differ(expected_text, actual_text)


def _format_side(body: str, is_json: bool, pretty_printer: JsonPrettyPrinter) -> str:
    if not body:
        return ""
    return pretty_printer(body) if is_json else body
