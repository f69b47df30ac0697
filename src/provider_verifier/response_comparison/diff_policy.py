"""Size-threshold policy deciding whether a body diff is rendered."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from provider_verifier.configuration.runtime_settings import GENERATE_DIFF_KEY
from provider_verifier.configuration.value_resolvers import ValueResolver

_NOT_SET = "not_set"
_SIZE_PATTERN = re.compile(r"^(\d+)\s*([a-z]+)?$")
_UNIT_MULTIPLIERS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 * 1024,
    "gb": 1024 * 1024 * 1024,
}

SizeParser = Callable[[str], int]


class SizeParseError(ValueError):
    """Raised when a size quantity such as ``10kb`` cannot be parsed."""


@dataclass(frozen=True)
class DiffDecision:
    """Resolved policy: whether the diff should be rendered."""

    enabled: bool


@dataclass(frozen=True)
class DiffPolicyError:
    """Policy configuration could not be interpreted."""

    reason: str


DiffPolicyResult = DiffDecision | DiffPolicyError


def parse_size(text: str) -> int:
    """Parse a data size like ``512``, ``1KB`` or ``4 mb`` into bytes."""
    match = _SIZE_PATTERN.fullmatch(text.strip().lower())
    if not match:
        raise SizeParseError(f"'{text}' is not a valid data size")
    amount, unit = match.groups()
    if unit is None:
        return int(amount)
    multiplier = _UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise SizeParseError(f"'{text}' has an unknown data size unit '{unit}'")
    return int(amount) * multiplier


def should_generate_diff(
    resolver: ValueResolver,
    length: int,
    *,
    size_parser: SizeParser = parse_size,
) -> DiffPolicyResult:
    """Decide whether a body diff of the given length should be rendered.

    Args:
      resolver: Configuration resolver consulted for ``provider_verifier.generate_diff``.
      length: Larger of the actual byte length and the expected character length.
      size_parser: Parser for size quantities.

    Returns:
      ``DiffDecision`` for a usable configuration, ``DiffPolicyError`` when the configured
      size cannot be parsed.
    """
    configured = resolver(GENERATE_DIFF_KEY, _NOT_SET)
    value = _NOT_SET if configured is None else configured.lower()
    if value in ("true", _NOT_SET):
        return DiffDecision(enabled=True)
    if value == "false":
        return DiffDecision(enabled=False)
    if not value:
        return DiffDecision(enabled=False)
    try:
        threshold = size_parser(value)
    except ValueError as exc:
        return DiffPolicyError(reason=str(exc))
    return DiffDecision(enabled=length <= threshold)
