"""Mismatch entities produced by structural matchers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class MismatchKind(str, Enum):
    """Kinds of discrepancy a matcher can report."""

    STATUS = "status"
    HEADER = "header"
    BODY = "body"
    BODY_TYPE = "body_type"
    METADATA = "metadata"


@dataclass(frozen=True)
class StatusMismatch:
    """Response status code differs from the expected one."""

    kind: ClassVar[MismatchKind] = MismatchKind.STATUS

    expected: int
    actual: int

    @property
    def description(self) -> str:
        return f"expected status of {self.expected} but was {self.actual}"


@dataclass(frozen=True)
class HeaderMismatch:
    """One expected header is missing or carries different values."""

    kind: ClassVar[MismatchKind] = MismatchKind.HEADER

    header_key: str
    expected: str
    actual: str
    description: str


@dataclass(frozen=True)
class BodyTypeMismatch:
    """Expected and actual bodies cannot be compared structurally."""

    kind: ClassVar[MismatchKind] = MismatchKind.BODY_TYPE

    expected: str
    actual: str

    @property
    def description(self) -> str:
        return (
            f"Expected a body of '{self.expected}' but the actual content type was "
            f"'{self.actual}'"
        )


@dataclass(frozen=True)
class BodyMismatch:
    """Difference at one structural path of the body."""

    kind: ClassVar[MismatchKind] = MismatchKind.BODY

    expected: Any
    actual: Any
    description: str
    path: str = "/"


@dataclass(frozen=True)
class MetadataMismatch:
    """Message metadata entry is missing or differs."""

    kind: ClassVar[MismatchKind] = MismatchKind.METADATA

    key: str
    expected: Any
    actual: Any
    description: str


Mismatch = StatusMismatch | HeaderMismatch | BodyTypeMismatch | BodyMismatch | MetadataMismatch
