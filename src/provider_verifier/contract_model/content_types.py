"""Content type parsing for contract bodies."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

_DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True)
class ContentType:
    """Parsed media type with its parameters."""

    base_type: str
    parameters: tuple[tuple[str, str], ...] = field(default=())

    @property
    def charset(self) -> str:
        """Return the declared charset, or UTF-8 when absent or not a known codec."""
        for name, value in self.parameters:
            if name == "charset" and value:
                return known_charset(value)
        return _DEFAULT_CHARSET

    @property
    def is_json(self) -> bool:
        """Return True for application/json and structured +json media types."""
        main_type, _, subtype = self.base_type.partition("/")
        if main_type == "application":
            return "json" in subtype
        return subtype.endswith("+json")

    @property
    def is_known(self) -> bool:
        return bool(self.base_type)

    def __str__(self) -> str:
        rendered_parameters = "".join(f"; {name}={value}" for name, value in self.parameters)
        return f"{self.base_type}{rendered_parameters}"


def known_charset(name: str | None) -> str:
    """Return ``name`` when Python has a codec for it, else UTF-8."""
    if not name:
        return _DEFAULT_CHARSET
    try:
        codecs.lookup(name)
    except LookupError:
        return _DEFAULT_CHARSET
    return name


UNKNOWN_CONTENT_TYPE = ContentType(base_type="")
TEXT_PLAIN = ContentType(base_type="text/plain")
APPLICATION_JSON = ContentType(base_type="application/json")


def parse_content_type(value: str | None) -> ContentType:
    """Parse a Content-Type header value; blank input yields the unknown content type."""
    if value is None or not value.strip():
        return UNKNOWN_CONTENT_TYPE
    media_type, *raw_parameters = value.split(";")
    parameters: list[tuple[str, str]] = []
    for raw_parameter in raw_parameters:
        name, separator, parameter_value = raw_parameter.partition("=")
        if not separator:
            continue
        parameters.append((name.strip().lower(), parameter_value.strip().strip('"')))
    return ContentType(base_type=media_type.strip().lower(), parameters=tuple(parameters))
