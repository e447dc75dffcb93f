"""
Scalar codecs for values whose wire type varies across ContextForge endpoints.

- FlexibleID: identifiers that arrive as a JSON string or a JSON integer
- Timestamp: instants in RFC3339 or naive ISO-8601 (with or without fraction)
- Tag: labels that arrive as a bare string or as an {"id", "label"} object

Each codec normalizes to one in-memory form and writes back one canonical
wire form.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    GetCoreSchemaHandler,
    PlainSerializer,
    PlainValidator,
    model_serializer,
    model_validator,
)
from pydantic_core import core_schema

logger = logging.getLogger(__name__)


# Layouts tried in order; offset-aware forms first
_OFFSET_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)
_NAIVE_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
)


def parse_flexible_id(
    value: Any,
) -> "FlexibleID":
    """Decode an identifier given as a string or an integer.

    Args:
        value: Raw JSON value

    Returns:
        The identifier as a FlexibleID string

    Raises:
        ValueError: If the value is neither a string nor an integer
    """
    if isinstance(value, str):
        return FlexibleID(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return FlexibleID(str(value))
    raise ValueError("id must be string or integer")


class FlexibleID(str):
    """An identifier that compares and serializes as a plain string."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            parse_flexible_id,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )


def _fraction_to_micros(
    text: str,
) -> str:
    """Clamp a fractional-seconds part to the six digits strptime accepts."""
    if "." not in text:
        return text
    head, _, tail = text.partition(".")
    digits = ""
    for ch in tail:
        if not ch.isdigit():
            break
        digits += ch
    rest = tail[len(digits):]
    return f"{head}.{digits[:6]}{rest}"


def _strptime_any(
    text: str,
    layouts: tuple[str, ...],
) -> datetime:
    """Parse text with the first layout that matches, raising the last failure."""
    error: ValueError | None = None
    for layout in layouts:
        try:
            return datetime.strptime(text, layout)
        except ValueError as e:
            error = e
    raise error


def parse_rfc3339(
    text: str,
) -> datetime:
    """Parse an offset-aware RFC3339 instant.

    Args:
        text: Timestamp such as 2024-01-01T12:00:00Z

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the text is not RFC3339 with an offset
    """
    return _strptime_any(_fraction_to_micros(text), _OFFSET_LAYOUTS)


def parse_timestamp(
    value: Any,
) -> datetime | None:
    """Decode a timestamp from any of the accepted textual forms.

    The empty string means unset and decodes to None without error. Naive
    forms are interpreted as UTC.

    Args:
        value: Raw JSON value

    Returns:
        Timezone-aware datetime, or None when unset

    Raises:
        ValueError: If the value is not a string or matches no layout
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    if value == "":
        return None

    parsed = _strptime_any(
        _fraction_to_micros(value),
        _OFFSET_LAYOUTS + _NAIVE_LAYOUTS,
    )
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(
    value: datetime | None,
) -> str | None:
    """Encode a timestamp in RFC3339 form with whole seconds.

    Args:
        value: Datetime to encode, or None

    Returns:
        RFC3339 string ('Z' for a zero offset), or None when unset
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    base = value.strftime("%Y-%m-%dT%H:%M:%S")
    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return base + "Z"

    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{base}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


Timestamp = Annotated[
    datetime,
    PlainValidator(parse_timestamp),
    PlainSerializer(format_timestamp),
]


class Tag(BaseModel):
    """A label decoded from either a bare string or an {id, label} object.

    Only the id is ever sent back upstream.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_string(
        cls,
        data: Any,
    ) -> Any:
        if isinstance(data, str):
            return {"id": data, "label": data}
        return data

    @model_serializer
    def _to_id(self) -> str:
        return self.id

    @classmethod
    def of(
        cls,
        name: str,
    ) -> "Tag":
        """Build a tag whose id and label are both the given name."""
        return cls(id=name, label=name)

    def __str__(self) -> str:
        return self.id


def new_tags(
    names: list[str] | None,
) -> list[Tag] | None:
    """Convert tag names to Tag objects, passing None through."""
    if names is None:
        return None
    return [Tag.of(name) for name in names]


def tag_names(
    tags: list[Tag] | None,
) -> list[str] | None:
    """Extract tag ids, passing None through."""
    if tags is None:
        return None
    return [tag.id for tag in tags]
