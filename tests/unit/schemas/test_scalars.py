"""
Unit tests for contextforge.schemas.scalars.

Validates the FlexibleID, Timestamp and Tag codecs.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from hypothesis import given, settings, strategies as st
from pydantic import BaseModel, ValidationError

from contextforge.schemas.scalars import (
    FlexibleID,
    Tag,
    Timestamp,
    format_timestamp,
    new_tags,
    parse_flexible_id,
    parse_rfc3339,
    parse_timestamp,
    tag_names,
)


class _IDHolder(BaseModel):
    id: FlexibleID


class _Stamped(BaseModel):
    at: Timestamp | None = None


class _Tagged(BaseModel):
    tags: list[Tag] | None = None


@pytest.mark.unit
class TestFlexibleID:
    """Tests for identifiers that arrive as strings or integers."""

    def test_string_kept(self):
        assert _IDHolder.model_validate({"id": "abc"}).id == "abc"

    def test_integer_converted_to_decimal_string(self):
        holder = _IDHolder.model_validate({"id": 42})
        assert holder.id == "42"
        assert isinstance(holder.id, str)

    def test_serializes_as_string(self):
        assert _IDHolder.model_validate({"id": 7}).model_dump() == {"id": "7"}

    @pytest.mark.parametrize("value", [1.5, True, None, ["1"], {"id": 1}])
    def test_other_types_rejected(self, value):
        with pytest.raises(ValidationError, match="id must be string or integer"):
            _IDHolder.model_validate({"id": value})

    def test_parse_rejects_bool(self):
        with pytest.raises(ValueError):
            parse_flexible_id(False)

    @given(value=st.integers())
    @settings(max_examples=100)
    def test_any_integer_matches_its_decimal_form(self, value: int):
        """An integer ID equals the same ID given as a string."""
        assert parse_flexible_id(value) == parse_flexible_id(str(value))


@pytest.mark.unit
class TestParseTimestamp:
    """Tests for parse_timestamp and parse_rfc3339."""

    def test_rfc3339_utc(self):
        assert parse_timestamp("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_rfc3339_with_offset(self):
        parsed = parse_timestamp("2024-01-02T03:04:05+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed.astimezone(UTC) == datetime(2024, 1, 2, 1, 4, 5, tzinfo=UTC)

    def test_rfc3339_with_fraction(self):
        parsed = parse_timestamp("2024-01-02T03:04:05.250Z")
        assert parsed.microsecond == 250000

    def test_naive_with_nanoseconds_is_utc(self):
        """Fractions longer than microseconds are truncated; naive means UTC."""
        parsed = parse_timestamp("2024-01-02T03:04:05.123456789")
        assert parsed == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=UTC)

    def test_naive_without_fraction_is_utc(self):
        assert parse_timestamp("2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_empty_string_is_unset(self):
        assert parse_timestamp("") is None

    def test_none_is_unset(self):
        assert parse_timestamp(None) is None

    @pytest.mark.parametrize("value", ["yesterday", "2024-01-02", "2024-01-02 03:04:05"])
    def test_unrecognized_text_rejected(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="must be a string"):
            parse_timestamp(1704164645)

    def test_rfc3339_requires_offset(self):
        with pytest.raises(ValueError):
            parse_rfc3339("2024-01-02T03:04:05")

    def test_model_field_accepts_empty_string(self):
        assert _Stamped.model_validate({"at": ""}).at is None

    def test_model_field_rejects_garbage(self):
        with pytest.raises(ValidationError):
            _Stamped.model_validate({"at": "not a time"})


@pytest.mark.unit
class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_utc_uses_z(self):
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)) == "2024-01-02T03:04:05Z"

    def test_positive_offset(self):
        tz = timezone(timedelta(hours=5, minutes=30))
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)) == "2024-01-02T03:04:05+05:30"

    def test_negative_offset(self):
        tz = timezone(timedelta(hours=-8))
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)) == "2024-01-02T03:04:05-08:00"

    def test_fraction_dropped(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 999999, tzinfo=UTC)
        assert format_timestamp(value) == "2024-01-02T03:04:05Z"

    def test_none_is_none(self):
        assert format_timestamp(None) is None

    def test_model_dump_uses_rfc3339(self):
        stamped = _Stamped.model_validate({"at": "2024-01-02T03:04:05.123"})
        assert stamped.model_dump(mode="json") == {"at": "2024-01-02T03:04:05Z"}

    @given(
        value=st.datetimes(
            min_value=datetime(1970, 1, 1),
            max_value=datetime(9999, 12, 31),
        ).map(lambda d: d.replace(microsecond=0, tzinfo=UTC))
    )
    @settings(max_examples=100)
    def test_formatted_value_parses_back(self, value: datetime):
        """Whole-second UTC instants survive format then parse."""
        assert parse_timestamp(format_timestamp(value)) == value


@pytest.mark.unit
class TestTag:
    """Tests for the Tag codec."""

    def test_decodes_bare_string(self):
        tags = _Tagged.model_validate({"tags": ["prod"]}).tags
        assert tags == [Tag(id="prod", label="prod")]

    def test_decodes_object(self):
        tags = _Tagged.model_validate({"tags": [{"id": "t-1", "label": "Production"}]}).tags
        assert tags[0].id == "t-1"
        assert tags[0].label == "Production"

    def test_mixed_forms(self):
        tags = _Tagged.model_validate({"tags": ["a", {"id": "b", "label": "B"}]}).tags
        assert tag_names(tags) == ["a", "b"]

    def test_serializes_as_id_only(self):
        tagged = _Tagged(tags=[Tag(id="t-1", label="Production")])
        assert tagged.model_dump(mode="json") == {"tags": ["t-1"]}

    def test_of_and_str(self):
        tag = Tag.of("beta")
        assert tag.label == "beta"
        assert str(tag) == "beta"

    def test_new_tags_and_tag_names(self):
        assert tag_names(new_tags(["a", "b"])) == ["a", "b"]

    def test_none_passes_through(self):
        assert new_tags(None) is None
        assert tag_names(None) is None
