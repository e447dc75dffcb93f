"""
Unit tests for decode_list_response, which accepts both the bare-array and
the paginated envelope shape of collection responses.
"""

import pytest

from contextforge.exceptions import ListDecodeError
from contextforge.schemas.pagination import decode_list_response
from contextforge.schemas.tool_models import Tool


@pytest.mark.unit
class TestDecodeListResponse:
    """Tests for decode_list_response."""

    def test_bare_array(self):
        items, cursor = decode_list_response([{"id": "t1"}, {"id": "t2"}], "tools", Tool)
        assert [t.id for t in items] == ["t1", "t2"]
        assert cursor == ""

    def test_empty_array(self):
        assert decode_list_response([], "tools", Tool) == ([], "")

    def test_envelope_with_cursor(self):
        raw = {"tools": [{"id": "t1"}], "nextCursor": "page-2"}
        items, cursor = decode_list_response(raw, "tools", Tool)
        assert items[0].id == "t1"
        assert cursor == "page-2"

    def test_envelope_without_cursor(self):
        items, cursor = decode_list_response({"tools": [{"id": "t1"}]}, "tools", Tool)
        assert len(items) == 1
        assert cursor == ""

    @pytest.mark.parametrize("cursor", [None, 5, {"next": "x"}])
    def test_non_string_cursor_ignored(self, cursor):
        _, decoded = decode_list_response({"tools": [], "nextCursor": cursor}, "tools", Tool)
        assert decoded == ""

    def test_null_items_is_empty(self):
        assert decode_list_response({"tools": None}, "tools", Tool) == ([], "")

    def test_null_body_is_empty(self):
        assert decode_list_response(None, "tools", Tool) == ([], "")

    def test_raw_bytes_decoded(self):
        items, cursor = decode_list_response(b'{"tools": [{"id": "t1"}], "nextCursor": "c"}', "tools", Tool)
        assert items[0].id == "t1"
        assert cursor == "c"

    def test_missing_key(self):
        with pytest.raises(ListDecodeError) as exc_info:
            decode_list_response({"servers": []}, "tools", Tool)
        assert str(exc_info.value) == 'decode list response: missing "tools" field'

    def test_scalar_rejected(self):
        with pytest.raises(ListDecodeError, match="^decode list response: "):
            decode_list_response(5, "tools", Tool)

    def test_invalid_array_items_rejected(self):
        with pytest.raises(ListDecodeError, match="^decode list response: "):
            decode_list_response([1, 2], "tools", Tool)

    def test_invalid_envelope_items_rejected(self):
        with pytest.raises(ListDecodeError, match="^decode list response items: "):
            decode_list_response({"tools": [1]}, "tools", Tool)

    def test_malformed_json_bytes(self):
        with pytest.raises(ListDecodeError, match="^decode list response: "):
            decode_list_response(b"{not json", "tools", Tool)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_list_response("true", "tools", Tool)
