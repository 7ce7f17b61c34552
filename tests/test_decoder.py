"""Tests for jsontoon.decoder."""

import pytest

from jsontoon import FormatError, InvalidArrayHeaderError, decode


class TestDocumentDispatch:
    def test_empty_array(self):
        assert decode("[]:") == []

    def test_empty_object(self):
        assert decode("{}:") == {}

    def test_empty_document(self):
        assert decode("") == ""

    def test_blank_document(self):
        assert decode("\n   \n") == ""

    def test_scalar_document(self):
        assert decode("42") == 42
        assert decode("null") is None
        assert decode("hello") == "hello"

    def test_blank_lines_ignored(self):
        assert decode("a: 1\n\n   \nb: 2") == {"a": 1, "b": 2}

    def test_crlf_line_endings(self):
        assert decode("a: 1\r\nb: 2\r\n") == {"a": 1, "b": 2}


class TestTabularArray:
    def test_header_arity(self):
        result = decode("[3]{a,b}:\n1,2\n3,4\n5,6")
        assert result == [{"a": 1, "b": 2}, {"a": 3, "b": 4}, {"a": 5, "b": 6}]

    def test_cells_and_columns_trimmed(self):
        assert decode("[1]{ a , b }:\n 1 ,  x ") == [{"a": 1, "b": "x"}]

    def test_short_rows_are_lenient(self):
        assert decode("[3]{a}:\n1") == [{"a": 1}]

    def test_short_rows_strict(self):
        with pytest.raises(FormatError):
            decode("[3]{a}:\n1", {"strict": True})

    def test_missing_cells_are_empty_strings(self):
        assert decode("[1]{a,b,c}:\n1") == [{"a": 1, "b": "", "c": ""}]

    def test_extra_cells_dropped(self):
        assert decode("[1]{a}:\n1,2") == [{"a": 1}]

    def test_extra_cells_strict(self):
        with pytest.raises(FormatError):
            decode("[1]{a}:\n1,2", {"strict": True})

    def test_lines_past_count_ignored(self):
        assert decode("[1]{a}:\n1\n2") == [{"a": 1}]

    def test_invalid_header(self):
        with pytest.raises(InvalidArrayHeaderError) as exc_info:
            decode("[x]{a}:\n1")
        assert exc_info.value.line == "[x]{a}:"
        assert "Invalid array header" in str(exc_info.value)

    def test_invalid_header_is_format_error(self):
        with pytest.raises(FormatError):
            decode("[2]{}:")

    def test_invalid_keyed_header(self):
        with pytest.raises(InvalidArrayHeaderError):
            decode("items[2]{}:\n1")

    def test_bracketed_first_key_is_an_object(self):
        assert decode("[x]:\nhello") == {"[x]": "hello"}


class TestObject:
    def test_key_value_lines(self):
        assert decode("name: Ann\nage: 30\nactive: true") == {"name": "Ann", "age": 30, "active": True}

    def test_key_order(self):
        assert list(decode("b: 1\na: 2")) == ["b", "a"]

    def test_split_on_first_colon(self):
        assert decode("url: http://example.com") == {"url": "http://example.com"}

    def test_empty_string_value(self):
        assert decode("a: \nb: 1") == {"a": "", "b": 1}

    def test_empty_container_values(self):
        assert decode("a: []:\nb: {}:") == {"a": [], "b": {}}

    def test_line_without_colon(self):
        assert decode("a: 1\nlonely") == {"a": 1, "lonely": ""}

    def test_trailing_bare_key_is_null(self):
        assert decode("a: 1\nb:") == {"a": 1, "b": None}

    def test_bare_key_then_scalar(self):
        assert decode("a:\nhello") == {"a": "hello"}

    def test_nested_block(self):
        text = "addr:\n  city: x\n  zip: 123\nname: y"
        assert decode(text) == {"addr": {"city": "x", "zip": 123}, "name": "y"}

    def test_deep_nested_block(self):
        assert decode("a:\n  b:\n    c: 1") == {"a": {"b": {"c": 1}}}

    def test_bare_key_then_table(self):
        text = "items:\n[2]{id,ok}:\n1,true\n2,false\nnext: x"
        assert decode(text) == {
            "items": [{"id": 1, "ok": True}, {"id": 2, "ok": False}],
            "next": "x",
        }

    def test_keyed_table(self):
        text = "users[2]{id,name}:\n1,Ann\n2,Bob\ncount: 2"
        assert decode(text) == {
            "users": [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Bob"}],
            "count": 2,
        }

    def test_table_rows_stop_at_bare_key(self):
        text = "t[1]{a}:\n1\nsub:\n  x: 1"
        assert decode(text) == {"t": [{"a": 1}], "sub": {"x": 1}}

    def test_keyed_table_in_nested_block(self):
        assert decode("team:\n  members[1]{id}:\n  1") == {"team": {"members": [{"id": 1}]}}

    def test_indent_option(self):
        assert decode("a:\n    b: 1", {"indent": 4}) == {"a": {"b": 1}}

    def test_invalid_indent(self):
        with pytest.raises(ValueError):
            decode("a: 1", {"indent": -2})
