"""Tests for jsontoon.normalize."""

from datetime import date, datetime
from decimal import Decimal

from jsontoon.normalize import (
    detect_tabular_header,
    is_json_array,
    is_json_object,
    is_json_primitive,
    normalize_value,
)


class _ModelV2:
    def model_dump(self):
        return {"id": 1, "tags": ("a", "b")}


class _ModelV1:
    __fields__ = {"id": None}

    def dict(self):
        return {"id": 2}


class _Opaque:
    def __str__(self):
        return "opaque"


class TestNormalizeValue:
    def test_primitives_unchanged(self):
        assert normalize_value(None) is None
        assert normalize_value(True) is True
        assert normalize_value(5) == 5
        assert normalize_value("x") == "x"

    def test_non_finite_float(self):
        assert normalize_value(float("inf")) is None

    def test_decimal(self):
        assert normalize_value(Decimal("1.5")) == 1.5

    def test_dates(self):
        assert normalize_value(date(2024, 1, 15)) == "2024-01-15"
        assert normalize_value(datetime(2024, 1, 15, 8, 30)) == "2024-01-15T08:30:00"

    def test_tuple_and_set(self):
        assert normalize_value((1, 2)) == [1, 2]
        assert normalize_value({3, 1, 2}) == [1, 2, 3]

    def test_mapping_keys_become_strings(self):
        assert normalize_value({1: "a"}) == {"1": "a"}

    def test_pydantic_v2_style(self):
        assert normalize_value(_ModelV2()) == {"id": 1, "tags": ["a", "b"]}

    def test_pydantic_v1_style(self):
        assert normalize_value(_ModelV1()) == {"id": 2}

    def test_fallback_to_str(self):
        assert normalize_value(_Opaque()) == "opaque"


class TestPredicates:
    def test_bool_is_primitive(self):
        assert is_json_primitive(False)

    def test_containers(self):
        assert is_json_array([])
        assert is_json_object({})
        assert not is_json_primitive([])


class TestDetectTabularHeader:
    def test_uniform(self):
        assert detect_tabular_header([{"a": 1, "b": 2}, {"b": 3, "a": 4}]) == ["a", "b"]

    def test_empty(self):
        assert detect_tabular_header([]) is None

    def test_first_not_object(self):
        assert detect_tabular_header([1, {"a": 1}]) is None

    def test_differing_keys(self):
        assert detect_tabular_header([{"a": 1}, {"b": 1}]) is None

    def test_differing_size(self):
        assert detect_tabular_header([{"a": 1}, {"a": 1, "b": 2}]) is None

    def test_later_element_not_object(self):
        assert detect_tabular_header([{"a": 1}, [1]]) is None

    def test_no_keys(self):
        assert detect_tabular_header([{}]) is None

    def test_nested_values_allowed(self):
        assert detect_tabular_header([{"a": [1]}, {"a": {"b": 2}}]) == ["a"]

