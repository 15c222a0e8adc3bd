from __future__ import annotations

import pytest

from quickconnect.core.parsers.query import QueryStringParser, parse_query_string
from quickconnect.exceptions import DecodingError, InternalFault


def test_parse_simple_pairs():
    assert parse_query_string("a=1&b=2") == {"a": "1", "b": "2"}


def test_parse_last_duplicate_wins():
    assert parse_query_string("a=1&a=2") == {"a": "2"}


def test_parse_preserves_first_seen_order():
    result = parse_query_string("z=1&a=2&m=3&a=4")
    assert list(result) == ["z", "a", "m"]
    assert result["a"] == "4"


def test_parse_key_without_value_maps_to_empty_string():
    """Test that a segment lacking '=' does not fail."""
    assert parse_query_string("enable-sftp&color=blue") == {
        "enable-sftp": "",
        "color": "blue",
    }


def test_parse_explicit_empty_value():
    assert parse_query_string("a=") == {"a": ""}


def test_parse_splits_on_first_equals_only():
    assert parse_query_string("cmd=a=b") == {"cmd": "a=b"}


def test_parse_skips_empty_segments():
    assert parse_query_string("a=1&&b=2&") == {"a": "1", "b": "2"}


def test_parse_decodes_keys_and_values():
    parser = QueryStringParser("font%20name=DejaVu+Sans&path=%2Fhome%2Fbob&city=K%C3%B6ln")
    assert parser.parse() == {
        "font name": "DejaVu Sans",
        "path": "/home/bob",
        "city": "Köln",
    }


@pytest.mark.parametrize("query", ["a=%", "a=%4", "a%zz=1", "a=%C3%28"])
def test_parse_malformed_escape_raises(query):
    with pytest.raises(DecodingError):
        parse_query_string(query)


def test_decoding_error_is_internal_fault():
    with pytest.raises(InternalFault):
        parse_query_string("a=%G0")
