"""
Model Response Parsing Tests
"""

import pytest

from edusaarthi.features.generation.parsing import (
    ResponseParseError,
    parse_json_array,
    strip_code_fences,
)


def test_strip_code_fences_variants():
    assert strip_code_fences('```json\n[1]\n```') == "[1]"
    assert strip_code_fences('```\n[2]\n```') == "[2]"
    assert strip_code_fences('  [3]  ') == "[3]"


def test_array_inside_prose():
    assert parse_json_array('Here you go: ["a", "b"] Hope this helps!') == ["a", "b"]


def test_single_list_value_in_object():
    assert parse_json_array('{"questions": ["a"]}') == ["a"]


@pytest.mark.parametrize("raw", [
    "",
    "no json at all",
    '{"a": 1}',
    '{"a": [1], "b": [2]}',
    '"just a string"',
])
def test_rejects_non_arrays(raw):
    with pytest.raises(ResponseParseError):
        parse_json_array(raw)
