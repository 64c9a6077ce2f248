"""
Model Response Parsing
Turn raw model output into a JSON array
"""

import json
from typing import Any, List


class ResponseParseError(ValueError):
    """Model response could not be read as a JSON array"""


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding markdown code block if present"""
    text = raw.strip()
    if "```json" in text:
        text = text.split("```json", 1)[1].split("```", 1)[0]
    elif "```" in text:
        text = text.split("```", 1)[1].split("```", 1)[0]
    return text.strip()


def parse_json_array(raw: str) -> List[Any]:
    """
    Parse a model response into a list

    Accepts a bare array, a fenced array, an array surrounded by prose, or an
    object wrapping a single array value.

    Raises:
        ResponseParseError: no array could be recovered
    """
    text = strip_code_fences(raw or "")
    if not text:
        raise ResponseParseError("Empty model response")

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        start, end = text.find("["), text.rfind("]")
        if start == -1 or end <= start:
            raise ResponseParseError("Model response is not valid JSON")
        try:
            data = json.loads(text[start : end + 1])
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Model response is not valid JSON: {e.msg}") from e

    if isinstance(data, dict):
        lists = [v for v in data.values() if isinstance(v, list)]
        if len(lists) == 1:
            data = lists[0]

    if not isinstance(data, list):
        raise ResponseParseError(f"Expected a JSON array, got {type(data).__name__}")
    return data
