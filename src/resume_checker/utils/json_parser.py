"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> object:
    """Parse JSON from an LLM response that may carry prose or code fences.

    Tries in order:
    1. Direct json.loads on the full text
    2. First '{' to last '}' and parse

    This is a best-effort heuristic: a bare array, or a stray '{' in prose
    before the real object, will not be recovered. Truncated JSON is not
    repaired.

    Raises:
        ValueError: no braces found, or the candidate is not valid JSON
            (json.JSONDecodeError is a ValueError).
    """
    # 1) Direct parse
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        pass

    # 2) First '{' to last '}'
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ValueError("no JSON object found")
    return json.loads(text[start : end + 1])
