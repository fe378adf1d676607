"""JSON reply parsing for adapters that requested a JSON response format.

Models frequently wrap JSON in Markdown fences or leave light formatting
artifacts (trailing commas, unbalanced closers). ``parse_json_reply`` tries a
strict parse first and only then falls back to conservative cleanup.
"""
from __future__ import annotations

import json
import re
from typing import Any, Tuple


def clean_json_markers(s: str) -> str:
    """Strip common Markdown code fences from LLM JSON replies.

    Parameters:
        s: Raw string potentially wrapped in triple backtick fences
           (```json ... ``` or ``` ... ```).

    Returns:
        The input string with leading/trailing code fences removed and
        surrounding whitespace trimmed.
    """
    s = s.strip()
    if s.startswith("```json"):
        s = s[7:]
    elif s.startswith("```"):
        s = s[3:]
    if s.endswith("```"):
        s = s[:-3]
    return s.strip()


def _drop_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _count_unescaped_quotes(text: str) -> int:
    count = 0
    for i, ch in enumerate(text):
        if ch != '"':
            continue
        backslashes = 0
        j = i - 1
        while j >= 0 and text[j] == "\\":
            backslashes += 1
            j -= 1
        if backslashes % 2 == 0:
            count += 1
    return count


def _closer_counts(text: str) -> Tuple[int, int, int, int]:
    """Count ``{ } [ ]`` outside string literals."""
    in_str = False
    escapes = 0
    ob = cb = osq = csq = 0
    for ch in text:
        if ch == '"' and escapes % 2 == 0:
            in_str = not in_str
        if in_str:
            escapes = escapes + 1 if ch == "\\" else 0
            continue
        if ch == "{":
            ob += 1
        elif ch == "}":
            cb += 1
        elif ch == "[":
            osq += 1
        elif ch == "]":
            csq += 1
    return ob, cb, osq, csq


def attempt_json_repair(s: str) -> str:
    """Best-effort normalization of nearly-JSON strings to parseable JSON.

    Steps:
        1. Remove Markdown code fences if present.
        2. Trim leading text before the first ``{`` or ``[``.
        3. Remove trailing commas immediately before ``}`` or ``]``.
        4. Ensure an even count of unescaped double quotes.
        5. Balance unmatched braces/brackets by appending closers.

    Never raises; returns the best intermediate representation.
    """
    s = clean_json_markers(s)

    starts = [i for i in (s.find("{"), s.find("[")) if i != -1]
    if starts:
        s = s[min(starts):]

    s = _drop_trailing_commas(s)

    if _count_unescaped_quotes(s) % 2 == 1:
        s += '"'

    ob, cb, osq, csq = _closer_counts(s)
    if osq > csq:
        s += "]" * (osq - csq)
    if ob > cb:
        s += "}" * (ob - cb)

    # balancing may expose a dangling comma
    return _drop_trailing_commas(s)


def parse_json_reply(text: str) -> Any:
    """Parse a model reply that should contain JSON.

    Tries, in order: strict ``json.loads``, fence stripping, then
    :func:`attempt_json_repair`.

    Raises:
        ValueError: when no candidate parses (``json.JSONDecodeError`` is a
            ``ValueError`` subclass and is raised as-is).
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    cleaned = clean_json_markers(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        pass
    return json.loads(attempt_json_repair(cleaned))


__all__ = ["clean_json_markers", "attempt_json_repair", "parse_json_reply"]
