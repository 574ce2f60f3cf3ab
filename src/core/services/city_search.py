"""
City and airport search for the trip dropdowns.

Matching is done on a normalized projection of each string (lowercase,
ASCII letters and digits only), so "Paris (CDG)", "paris cdg" and "PARISCDG"
are all the same haystack. Highlight spans are mapped back onto the original
label so the renderer can emphasise exactly the matched characters.
"""

import re
from itertools import islice
from typing import Iterable, Sequence

from core.models.airport import SearchableOption

DEFAULT_BROWSE_LIMIT = 100
DEFAULT_SEARCH_LIMIT = 50

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    return _NON_ALNUM.sub("", (text or "").lower())


def matches(label: str, query: str) -> bool:
    """An empty normalized query matches every label."""
    return normalize(query) in normalize(label)


def highlight_span(label: str, query: str) -> tuple[int, int] | None:
    """Return (start, end) such that label[start:end] normalizes to the matched text."""
    needle = normalize(query)
    if not needle:
        return None

    match_start = normalize(label).find(needle)
    if match_start == -1:
        return None
    match_end = match_start + len(needle)

    position = 0
    start: int | None = None
    for index, char in enumerate(label):
        kept = len(normalize(char))
        if not kept:
            continue
        if start is None and position + kept > match_start:
            start = index
        position += kept
        if position >= match_end:
            return start, index + 1

    return None


def split_highlight(label: str, query: str) -> tuple[str, str, str]:
    """Split a label into (before, highlighted, after) display segments."""
    span = highlight_span(label, query)
    if span is None:
        return label, "", ""
    start, end = span
    return label[:start], label[start:end], label[end:]


def filter_and_rank(labels: Iterable[str], query: str, limit: int) -> list[str]:
    """Stable filter capped at ``limit``; an empty query returns the first ``limit`` labels."""
    limit = max(limit, 0)
    needle = normalize(query)
    if not needle:
        return list(islice(labels, limit))
    return list(islice((label for label in labels if needle in normalize(label)), limit))


def search_options(
    options: Sequence[SearchableOption],
    query: str,
    browse_limit: int = DEFAULT_BROWSE_LIMIT,
    search_limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[SearchableOption]:
    needle = normalize(query)
    if not needle:
        return list(islice(options, max(browse_limit, 0)))

    found = (option for option in options if needle in normalize(option.search_text))
    return list(islice(found, max(search_limit, 0)))
