"""Normalisation of user-entered term lists."""

from __future__ import annotations

import re
from typing import List


_NEWLINE_RUN = re.compile(r"[\r\n]+")

TERM_SEPARATOR = ", "


def normalize_terms(text: str) -> str:
    """Return ``text`` as a lowercased, deduplicated, comma-separated list.

    Newline runs count as commas, empty tokens are dropped and the first
    occurrence of a term decides its position. Applying the function to its
    own output changes nothing.
    """

    if not text:
        return ""

    seen = set()
    terms: List[str] = []
    for token in _NEWLINE_RUN.sub(",", text).split(","):
        term = token.strip().lower()
        if not term or term in seen:
            continue
        seen.add(term)
        terms.append(term)
    return TERM_SEPARATOR.join(terms)


def split_terms(text: str) -> List[str]:
    normalized = normalize_terms(text)
    if not normalized:
        return []
    return normalized.split(TERM_SEPARATOR)
