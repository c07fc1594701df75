"""Helpers to normalize terms before comparison."""

from __future__ import annotations

import re
from typing import List

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_term(term: str) -> str:
    """Return a standardized representation of ``term`` for matching."""

    if not isinstance(term, str):
        return ""

    # Lowercase and strip whitespace. No transliteration or stemming.
    return term.lower().strip()


def tokenize(text: str) -> List[str]:
    """Split normalized ``text`` on runs of whitespace."""

    norm = normalize_term(text)
    if not norm:
        return []
    return _WHITESPACE_RE.split(norm)
