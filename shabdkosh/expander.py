"""Query expansion for the bilingual product search.

A query such as ``"namak"`` becomes ``"namak salt noon sendha"`` so that
callers doing full-text or fuzzy matching see both the Hindi and the English
vocabulary. Every whitespace-separated token is expanded on its own; there is
no phrase-level lookup, so ``"red chilli"`` expands ``red`` and ``chilli``
separately and never reaches the ``lalmirch`` entry.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .dictionary import default_dictionary
from .models import TermDictionary
from .normalizer import tokenize

logger = logging.getLogger(__name__)


def expand_terms(query: str, dictionary: Optional[TermDictionary] = None) -> List[str]:
    """Return the tokens of ``query`` followed by all their related terms.

    The result is de-duplicated and keeps discovery order: original tokens
    first, then the relations of each token in turn. Blank queries give ``[]``.
    """
    dictionary = dictionary or default_dictionary()
    tokens = tokenize(query)

    expanded: List[str] = []
    seen: set[str] = set()
    for value in tokens:
        if value not in seen:
            seen.add(value)
            expanded.append(value)

    for token in tokens:
        for term in dictionary.related_terms(token):
            term = term.lower()
            if term not in seen:
                seen.add(term)
                expanded.append(term)
    return expanded


def expand_search_query(query: Any, dictionary: Optional[TermDictionary] = None) -> Any:
    """Return ``query`` expanded with Hindi/English equivalents as one string.

    Blank or non-string input is returned unchanged.
    """
    if not isinstance(query, str) or not query.strip():
        return query

    expanded = expand_terms(query, dictionary)
    logger.debug("Expanded %r to %d terms", query, len(expanded))
    return " ".join(expanded)
