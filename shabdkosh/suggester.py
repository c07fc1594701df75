"""Alias suggestions for new products.

While a shopkeeper types a product name the add-product form shows a handful
of cross-language aliases as toggleable chips, e.g. ``"Tata Salt"`` proposes
``namak``. Suggestions are only a pre-fill; nothing here touches stored
products.

Matching is plain substring containment, not word-boundary matching, so an
equivalent like ``"aata"`` also fires inside ``"paata"``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .dictionary import default_dictionary
from .models import TermDictionary

MAX_SUGGESTIONS = 8


class _OrderedSuggestions:
    """Insertion-ordered set of suggestion strings."""

    def __init__(self) -> None:
        self._items: List[str] = []
        self._seen: set[str] = set()

    def add(self, value: str) -> None:
        if value not in self._seen:
            self._seen.add(value)
            self._items.append(value)

    def update(self, values: Iterable[str]) -> None:
        for value in values:
            self.add(value)

    def first(self, limit: int) -> List[str]:
        return self._items[:limit]


def get_suggested_aliases(
    product_name: str,
    dictionary: Optional[TermDictionary] = None,
    *,
    limit: int = MAX_SUGGESTIONS,
) -> List[str]:
    """Return up to ``limit`` aliases worth attaching to ``product_name``.

    Three passes feed one ordered set, which is then cut to ``limit``:

    1. a dictionary equivalent inside the name proposes its canonical term;
    2. a reverse-index key inside the name proposes every equivalent of its
       canonical terms that the name does not already contain;
    3. a whitespace token that is itself a canonical term proposes all of its
       equivalents.
    """
    if not isinstance(product_name, str) or not product_name.strip():
        return []

    dictionary = dictionary or default_dictionary()
    name = product_name.lower()
    suggestions = _OrderedSuggestions()

    for canonical, entry in dictionary.entries.items():
        for equivalent in entry.equivalents:
            if equivalent in name:
                suggestions.add(canonical)

    for equivalent, canonicals in dictionary.index.items():
        if equivalent not in name:
            continue
        for canonical in canonicals:
            for term in dictionary.equivalents_of(canonical):
                if term not in name:
                    suggestions.add(term)

    for token in name.split():
        suggestions.update(dictionary.equivalents_of(token))

    return suggestions.first(limit)
