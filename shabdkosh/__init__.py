"""Bilingual (Hindi/English/Hinglish) term dictionary and product search."""

# Package exports should be side-effect free.

from . import (
    models,
    dictionary,
    normalizer,
    expander,
    suggester,
    matcher,
)
from .dictionary import build_dictionary, default_dictionary, related_terms
from .expander import expand_search_query, expand_terms
from .matcher import filter_products, matches_product
from .suggester import MAX_SUGGESTIONS, get_suggested_aliases

__all__ = [
    "models",
    "dictionary",
    "normalizer",
    "expander",
    "suggester",
    "matcher",
    "build_dictionary",
    "default_dictionary",
    "related_terms",
    "expand_search_query",
    "expand_terms",
    "filter_products",
    "matches_product",
    "MAX_SUGGESTIONS",
    "get_suggested_aliases",
]
