"""Per-product match decision for the live search box.

The search surface holds the whole catalogue in memory and asks
:func:`matches_product` about every product on each keystroke. Dictionary
relations are looked up for the WHOLE query string, not per token as in
:mod:`shabdkosh.expander`; a multi-word query therefore only gains
Hindi/English bridging when the complete string is itself a dictionary key
(e.g. ``"red chilli"``), and otherwise falls back to substring matching.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .dictionary import default_dictionary
from .models import TermDictionary


def _product_fields(product: Any) -> Tuple[str, Sequence[str]]:
    """Return ``(name, aliases)`` from a mapping or an object with attributes."""
    if isinstance(product, Mapping):
        name = product.get("name") or ""
        aliases = product.get("aliases") or []
    else:
        name = getattr(product, "name", "") or ""
        aliases = getattr(product, "aliases", None) or []
    return name, aliases


def _contains(needle: str, name: str, aliases: Sequence[str]) -> bool:
    if needle in name:
        return True
    return any(needle in alias for alias in aliases)


def matches_product(
    query: str,
    product: Any,
    dictionary: Optional[TermDictionary] = None,
) -> bool:
    """Return ``True`` if ``product`` should be shown for ``query``.

    ``product`` may be a mapping or an object exposing ``name`` and
    ``aliases``. Checks short-circuit in order: name substring, alias
    substring, then the same containment checks for every term related to the
    whole query. An empty query matches everything; callers treat it as "no
    filter" before getting here.
    """
    name, aliases = _product_fields(product)
    term = query.lower()
    name = name.lower()
    aliases = [alias.lower() for alias in aliases]

    if _contains(term, name, aliases):
        return True

    dictionary = dictionary or default_dictionary()
    for related in dictionary.related_terms(term):
        if _contains(related.lower(), name, aliases):
            return True
    return False


def filter_products(
    query: str,
    products: Iterable[Any],
    dictionary: Optional[TermDictionary] = None,
    *,
    limit: Optional[int] = None,
) -> List[Any]:
    """Return the products matching ``query`` in their original order.

    A blank query applies no filter. ``limit`` truncates the result after
    filtering; no ranking is applied.
    """
    items = list(products)
    if query and query.strip():
        dictionary = dictionary or default_dictionary()
        items = [p for p in items if matches_product(query, p, dictionary)]
    if limit is not None:
        items = items[:limit]
    return items
