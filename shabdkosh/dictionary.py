"""Construction and lookup of the bilingual term dictionary.

The forward table in :mod:`shabdkosh.data` is authored by hand; the reverse
index is derived from it exactly once. :func:`default_dictionary` memoises the
result so every caller shares the same read-only instance, while tests can
build their own dictionaries from small tables via :func:`build_dictionary`.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .data import HINDI_TO_ENGLISH
from .models import TermDictionary, TermEntry

logger = logging.getLogger(__name__)


def _dedupe_preserve_order(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    result: List[str] = []
    for item in items:
        if not item:
            continue
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _append_index_entry(target: Dict[str, List[str]], key: str, canonical: str) -> None:
    if not key:
        return
    bucket = target.setdefault(key, [])
    if canonical not in bucket:
        bucket.append(canonical)


def validate_table(table: Mapping[str, Iterable[str]]) -> None:
    """Raise ``ValueError`` if ``table`` contains malformed entries."""
    for canonical, equivalents in table.items():
        if not isinstance(canonical, str) or not canonical.strip():
            raise ValueError(f"Invalid canonical term: {canonical!r}")
        if isinstance(equivalents, str) or not isinstance(equivalents, (list, tuple)):
            raise ValueError(f"Invalid equivalents for {canonical}")
        for term in equivalents:
            if not isinstance(term, str) or not term.strip():
                raise ValueError(f"Invalid equivalent for {canonical}: {term!r}")


def build_dictionary(table: Mapping[str, Iterable[str]]) -> TermDictionary:
    """Return an immutable :class:`TermDictionary` built from ``table``.

    Canonical keys and equivalents are lower-cased; each equivalent maps back
    to every canonical term listing it, in table order and without duplicates.
    """
    validate_table(table)

    entries: Dict[str, TermEntry] = {}
    for canonical, equivalents in table.items():
        key = canonical.strip().lower()
        terms = _dedupe_preserve_order(term.strip().lower() for term in equivalents)
        previous = entries.get(key)
        if previous is not None:
            terms = _dedupe_preserve_order(list(previous.equivalents) + terms)
        entries[key] = TermEntry(canonical=key, equivalents=tuple(terms))

    index: Dict[str, List[str]] = {}
    for key, entry in entries.items():
        for term in entry.equivalents:
            _append_index_entry(index, term, key)

    logger.debug(
        "Term dictionary built: %d canonical terms, %d reverse keys",
        len(entries),
        len(index),
    )
    return TermDictionary(
        entries=MappingProxyType(entries),
        index=MappingProxyType({k: tuple(v) for k, v in index.items()}),
    )


@lru_cache(maxsize=1)
def default_dictionary() -> TermDictionary:
    """Return the shared dictionary built from the static kirana table."""
    return build_dictionary(HINDI_TO_ENGLISH)


def related_terms(word: str, dictionary: Optional[TermDictionary] = None) -> List[str]:
    """Return all Hindi/English terms related to ``word``.

    Lookup is case-insensitive and never raises; unknown words yield ``[]``.
    """
    if not isinstance(word, str):
        return []
    return (dictionary or default_dictionary()).related_terms(word)


def dictionary_stats(dictionary: Optional[TermDictionary] = None) -> Dict[str, int]:
    """Return simple counts describing ``dictionary``."""
    dictionary = dictionary or default_dictionary()
    return {
        "canonical_terms": len(dictionary.entries),
        "equivalents": sum(len(e.equivalents) for e in dictionary.entries.values()),
        "reverse_keys": len(dictionary.index),
        "all_terms": len(dictionary.all_terms),
    }


def export_dictionary(
    path: str | Path | None = None,
    dictionary: Optional[TermDictionary] = None,
) -> str:
    """Serialize the forward table as JSON; write it to ``path`` when given."""
    dictionary = dictionary or default_dictionary()
    data = {key: list(entry.equivalents) for key, entry in dictionary.entries.items()}
    text = json.dumps(data, ensure_ascii=False, indent=2)
    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
    return text
