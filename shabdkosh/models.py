"""Dataclasses representing the bilingual term dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple


@dataclass(frozen=True)
class TermEntry:
    """Single dictionary relation.

    Attributes:
        canonical: Transliterated Hindi (or English) root, e.g. ``"namak"``.
        equivalents: English synonyms and alternate Hindi spellings, lower-cased.
    """

    canonical: str
    equivalents: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TermDictionary:
    """Immutable dictionary of term entries keyed by canonical term.

    ``index`` maps every equivalent (lower-cased) to the canonical terms that
    list it. Both mappings are read-only views so one instance can be shared
    between threads and request handlers.
    """

    entries: Mapping[str, TermEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )
    index: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        key = term.lower()
        return key in self.entries or key in self.index

    def __len__(self) -> int:
        return len(self.entries)

    def equivalents_of(self, canonical: str) -> Tuple[str, ...]:
        """Return the equivalents registered under ``canonical`` (or ``()``)."""
        entry = self.entries.get(canonical.lower())
        return entry.equivalents if entry else ()

    def canonicals_of(self, equivalent: str) -> Tuple[str, ...]:
        """Return the canonical terms that list ``equivalent`` (or ``()``)."""
        return self.index.get(equivalent.lower(), ())

    def related_terms(self, word: str) -> List[str]:
        """Return every term related to ``word`` in either direction.

        Forward equivalents come first, followed by canonical terms found via
        the reverse index. Unknown words yield an empty list.
        """
        key = word.lower()
        related: List[str] = []
        for term in self.equivalents_of(key) + self.canonicals_of(key):
            if term not in related:
                related.append(term)
        return related

    @property
    def all_terms(self) -> frozenset[str]:
        """Union of canonical terms and equivalents."""
        return frozenset(self.entries) | frozenset(self.index)
