import json

import pytest

from shabdkosh.data import HINDI_TO_ENGLISH
from shabdkosh.dictionary import (
    build_dictionary,
    default_dictionary,
    dictionary_stats,
    export_dictionary,
    related_terms,
    validate_table,
)


def test_related_terms_forward_and_reverse():
    assert related_terms("namak") == ["salt", "noon", "sendha"]
    assert related_terms("salt") == ["namak", "noon"]


def test_related_terms_case_insensitive():
    assert related_terms("NaMaK") == related_terms("namak")
    assert related_terms("Salt") == ["namak", "noon"]


def test_related_terms_unknown_word_is_empty():
    assert related_terms("maggi") == []
    assert related_terms("") == []
    assert related_terms(None) == []  # type: ignore[arg-type]


def test_term_that_is_canonical_and_equivalent():
    # "sarson" is its own entry and an equivalent of "rai"
    assert related_terms("sarson") == ["mustard oil", "sarson ka tel", "rai"]


def test_every_relation_is_symmetric():
    d = default_dictionary()
    for canonical, equivalents in HINDI_TO_ENGLISH.items():
        related = set(d.related_terms(canonical))
        assert set(equivalents) <= related
        for equivalent in equivalents:
            assert canonical in d.related_terms(equivalent)


def test_reverse_index_is_deduplicated_in_table_order():
    d = build_dictionary({"a": ["x", "x", "y"], "b": ["X"], "c": ["y"]})
    assert d.index["x"] == ("a", "b")
    assert d.index["y"] == ("a", "c")
    assert d.entries["a"].equivalents == ("x", "y")


def test_build_lowercases_keys_and_equivalents():
    d = build_dictionary({"Namak": ["SALT", " Noon "]})
    assert d.equivalents_of("namak") == ("salt", "noon")
    assert d.canonicals_of("Salt") == ("namak",)


@pytest.mark.parametrize(
    "table",
    [
        {"namak": "salt"},
        {"namak": [""]},
        {"namak": ["salt", 3]},
        {"": ["salt"]},
    ],
)
def test_validate_table_rejects_malformed(table):
    with pytest.raises(ValueError):
        validate_table(table)
    with pytest.raises(ValueError):
        build_dictionary(table)


def test_default_dictionary_is_built_once():
    assert default_dictionary() is default_dictionary()
    assert len(default_dictionary()) == len(HINDI_TO_ENGLISH)


def test_related_terms_uses_injected_dictionary():
    d = build_dictionary({"foo": ["bar"]})
    assert related_terms("foo", d) == ["bar"]
    assert related_terms("namak", d) == []


def test_related_terms_is_pure():
    first = related_terms("chai")
    second = related_terms("chai")
    assert first == second == ["tea", "chay", "chaya"]
    first.append("mutated")
    assert related_terms("chai") == ["tea", "chay", "chaya"]


def test_stats_counts():
    counts = dictionary_stats(build_dictionary({"a": ["x", "y"], "b": ["x"]}))
    assert counts == {"canonical_terms": 2, "equivalents": 3, "reverse_keys": 2, "all_terms": 4}


def test_export_writes_forward_table(tmp_path):
    path = tmp_path / "dict.json"
    text = export_dictionary(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw == json.loads(text)
    assert raw["namak"] == ["salt", "noon", "sendha"]
    assert len(raw) == len(HINDI_TO_ENGLISH)
