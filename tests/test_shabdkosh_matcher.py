from types import SimpleNamespace

import pytest

from shabdkosh.dictionary import build_dictionary
from shabdkosh.matcher import filter_products, matches_product

TATA_SALT = {"name": "Tata Salt", "aliases": []}
RED_LABEL = {"name": "Red Label Tea", "aliases": ["chai", "tea", "chai patti"]}


@pytest.mark.parametrize("query", ["salt", "SALT", "ta s", "Tata Salt"])
def test_name_substring_matches(query):
    assert matches_product(query, TATA_SALT)


@pytest.mark.parametrize("query", ["chai", "PATTI", "ai pa"])
def test_alias_substring_matches(query):
    assert matches_product(query, {"name": "Brooke Bond", "aliases": ["Chai Patti"]})


def test_alias_hit():
    assert matches_product("chai", RED_LABEL)


def test_dictionary_bridges_hindi_to_english():
    assert matches_product("namak", TATA_SALT)


def test_dictionary_bridges_english_to_hindi():
    assert matches_product("salt", {"name": "Namak Pack", "aliases": []})
    assert matches_product("milk", {"name": "Mother Dairy", "aliases": ["doodh"]})


def test_unrelated_query_does_not_match():
    assert not matches_product("sabun", TATA_SALT)


def test_multi_word_query_is_not_expanded_per_token():
    # whole query is not a dictionary key, so only substring checks apply
    assert not matches_product("namak chai", TATA_SALT)


def test_whole_query_dictionary_key_is_expanded():
    # "red chilli" is itself an equivalent, so the whole string reaches "lalmirch"
    assert matches_product("red chilli", {"name": "Lalmirch Powder", "aliases": []})
    assert not matches_product("red chilli", {"name": "Kashmiri Lal Mirch", "aliases": []})


def test_empty_query_matches_everything():
    assert matches_product("", TATA_SALT)


def test_object_with_attributes():
    product = SimpleNamespace(name="Tata Salt", aliases=["iodine salt"])
    assert matches_product("namak", product)
    assert matches_product("iodine", product)


def test_missing_aliases_are_treated_as_empty():
    assert matches_product("namak", {"name": "Tata Salt"})
    assert matches_product("namak", {"name": "Tata Salt", "aliases": None})


def test_injected_dictionary():
    d = build_dictionary({"foo": ["bar"]})
    assert matches_product("foo", {"name": "Bar Soap", "aliases": []}, d)
    assert not matches_product("namak", TATA_SALT, d)


def test_filter_products_blank_query_returns_all():
    products = [TATA_SALT, RED_LABEL]
    assert filter_products("", products) == products
    assert filter_products("  ", products, limit=1) == [TATA_SALT]


def test_filter_products_keeps_order_and_limit():
    products = [
        {"name": "Tata Salt", "aliases": []},
        {"name": "Red Label Tea", "aliases": ["chai"]},
        {"name": "Sendha Namak", "aliases": []},
    ]
    assert filter_products("namak", products) == [products[0], products[2]]
    assert filter_products("namak", products, limit=1) == [products[0]]
    assert filter_products("sabun", products) == []
