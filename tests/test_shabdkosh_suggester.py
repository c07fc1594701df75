from shabdkosh.dictionary import build_dictionary
from shabdkosh.suggester import MAX_SUGGESTIONS, get_suggested_aliases


def test_suggest_hindi_for_english_name():
    suggestions = get_suggested_aliases("Tata Salt")
    assert suggestions == ["namak", "noon", "tata", "sendha"]
    assert "namak" in suggestions
    assert len(suggestions) <= MAX_SUGGESTIONS


def test_suggest_skips_terms_already_in_name():
    assert "salt" not in get_suggested_aliases("Tata Salt")


def test_suggest_english_for_hindi_token():
    assert get_suggested_aliases("Amul Doodh") == ["milk", "dudh"]


def test_suggest_blank_name():
    assert get_suggested_aliases("") == []
    assert get_suggested_aliases("   ") == []


def test_suggest_unknown_name():
    assert get_suggested_aliases("Maggi Noodles") == []


def test_suggest_is_capped_at_eight():
    name = "Chai Namak Haldi Jeera Atta Dal"
    suggestions = get_suggested_aliases(name)
    assert len(suggestions) == MAX_SUGGESTIONS
    assert len(set(suggestions)) == len(suggestions)


def test_suggest_custom_limit():
    assert get_suggested_aliases("Tata Salt", limit=2) == ["namak", "noon"]


def test_suggest_substring_not_word_boundary():
    # "aata" (equivalent of atta) matches inside "paata"
    assert "atta" in get_suggested_aliases("Paata Special")


def test_suggest_is_deterministic():
    name = "Fortune Mustard Oil"
    assert get_suggested_aliases(name) == get_suggested_aliases(name)


def test_suggest_with_injected_dictionary():
    d = build_dictionary({"namak": ["salt"]})
    assert get_suggested_aliases("Tata Salt", d) == ["namak"]
