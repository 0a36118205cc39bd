import pytest

from services.segmenter import (
    clean_fragments,
    extract_ingredients,
    fold,
    lower_tr,
    normalize_ingredient,
    segment,
)


def test_text_after_marker():
    text = "ÜRÜN ADI: Gofret\nİçindekiler: Buğday unu, şeker, bitkisel yağ; kakao"
    assert extract_ingredients(text) == ["Buğday unu", "şeker", "bitkisel yağ", "kakao"]


def test_marker_in_english():
    assert extract_ingredients("Chips. INGREDIENTS: potatoes, salt") == ["potatoes", "salt"]


def test_longer_marker_wins_over_its_prefix():
    assert extract_ingredients("İçerikler: su, tuz") == ["su", "tuz"]


def test_marker_priority_is_fixed_not_positional():
    # "ingredients" appears first in the text, but Turkish markers are checked first
    text = "Ingredients listed below. İçindekiler: su, tuz"
    assert extract_ingredients(text) == ["su", "tuz"]


def test_no_marker_uses_whole_text():
    assert extract_ingredients("Su, Tuz, Karbondioksit") == ["Su", "Tuz", "Karbondioksit"]


def test_splits_on_newline_and_colon():
    assert extract_ingredients("su\ntuz: şeker") == ["su", "tuz", "şeker"]


def test_empty_input():
    assert extract_ingredients("") == []
    assert extract_ingredients("   \n ") == []


def test_only_separators():
    assert extract_ingredients(",,;;::") == []


def test_long_fragments_dropped():
    long_item = "x" * 100
    assert extract_ingredients(f"su, {long_item}, {'y' * 99}") == ["su", "y" * 99]


def test_cap_drops_extra_items():
    text = ", ".join(f"item{i}" for i in range(80))
    items = extract_ingredients(text)
    assert len(items) == 50
    assert items[0] == "item0"
    assert items[-1] == "item49"


def test_custom_limits():
    assert extract_ingredients("a, bb, ccc", max_items=2, max_length=3) == ["a", "bb"]


def test_segment_alias():
    assert segment is extract_ingredients


def test_non_string_rejected():
    with pytest.raises(TypeError):
        extract_ingredients(None)
    with pytest.raises(TypeError):
        extract_ingredients(b"su, tuz")


def test_normalize_ingredient():
    assert normalize_ingredient("  Monosodyum   Glutamat (MSG) ") == "monosodyum glutamat msg"
    assert normalize_ingredient("Renk [E150d]") == "renk e150d"
    assert normalize_ingredient("İÇİNDEKİLER") == "içindekiler"


def test_normalize_rejects_non_string():
    with pytest.raises(TypeError):
        normalize_ingredient(42)


def test_turkish_case_helpers():
    assert lower_tr("İZMİR") == "izmir"
    assert fold("TATLANDIRICI") == "tatlandirici"
    assert fold("tatlandırıcı") == "tatlandirici"


def test_clean_fragments():
    assert clean_fragments(["  su ", "", "x" * 100, "tuz"]) == ["su", "tuz"]
    assert clean_fragments([f"i{n}" for n in range(60)], max_items=3) == ["i0", "i1", "i2"]


def test_clean_fragments_rejects_non_string():
    with pytest.raises(TypeError):
        clean_fragments(["su", None])


def test_marker_after_dotted_capital_i_slices_correctly():
    text = "İZMİR GIDA İçindekiler: su, tuz"
    assert extract_ingredients(text) == ["su", "tuz"]


def test_brackets_become_word_breaks():
    assert normalize_ingredient("renk(E150d)") == "renk e150d"
