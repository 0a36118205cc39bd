import pytest

from services.additive_engine import (
    GENERIC_CODE,
    DetectedAdditive,
    find_e_numbers,
    iter_additives,
    match_additives,
)
from services.knowledge_base import Category, build_knowledge_base
from services.segmenter import normalize_ingredient


@pytest.mark.parametrize(
    "text,expected",
    [
        ("e621", ["E621"]),
        ("E 621", ["E621"]),
        ("renk e150d", ["E150D"]),
        ("e 150d", ["E150D"]),
        ("e1422", ["E1422"]),
        ("e9999", ["E9999"]),
        ("emülgatör e471'den", ["E471"]),
        ("e471den", ["E471"]),
        ("e 500gr", ["E500"]),
        ("e12345", []),
        ("e62", []),
        ("şeker", []),
        ("e330 ve e300 ve e330", ["E330", "E300"]),
    ],
)
def test_find_e_numbers(text, expected):
    assert find_e_numbers(text) == expected


def test_known_e_number_copies_record(kb):
    [additive] = match_additives(["e621"], kb)
    record = kb.get("E621")
    assert additive.code == "E621"
    assert additive.name == record.name
    assert additive.category is Category.AVOID
    assert additive.description == record.description
    assert additive.health_impact == record.health_concern


def test_unknown_e_number_is_caution(kb):
    [additive] = match_additives(["e9999"], kb)
    assert additive.code == "E9999"
    assert additive.category is Category.CAUTION
    assert additive.health_impact is None


def test_multiple_e_numbers_in_one_ingredient(kb):
    codes = [a.code for a in match_additives(["antioksidan e300 e330"], kb)]
    assert codes[:2] == ["E300", "E330"]


def test_alias_match_is_substring(kb):
    [additive] = match_additives(["monosodyum glutamat msg"], kb)
    assert additive.code == "E621"


def test_alias_skipped_when_e_number_already_found(fake_kb):
    additives = match_additives(["e300", "ascorbic acid"], fake_kb)
    assert [a.code for a in additives] == ["E300"]


def test_e_number_pass_runs_before_alias_pass(fake_kb):
    additives = match_additives(["bad dye", "e300"], fake_kb)
    assert [a.code for a in additives] == ["E300", "E100"]


def test_generic_keyword(kb):
    [additive] = match_additives(["koruyucu"], kb)
    assert additive.code == GENERIC_CODE
    assert additive.category is Category.CAUTION
    assert "koruyucu" in additive.name


def test_generic_keyword_matches_without_turkish_dotless_i(kb):
    [additive] = match_additives(["tatlandirici"], kb)
    assert additive.code == GENERIC_CODE
    assert "tatlandırıcı" in additive.name


def test_keyword_suppressed_when_name_mentions_it():
    kb = build_knowledge_base(
        [{"code": "E150d", "name": "Caramel Colour", "category": "caution"}],
        {},
        ["colour"],
    )
    additives = match_additives(["e150d", "caramel colour"], kb)
    assert [a.code for a in additives] == ["E150D"]


def test_keyword_kept_when_name_does_not_mention_it(fake_kb):
    additives = match_additives(["colour e100"], fake_kb)
    assert [a.code for a in additives] == ["E100", GENERIC_CODE]
    assert additives[1].name.endswith("colour")


def test_same_keyword_emitted_once(kb):
    additives = match_additives(["aroma", "doğal aroma", "aroma verici"], kb)
    assert [a.code for a in additives] == [GENERIC_CODE]


def test_distinct_keywords_emit_distinct_generics(kb):
    additives = match_additives(["aroma", "renklendirici"], kb)
    assert [a.code for a in additives] == [GENERIC_CODE, GENERIC_CODE]
    assert additives[0].name != additives[1].name


def test_specific_and_generic_coexist(kb):
    additives = match_additives(["koruyucu e211"], kb)
    assert [a.code for a in additives] == ["E211", GENERIC_CODE]


def test_no_duplicate_codes(kb):
    ingredients = ["e621", "msg", "monosodyum glutamat", "e 621", "aroma", "aroma"]
    additives = match_additives(ingredients, kb)
    specific = [a.code for a in additives if a.code != GENERIC_CODE]
    assert len(specific) == len(set(specific))
    generic = [a.name for a in additives if a.code == GENERIC_CODE]
    assert len(generic) == len(set(generic))


def test_unknown_codes_never_safe(kb):
    additives = match_additives(["e1234", "e9876x", "aroma"], kb)
    for additive in additives:
        if additive.code not in kb:
            assert additive.category is Category.CAUTION


def test_deterministic(kb):
    ingredients = ["su", "e330", "msg", "aroma", "e9999"]
    assert match_additives(ingredients, kb) == match_additives(ingredients, kb)


def test_empty(kb):
    assert match_additives([], kb) == []


def test_iter_additives_is_lazy(kb):
    gen = iter_additives(["e621", "e330"], kb)
    assert next(gen).code == "E621"


def test_to_dict():
    additive = DetectedAdditive.generic("aroma")
    assert additive.to_dict() == {
        "code": "GENERIC",
        "name": "Genel Katkı Maddesi: aroma",
        "category": "caution",
        "description": additive.description,
        "health_impact": None,
    }


@pytest.mark.parametrize("text", ["serving size 100g", "1 tane 500g", "pişirme 1000w"])
def test_e_inside_a_word_is_not_an_e_number(text):
    assert find_e_numbers(text) == []


def test_e_number_glued_to_a_bracket_still_found(kb):
    additives = match_additives([normalize_ingredient("Renklendirici(E150d)")], kb)
    assert additives[0].code == "E150D"
