"""Tests for turning raw entry documents into NormalizedEntry."""

import pytest
from pydantic import ValidationError

from koen_dict.errors import ValidationFailure
from koen_dict.extractor import (
    en_definition,
    extract,
    importance_label,
    meaning_block,
    meanings,
    parse_description,
    pronunciation,
    topik_label,
)
from koen_dict.models import Entry, MeaningItem, NormalizedEntry

from conftest import ANNYEONG_MEANINGS


def _entry(**fields):
    return Entry.model_validate(fields)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("TOPIK 1", "(TOPIK Elementary)"),
        ("1", "(TOPIK Elementary)"),
        ("TOPIK 2", "(TOPIK Intermediate)"),
        ("TOPIK 1-2", "(TOPIK Elementary)"),
        ("2 and 1", "(TOPIK Elementary)"),
        ("Advanced", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_topik_label(level, expected):
    assert topik_label(_entry(entry_level=level)) == expected


@pytest.mark.parametrize("score", [0, 1, 2, 3])
def test_importance_label_has_one_star_per_point(score):
    label = importance_label(_entry(entry_importance=score))
    assert label == "⭐" * score
    assert set(label) <= {"⭐"}


def test_importance_label_defaults_to_zero():
    assert importance_label(_entry()) == ""
    assert importance_label(_entry(entry_importance=None)) == ""


@pytest.mark.parametrize("score", [-1, 4, 100])
def test_importance_out_of_range_is_rejected(score):
    with pytest.raises(ValidationFailure, match="out of range"):
        importance_label(_entry(entry_importance=score))


def test_extract_rejects_out_of_range_importance(annyeong_record):
    annyeong_record["entry"]["entry_importance"] = 4
    with pytest.raises(ValidationFailure):
        extract(annyeong_record)


def test_extract_rejects_non_numeric_importance(annyeong_record):
    annyeong_record["entry"]["entry_importance"] = "many"
    with pytest.raises(ValidationFailure):
        extract(annyeong_record)


@pytest.mark.parametrize(
    "primary, expected",
    [
        ("", ""),
        (None, ""),
        ("hello", "1.hello"),
        ("a|||b|||c", "1.a 2.b 3.c"),
    ],
)
def test_en_definition(primary, expected):
    assert en_definition(_entry(primary_mean=primary)) == expected


@pytest.mark.parametrize(
    "symbols, expected",
    [
        ([], ""),
        (["annyeonghaseyo"], ""),
        (["annyeonghaseyo", ""], ""),
        (["a", "b"], "[a] [b]"),
        (["a", "b", "c"], "[a] [b]"),
        (["", "a", None, "b"], "[a] [b]"),
    ],
)
def test_pronunciation(symbols, expected):
    entry = _entry(members=[{"prons": [{"show_pron_symbol": s} for s in symbols]}])
    assert pronunciation(entry) == expected


def test_pronunciation_without_members():
    assert pronunciation(_entry()) == ""
    assert pronunciation(_entry(members=[])) == ""
    assert pronunciation(_entry(members=[{"entry_name": "x"}])) == ""


def test_parse_description():
    assert parse_description('{"en": "hi", "ko": "안녕"}') == {"en": "hi", "ko": "안녕"}
    assert parse_description("") == {}
    assert parse_description(None) == {}
    assert parse_description("null") == {}


@pytest.mark.parametrize("blob", ["{not json", '["en"]', '"just text"'])
def test_parse_description_rejects_non_objects(blob):
    with pytest.raises(ValidationFailure):
        parse_description(blob)


def test_meaning_block_with_all_lines(annyeong_record):
    item = MeaningItem.model_validate(annyeong_record["entry"]["means"][0])
    assert meaning_block(item, 1) == ANNYEONG_MEANINGS


def test_meaning_block_omits_missing_lines():
    item = MeaningItem.model_validate(
        {"show_mean": "뜻", "description_json": '{"ko": "설명"}', "examples": []}
    )
    assert meaning_block(item, 3) == "3.뜻\n설명"

    bare = MeaningItem.model_validate({"show_mean": "뜻"})
    assert meaning_block(bare, 1) == "1.뜻"


def test_meanings_are_numbered_and_blank_line_separated(gongbu_record):
    result = meanings(Entry.model_validate(gongbu_record["entry"]))
    blocks = result.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("1.학문이나 기술 등을 배우다\n")
    assert blocks[1].startswith("2.일에 대해 조사하거나 연구하다\n")
    assert blocks[1].endswith("|| 그 문제에 대해 더 공부해 보겠습니다.")


def test_malformed_description_fails_extraction(gongbu_record):
    gongbu_record["entry"]["means"][1]["description_json"] = "{en: broken"
    with pytest.raises(ValidationFailure, match="description_json"):
        extract(gongbu_record)


def test_extract_annyeong(annyeong_record):
    assert extract(annyeong_record) == NormalizedEntry(
        TopikLevel="(TOPIK Elementary)",
        ImportanceLevel="⭐⭐",
        Title="안녕하세요",
        Hanja="安寧하세요",
        EnDef="1.hello 2.hi",
        Pronun="[annyeonghaseyo] [안녕하세요]",
        PartSpeech="감탄사",
        Meanings=ANNYEONG_MEANINGS,
    )


def test_extract_gongbu(gongbu_record):
    result = extract(gongbu_record)
    assert result.topik_level == "(TOPIK Intermediate)"
    assert result.importance_level == "⭐⭐⭐"
    assert result.title == "공부하다"
    assert result.hanja == "工夫하다"
    assert result.en_def == "1.to study 2.to learn"
    assert result.pronun == "[gongbuhada] [공부하다]"
    assert result.part_speech == "동사"
    assert "한국어를 열심히 공부하고 있어요." in result.meanings


def test_extract_empty_documents_default_to_empty_strings():
    for doc in (None, {}, {"entry": None}, {"entry": {}}, {"entry": {"members": [], "means": []}}):
        result = extract(doc)
        assert result.is_empty()
        assert all(v == "" for v in result.model_dump(by_alias=True).values())


def test_extract_uses_first_member_only():
    doc = {
        "entry": {
            "members": [
                {"entry_name": "눈", "origin_language": ""},
                {"entry_name": "눈2", "origin_language": "眼"},
            ],
            "means": [
                {"part": {"part_ko_name": "명사"}, "show_mean": "eye"},
                {"part": {"part_ko_name": "동사"}, "show_mean": "snow"},
            ],
        }
    }
    result = extract(doc)
    assert result.title == "눈"
    assert result.hanja == ""
    assert result.part_speech == "명사"


def test_normalized_entry_is_frozen(annyeong_record):
    result = extract(annyeong_record)
    with pytest.raises(ValidationError):
        result.title = "other"


def test_normalized_entry_serializes_with_service_field_names(annyeong_record):
    dumped = extract(annyeong_record).model_dump(by_alias=True)
    assert list(dumped) == [
        "TopikLevel",
        "ImportanceLevel",
        "Title",
        "Hanja",
        "EnDef",
        "Pronun",
        "PartSpeech",
        "Meanings",
    ]
