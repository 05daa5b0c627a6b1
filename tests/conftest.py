import json

import pytest


def make_search_result(*entry_ids):
    return {
        "searchResultMap": {
            "searchResultListMap": {
                "WORD": {"items": [{"entryId": eid} for eid in entry_ids]},
            }
        }
    }


def _meaning(part, show_mean, en, ko, example):
    return {
        "part": {"part_ko_name": part},
        "show_mean": show_mean,
        "description_json": json.dumps({"en": en, "ko": ko}, ensure_ascii=False),
        "examples": [{"origin_example": example}],
    }


@pytest.fixture
def annyeong_record():
    return {
        "entry": {
            "entry_level": "TOPIK 1",
            "entry_importance": 2,
            "members": [
                {
                    "entry_name": "안녕하세요",
                    "origin_language": "安寧하세요",
                    "prons": [
                        {"show_pron_symbol": "annyeonghaseyo"},
                        {"show_pron_symbol": "안녕하세요"},
                    ],
                }
            ],
            "primary_mean": "hello|||hi",
            "means": [
                _meaning(
                    "감탄사",
                    "(인사말로) 안녕하십니까?",
                    "Hello (formal greeting)",
                    "만났을 때 하는 인사말",
                    "안녕하세요, 반갑습니다.",
                )
            ],
        }
    }


@pytest.fixture
def gongbu_record():
    return {
        "entry": {
            "entry_level": "TOPIK 2",
            "entry_importance": 3,
            "members": [
                {
                    "entry_name": "공부하다",
                    "origin_language": "工夫하다",
                    "prons": [
                        {"show_pron_symbol": "gongbuhada"},
                        {"show_pron_symbol": "공부하다"},
                    ],
                }
            ],
            "primary_mean": "to study|||to learn",
            "means": [
                _meaning(
                    "동사",
                    "학문이나 기술 등을 배우다",
                    "To study or learn subjects, skills, etc.",
                    "지식이나 기능을 익히려고 노력하다",
                    "한국어를 열심히 공부하고 있어요.",
                ),
                _meaning(
                    "동사",
                    "일에 대해 조사하거나 연구하다",
                    "To research or investigate something",
                    "어떤 것을 조사하거나 연구하다",
                    "그 문제에 대해 더 공부해 보겠습니다.",
                ),
            ],
        }
    }


ANNYEONG_MEANINGS = (
    "1.(인사말로) 안녕하십니까?\n"
    "Hello (formal greeting)\n"
    "만났을 때 하는 인사말\n"
    "|| 안녕하세요, 반갑습니다."
)
