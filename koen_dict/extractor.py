"""
Turn a raw Naver entry document into a NormalizedEntry.

Structural absence (no members, no meanings, missing fields, nulls) is normal
and becomes "". Values outside their domain are not: an importance score
outside 0-3, or a description blob that isn't a JSON object, raises
ValidationFailure.

Only the first member / first meaning supplies the title, Hanja,
pronunciation and part of speech. Entries with several members are not merged.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from koen_dict.errors import ValidationFailure
from koen_dict.models import Entry, MeaningItem, Member, NormalizedEntry, RawEntryRecord

TOPIK_ELEMENTARY = "(TOPIK Elementary)"
TOPIK_INTERMEDIATE = "(TOPIK Intermediate)"

STAR = "⭐"
MIN_IMPORTANCE = 0
MAX_IMPORTANCE = 3

EN_DEF_DELIMITER = "|||"
EXAMPLE_PREFIX = "|| "


def _first(items: Optional[List[Any]]) -> Optional[Any]:
    return items[0] if items else None


def _first_member(entry: Entry) -> Member:
    return _first(entry.members) or Member()


def topik_label(entry: Entry) -> str:
    """'1' anywhere wins over '2', so 'TOPIK 1-2' is elementary."""
    level = entry.entry_level or ""
    if "1" in level:
        return TOPIK_ELEMENTARY
    if "2" in level:
        return TOPIK_INTERMEDIATE
    return ""


def importance_label(entry: Entry) -> str:
    stars = entry.entry_importance or 0
    if stars < MIN_IMPORTANCE or stars > MAX_IMPORTANCE:
        raise ValidationFailure(
            f"Importance value out of range: {stars} (expected {MIN_IMPORTANCE}-{MAX_IMPORTANCE})"
        )
    return STAR * stars


def title(entry: Entry) -> str:
    return _first_member(entry).entry_name or ""


def hanja(entry: Entry) -> str:
    return _first_member(entry).origin_language or ""


def en_definition(entry: Entry) -> str:
    """
    Number the |||-separated primary meanings.
    Example:
      "hello|||hi" -> "1.hello 2.hi"
      ""           -> ""
    """
    primary = entry.primary_mean or ""
    if not primary:
        return ""
    parts = primary.split(EN_DEF_DELIMITER)
    return " ".join(f"{i}.{part}" for i, part in enumerate(parts, start=1))


def pronunciation(entry: Entry) -> str:
    """'[romanized] [hangul]' from the first two non-empty symbols, or ''."""
    symbols = [p.show_pron_symbol for p in (_first_member(entry).prons or []) if p.show_pron_symbol]
    if len(symbols) < 2:
        return ""
    return f"[{symbols[0]}] [{symbols[1]}]"


def part_of_speech(entry: Entry) -> str:
    # Assumes every meaning of a word shares the first meaning's part of speech.
    first = _first(entry.means)
    if first is None or first.part is None:
        return ""
    return first.part.part_ko_name or ""


def parse_description(blob: Optional[str]) -> Dict[str, Any]:
    """Decode a meaning's description_json. Empty/absent -> {}."""
    if not blob:
        return {}
    try:
        desc = json.loads(blob)
    except json.JSONDecodeError as e:
        raise ValidationFailure(f"Malformed description_json: {e}") from e
    if desc is None:
        return {}
    if not isinstance(desc, dict):
        raise ValidationFailure(f"description_json is not an object: {type(desc).__name__}")
    return desc


def _gloss(desc: Mapping[str, Any], key: str) -> str:
    v = desc.get(key)
    return v if isinstance(v, str) else ""


def meaning_block(item: MeaningItem, number: int) -> str:
    desc = parse_description(item.description_json)
    example = _first(item.examples)
    example_text = (example.origin_example or "") if example else ""

    lines = [f"{number}.{item.show_mean or ''}"]
    en = _gloss(desc, "en")
    ko = _gloss(desc, "ko")
    if en:
        lines.append(en)
    if ko:
        lines.append(ko)
    if example_text:
        lines.append(f"{EXAMPLE_PREFIX}{example_text}")
    return "\n".join(lines)


def meanings(entry: Entry) -> str:
    blocks = [meaning_block(item, i) for i, item in enumerate(entry.means or [], start=1)]
    return "\n\n".join(blocks)


def to_record(record: Union[Mapping[str, Any], RawEntryRecord, None]) -> RawEntryRecord:
    if isinstance(record, RawEntryRecord):
        return record
    try:
        return RawEntryRecord.model_validate(record or {})
    except ValidationError as e:
        raise ValidationFailure(f"Unexpected entry document: {e}") from e


def extract(record: Union[Mapping[str, Any], RawEntryRecord, None]) -> NormalizedEntry:
    entry = to_record(record).entry or Entry()
    return NormalizedEntry(
        topik_level=topik_label(entry),
        importance_level=importance_label(entry),
        title=title(entry),
        hanja=hanja(entry),
        en_def=en_definition(entry),
        pronun=pronunciation(entry),
        part_speech=part_of_speech(entry),
        meanings=meanings(entry),
    )
