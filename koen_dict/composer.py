from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from koen_dict.errors import ValidationFailure
from koen_dict.models import NormalizedEntry

SEPARATOR = "----------"
PRONUNCIATION_PREFIX = f"{SEPARATOR}\nPronunciation:\nroma "


def build_sentence(prefix: str, components: Iterable[str]) -> str:
    """Space-join the non-empty components; '' if none survive, else prefix + sentence."""
    sentence = " ".join(c for c in components if c)
    return f"{prefix}{sentence}" if sentence else ""


def _as_entry(entry: Union[NormalizedEntry, Mapping[str, Any], None]) -> Optional[NormalizedEntry]:
    if entry is None or isinstance(entry, NormalizedEntry):
        return entry
    try:
        return NormalizedEntry.model_validate(dict(entry))
    except ValidationError as e:
        raise ValidationFailure(f"Unexpected normalized entry: {e}") from e


def compose(entry: Union[NormalizedEntry, Mapping[str, Any], None]) -> str:
    """
    Render a NormalizedEntry as the chat-style message:

        (TOPIK Elementary) ⭐⭐
        안녕하세요 安寧하세요
        1.hello 2.hi
        ----------
        Pronunciation:
        roma [annyeonghaseyo] [안녕하세요]
        ----------
        감탄사
        1.(인사말로) 안녕하십니까?
        ...

    Empty lines are dropped. None or an all-empty entry gives ''.
    """
    entry = _as_entry(entry)
    if entry is None or entry.is_empty():
        return ""

    parts = [
        build_sentence("", [entry.topik_level, entry.importance_level]),
        build_sentence("", [entry.title, entry.hanja]),
        build_sentence("", [entry.en_def]),
        build_sentence(PRONUNCIATION_PREFIX, [entry.pronun]),
        SEPARATOR,
        build_sentence("", [entry.part_speech]),
        build_sentence("", [entry.meanings]),
    ]
    return "\n".join(p for p in parts if p)
