from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Term search document:
#   {"searchResultMap": {"searchResultListMap": {"WORD": {"items": [{"entryId": "..."}]}}}}
# Every level may be missing; a missing level means "no matches".
# ---------------------------------------------------------------------------

class WordItem(BaseModel):
    entryId: Optional[str] = None

    @field_validator("entryId", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v) if isinstance(v, int) else v


class WordResults(BaseModel):
    items: Optional[List[WordItem]] = None


class SearchResultListMap(BaseModel):
    WORD: Optional[WordResults] = None


class SearchResultMap(BaseModel):
    searchResultListMap: Optional[SearchResultListMap] = None


class EntrySearchResult(BaseModel):
    searchResultMap: Optional[SearchResultMap] = None


# ---------------------------------------------------------------------------
# Entry document: {"entry": {...}} as returned by the platform entry endpoint.
# ---------------------------------------------------------------------------

class Pronunciation(BaseModel):
    show_pron_symbol: Optional[str] = None


class Member(BaseModel):
    entry_name: Optional[str] = None
    origin_language: Optional[str] = None  # Hanja, when the word has one
    prons: Optional[List[Pronunciation]] = None


class PartOfSpeech(BaseModel):
    part_ko_name: Optional[str] = None


class Example(BaseModel):
    origin_example: Optional[str] = None


class MeaningItem(BaseModel):
    show_mean: Optional[str] = None
    description_json: Optional[str] = None  # JSON-encoded {"en": ..., "ko": ...}
    part: Optional[PartOfSpeech] = None
    examples: Optional[List[Example]] = None


class Entry(BaseModel):
    entry_level: Optional[str] = None
    entry_importance: Optional[int] = None  # 0-3 stars
    members: Optional[List[Member]] = None
    primary_mean: Optional[str] = None  # "def1|||def2|||..."
    means: Optional[List[MeaningItem]] = None

    @field_validator("entry_level", mode="before")
    @classmethod
    def _level_as_str(cls, v):
        return str(v) if isinstance(v, int) else v


class RawEntryRecord(BaseModel):
    entry: Optional[Entry] = None


# ---------------------------------------------------------------------------
# Normalized entry: eight flat strings, "" when the source had nothing.
# Serialized with the field names the service has always returned.
# ---------------------------------------------------------------------------

class NormalizedEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    topik_level: str = Field("", alias="TopikLevel")
    importance_level: str = Field("", alias="ImportanceLevel")
    title: str = Field("", alias="Title")
    hanja: str = Field("", alias="Hanja")
    en_def: str = Field("", alias="EnDef")
    pronun: str = Field("", alias="Pronun")
    part_speech: str = Field("", alias="PartSpeech")
    meanings: str = Field("", alias="Meanings")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v

    def is_empty(self) -> bool:
        return not any(self.model_dump().values())
