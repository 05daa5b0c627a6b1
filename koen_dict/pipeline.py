"""
End-to-end lookups: term -> entry id -> entry record -> NormalizedEntry -> message.

Each call makes at most two sequential requests (term search, then entry
fetch). Errors from either propagate unchanged. The fetchers can be swapped
per call; by default the Naver transport in koen_dict.naver is used.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

from koen_dict import naver
from koen_dict.composer import compose
from koen_dict.extractor import extract
from koen_dict.models import NormalizedEntry, RawEntryRecord
from koen_dict.resolver import resolve

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Any]


def get_entry_info_raw(term: str, fetch_entry_id_list: Optional[Fetcher] = None) -> Any:
    fetch_entry_id_list = fetch_entry_id_list or naver.fetch_entry_id_list
    return fetch_entry_id_list(naver.sanitise(term))


def get_search_info_raw(
    term: str,
    fetch_entry_id_list: Optional[Fetcher] = None,
    fetch_entry_record: Optional[Fetcher] = None,
) -> Any:
    fetch_entry_record = fetch_entry_record or naver.fetch_entry_record
    entry_id = resolve(
        naver.sanitise(term),
        fetch=fetch_entry_id_list or naver.fetch_entry_id_list,
    )
    logger.debug("Resolved %r to entry %s", term, entry_id)
    return fetch_entry_record(entry_id)


def get_entry(
    term: str,
    fetch_entry_id_list: Optional[Fetcher] = None,
    fetch_entry_record: Optional[Fetcher] = None,
) -> NormalizedEntry:
    record = get_search_info_raw(term, fetch_entry_id_list, fetch_entry_record)
    return extract(record)


def build_message(record: Union[Mapping[str, Any], RawEntryRecord, None]) -> str:
    return compose(extract(record))


def get_message(
    term: str,
    fetch_entry_id_list: Optional[Fetcher] = None,
    fetch_entry_record: Optional[Fetcher] = None,
) -> str:
    return compose(get_entry(term, fetch_entry_id_list, fetch_entry_record))
