from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Union

from pydantic import ValidationError

from koen_dict import naver
from koen_dict.errors import LookupFailure, ValidationFailure
from koen_dict.models import EntrySearchResult

logger = logging.getLogger(__name__)

SearchFetcher = Callable[[str], Any]


def entry_ids(search_result: Union[Mapping[str, Any], EntrySearchResult, None]) -> List[str]:
    """Entry ids of the WORD matches, in the order the search returned them."""
    if search_result is None:
        return []
    if not isinstance(search_result, EntrySearchResult):
        try:
            search_result = EntrySearchResult.model_validate(search_result)
        except ValidationError as e:
            raise ValidationFailure(f"Unexpected term search document: {e}") from e

    result_map = search_result.searchResultMap
    list_map = result_map.searchResultListMap if result_map else None
    words = list_map.WORD if list_map else None
    items = (words.items if words else None) or []
    return [item.entryId or "" for item in items]


def resolve(term: str, fetch: Optional[SearchFetcher] = None) -> str:
    """
    Look up `term` and return the entry id of its first WORD match.

    `term` should already be sanitised. An empty match list (or a first
    match without an id) raises LookupFailure; callers never get a None id.
    """
    fetch = fetch or naver.fetch_entry_id_list
    ids = entry_ids(fetch(term))
    if not ids or not ids[0]:
        logger.info("No dictionary entry for %r", term)
        raise LookupFailure(term)
    return ids[0]
