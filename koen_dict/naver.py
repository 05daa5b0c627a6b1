"""
HTTP access to the Naver Korean-English dictionary.

Two JSON endpoints are used:
  - term search:  term -> {"searchResultMap": {... "WORD": {"items": [{"entryId": ...}]}}}
  - entry fetch:  entryId -> {"entry": {...}}

Both are plain GETs that only need a dictionary-site Referer header.
Failures are re-raised as TransportFailure; nothing here retries or caches.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict
from urllib.parse import urlencode

import requests

from koen_dict import config
from koen_dict.errors import TransportFailure

logger = logging.getLogger(__name__)

# Latin letters and precomposed Hangul syllables only.
SANITISE_RE = re.compile(r"[^a-zA-Z가-힣]")


def sanitise(term: str) -> str:
    """Strip everything that isn't a letter, e.g. '학교123!' -> '학교'."""
    return SANITISE_RE.sub("", term or "")


def request_headers() -> Dict[str, str]:
    return {"Referer": config.NAVER_REFERER}


def entry_search_params(term: str) -> Dict[str, str]:
    return {"query": term, "m": "mobile", "range": "entrySearch"}


def entry_record_params(entry_id: str) -> Dict[str, str]:
    return {"entryId": entry_id}


def entry_search_url(term: str) -> str:
    """Term-search URL, e.g. .../api3/koen/search?query=%EC%82%AC%EA%B3%BC&m=mobile&range=entrySearch"""
    return f"{config.NAVER_SEARCH_URL}?{urlencode(entry_search_params(term))}"


def entry_record_url(entry_id: str) -> str:
    return f"{config.NAVER_ENTRY_URL}?{urlencode(entry_record_params(entry_id))}"


def fetch_json(url: str) -> Any:
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers=request_headers(), timeout=config.REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise TransportFailure(f"Request to {url} failed: {e}") from e

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Non-JSON response from %s", url)
        raise TransportFailure(f"Response from {url} is not valid JSON") from e


def fetch_entry_id_list(term: str) -> Any:
    """Raw term-search document for an already sanitised term."""
    return fetch_json(entry_search_url(term))


def fetch_entry_record(entry_id: str) -> Any:
    """Raw entry document for one entry id."""
    return fetch_json(entry_record_url(entry_id))
