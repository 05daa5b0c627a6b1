from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def _parse_csv_env(name: str) -> list[str]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


# Naver Korean-English dictionary endpoints.
NAVER_SEARCH_URL = os.getenv("NAVER_SEARCH_URL", "https://korean.dict.naver.com/api3/koen/search")
NAVER_ENTRY_URL = os.getenv("NAVER_ENTRY_URL", "https://korean.dict.naver.com/api/platform/koen/entry")
# The API rejects requests that don't look like they come from the dictionary site.
NAVER_REFERER = os.getenv("NAVER_REFERER", "https://korean.dict.naver.com/koendict/")

REQUEST_TIMEOUT = _float_env("REQUEST_TIMEOUT", 30.0)

# CORS:
# - Default to local dev origins. For production, set CORS_ORIGINS to your site origins.
#   Example:
#     CORS_ORIGINS=https://example.github.io,https://yourdomain.com
DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://127.0.0.1",
    "http://127.0.0.1:3000",
]
CORS_ORIGINS = _parse_csv_env("CORS_ORIGINS") or DEFAULT_CORS_ORIGINS

HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 8080)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
