from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from koen_dict import config, pipeline
from koen_dict.errors import LookupFailure, TransportFailure, ValidationFailure
from koen_dict.models import NormalizedEntry

logger = logging.getLogger(__name__)

app = FastAPI(title="Naver Korean-English dictionary")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(LookupFailure)
async def lookup_failure_handler(request: Request, exc: LookupFailure):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ValidationFailure)
@app.exception_handler(TransportFailure)
async def upstream_failure_handler(request: Request, exc: Exception):
    logger.warning("Upstream failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def require_word(word: Optional[str]) -> str:
    if not word:
        raise HTTPException(400, detail="Word parameter is required")
    return word


@app.get("/")
def root():
    return {"status": "Welcome to the Naver dictionary API!"}


@app.get("/health")
def health():
    return {
        "ok": True,
        "search_url": config.NAVER_SEARCH_URL,
        "entry_url": config.NAVER_ENTRY_URL,
        "timeout": config.REQUEST_TIMEOUT,
    }


@app.get("/get", response_model=NormalizedEntry)
def get_word(word: Optional[str] = Query(None)):
    return pipeline.get_entry(require_word(word))


@app.get("/get/entryinfo")
def get_entry_info(word: Optional[str] = Query(None)):
    """Raw term-search document, as Naver returned it."""
    return pipeline.get_entry_info_raw(require_word(word))


@app.get("/get/searchinfo")
def get_search_info(word: Optional[str] = Query(None)):
    """Raw entry document for the first match, as Naver returned it."""
    return pipeline.get_search_info_raw(require_word(word))


@app.get("/get/message")
def get_message(word: Optional[str] = Query(None)) -> str:
    return pipeline.get_message(require_word(word))


def serve() -> None:
    import uvicorn

    config.configure_logging()
    logger.info("Serving on %s:%s", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    serve()
