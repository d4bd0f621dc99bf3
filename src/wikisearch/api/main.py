"""FastAPI entrypoint for search and health endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wikisearch import __version__
from wikisearch.api.cors import CORSHeadersMiddleware
from wikisearch.config import Settings
from wikisearch.ingest.pipeline import build_corpus_index
from wikisearch.obs.timing import Timer
from wikisearch.retrieval.scorer import QueryScorer
from wikisearch.types import CorpusIndex, SearchResult

logger = logging.getLogger(__name__)


class SearchRequest(BaseModel):
    word: str


router = APIRouter()


def _scorer(request: Request) -> QueryScorer:
    return request.app.state.scorer


def _serialize(results: list[SearchResult]) -> list[dict[str, Any]]:
    return [result.to_payload() for result in results]


def _search_response(scorer: QueryScorer, query: str) -> Response:
    with Timer() as timer:
        results = scorer.search(query)
    logger.info("search %r -> %d hits (%.1f ms)", query, len(results), timer.elapsed_ms)

    try:
        return JSONResponse(content=_serialize(results))
    except (TypeError, ValueError) as exc:
        logger.error("Failed to encode results for %r: %s", query, exc, exc_info=True)
        return JSONResponse(
            status_code=500, content={"detail": "Error creating JSON response"}
        )


@router.post("/search")
def search_post(payload: SearchRequest, request: Request) -> Response:
    return _search_response(_scorer(request), payload.word)


@router.get("/search")
def search_get(request: Request, word: str = Query(...)) -> Response:
    return _search_response(_scorer(request), word)


@router.options("/search")
def search_options() -> Response:
    return Response(status_code=200)


@router.get("/health")
def health(request: Request) -> dict[str, Any]:
    corpus = _scorer(request).corpus
    return {
        "status": "ok",
        "documents": len(corpus.documents),
        "vocabulary": len(corpus.dictionary),
        "categories": corpus.category_counts(),
    }


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request"})


def create_app(
    settings: Settings | None = None,
    corpus_index: CorpusIndex | None = None,
) -> FastAPI:
    """Create the API app.

    The corpus index is built in the lifespan hook unless one is supplied, so
    a ``CorpusLoadError`` aborts startup before any request is served.
    """

    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        corpus = corpus_index if corpus_index is not None else build_corpus_index(settings)
        app.state.scorer = QueryScorer(corpus, settings.scoring)
        logger.info("Serving %d documents", len(corpus.documents))
        yield

    app = FastAPI(title="Wiki Search", version=__version__, lifespan=lifespan)
    app.add_middleware(CORSHeadersMiddleware)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(router)
    return app


app = create_app()
