from __future__ import annotations

import logging
import time

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from wordcount.aggregation.word_totals import ingest
from wordcount.config import settings
from wordcount.counting.word_counter import WordCounter
from wordcount.extraction.text_extractor import UnsupportedFileTypeError, extract_lines
from wordcount.models.schemas import BooksResponse, IngestResponse, PersistRequest, PersistResponse, TopWordsResponse
from wordcount.models.storage import CountStore

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("wordcount")

app = FastAPI(title=settings.app_name, version=settings.app_version)

store = CountStore()
counter = WordCounter(store)


@app.on_event("startup")
def startup_log() -> None:
    logger.info(
        "wordcount.startup executor=%s max_workers=%s counts_path=%s",
        counter.executor.name,
        settings.max_workers,
        settings.counts_path,
    )
    if settings.load_on_startup and not counter.load_counts():
        logger.warning("wordcount.startup_load_skipped path=%s", settings.counts_path)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()
    logger.info("request.started method=%s path=%s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.exception("request.failed method=%s path=%s elapsed_ms=%.2f", request.method, request.url.path, elapsed_ms)
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "request.completed method=%s path=%s status=%s elapsed_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/books", response_model=IngestResponse)
async def upload_book(title: str = Form(""), file: UploadFile = File(...)) -> IngestResponse:
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File too large. Max upload size is {settings.max_upload_size_mb} MB")

    filename = file.filename or "uploaded.txt"
    logger.info("upload.received title=%s filename=%s size_bytes=%s", title, filename, len(content))

    try:
        lines = extract_lines(filename, content)
    except UnsupportedFileTypeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        facts = await run_in_threadpool(ingest, store, title, lines, counter.executor, counter.chunk_size)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return IngestResponse(book_title=title, facts_added=len(facts), token_count=sum(f.count for f in facts))


@app.get("/books", response_model=BooksResponse)
def list_books() -> BooksResponse:
    return BooksResponse(books=counter.books())


def _top_words_or_400(n: int | None, book_title: str | None) -> dict[str, int]:
    try:
        return counter.top_words(n, book_title)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/top-words", response_model=TopWordsResponse)
async def top_words(n: int | None = None) -> TopWordsResponse:
    words = await run_in_threadpool(_top_words_or_400, n, None)
    return TopWordsResponse(n=settings.default_top_n if n is None else n, words=words)


@app.get("/books/{book_title}/top-words", response_model=TopWordsResponse)
async def book_top_words(book_title: str, n: int | None = None) -> TopWordsResponse:
    words = await run_in_threadpool(_top_words_or_400, n, book_title)
    return TopWordsResponse(book_title=book_title, n=settings.default_top_n if n is None else n, words=words)


def _persist(action, verb: str, request: PersistRequest) -> PersistResponse:
    path = settings.counts_path if request.path is None else request.path
    try:
        ok = action(path)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not ok:
        raise HTTPException(status_code=500, detail=f"Could not {verb} counts at {path}")
    return PersistResponse(path=path, fact_count=len(store))


@app.post("/counts/save", response_model=PersistResponse)
async def save_counts(request: PersistRequest) -> PersistResponse:
    return await run_in_threadpool(_persist, counter.save_counts, "save", request)


@app.post("/counts/load", response_model=PersistResponse)
async def load_counts(request: PersistRequest) -> PersistResponse:
    return await run_in_threadpool(_persist, counter.load_counts, "load", request)
