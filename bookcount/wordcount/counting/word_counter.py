from __future__ import annotations

import logging
from typing import Iterable

from wordcount.aggregation.word_totals import ingest
from wordcount.config import settings
from wordcount.execution.executors import Executor, build_executor
from wordcount.extraction.text_extractor import read_book_lines
from wordcount.models.storage import CountStore
from wordcount.ranking.top_words import by_count, rank_words
from wordcount.storage import file_store
from wordcount.utils.validation import require_text

logger = logging.getLogger("wordcount")


class WordCounter:
    def __init__(self, store: CountStore, executor: Executor | None = None, chunk_size: int | None = None) -> None:
        self.store = store
        self.executor = executor or build_executor(settings.executor, settings.max_workers)
        self.chunk_size = chunk_size or settings.chunk_size

    def count_words(self, book_title: str, lines: Iterable[str]) -> None:
        ingest(self.store, book_title, lines, self.executor, self.chunk_size)

    def count_book_file(self, book_title: str, path: str) -> None:
        require_text(book_title, "book_title")
        require_text(path, "path")
        self.count_words(book_title, read_book_lines(path))

    def top_words(self, n: int | None = None, book_title: str | None = None) -> dict[str, int]:
        n = settings.default_top_n if n is None else n
        return rank_words(self.store.snapshot(), n, book_title, self.executor, self.chunk_size)

    def books(self) -> list[str]:
        return self.store.books()

    def save_counts(self, path: str | None = None) -> bool:
        return file_store.save(self.store, settings.counts_path if path is None else path)

    def load_counts(self, path: str | None = None) -> bool:
        return file_store.load(self.store, settings.counts_path if path is None else path)

    def log_counts(self) -> None:
        for fact in self.store.snapshot():
            logger.info("counts.fact word=%s book=%s count=%s", fact.word, fact.book, fact.count)

    def log_map(self, mapping: dict[str, int]) -> None:
        for word, count in sorted(mapping.items(), key=by_count, reverse=True):
            logger.info("counts.top word=%s count=%s", word, count)
