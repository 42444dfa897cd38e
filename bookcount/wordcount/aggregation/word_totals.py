from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from wordcount.config import settings
from wordcount.execution.executors import Executor, SequentialExecutor
from wordcount.models.storage import CountStore, Fact
from wordcount.preprocessing.text_pipeline import iter_words, partition
from wordcount.utils.validation import require_text

logger = logging.getLogger("wordcount")


def count_chunk(lines: list[str]) -> Counter[str]:
    return Counter(iter_words(lines))


def count_words(lines: Iterable[str], executor: Executor, chunk_size: int) -> Counter[str]:
    totals: Counter[str] = Counter()
    for partial in executor.map(count_chunk, partition(lines, chunk_size)):
        totals.update(partial)
    return totals


def build_facts(book_title: str, counts: Counter[str]) -> list[Fact]:
    return [Fact(word=word, book=book_title, count=count) for word, count in counts.items() if count > 0]


def ingest(
    store: CountStore,
    book_title: str,
    lines: Iterable[str] | None,
    executor: Executor | None = None,
    chunk_size: int | None = None,
) -> list[Fact]:
    require_text(book_title, "book_title")
    if lines is None:
        raise ValueError("lines must not be None")

    executor = executor or SequentialExecutor()
    counts = count_words(lines, executor, chunk_size or settings.chunk_size)
    facts = build_facts(book_title, counts)
    store.append_batch(facts)
    logger.info(
        "ingest.completed book=%s facts=%s tokens=%s executor=%s",
        book_title,
        len(facts),
        sum(counts.values()),
        executor.name,
    )
    return facts
