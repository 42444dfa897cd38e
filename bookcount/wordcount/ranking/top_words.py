from __future__ import annotations

import heapq
from collections import Counter
from typing import Callable, Iterable, Sequence, TypeVar

from wordcount.config import settings
from wordcount.execution.executors import Executor, SequentialExecutor
from wordcount.models.storage import Fact
from wordcount.preprocessing.text_pipeline import partition
from wordcount.utils.validation import require_text

T = TypeVar("T")


def by_count(entry: tuple[str, int]) -> int:
    return entry[1]


def top_n(entries: Iterable[T], n: int, key: Callable[[T], int]) -> list[T]:
    """Largest ``n`` entries by ``key``, highest first. Ties come back in no set order."""
    if n <= 0:
        return []
    return heapq.nlargest(n, entries, key=key)


def sum_partition(facts: list[Fact]) -> Counter[str]:
    totals: Counter[str] = Counter()
    for fact in facts:
        totals[fact.word] += fact.count
    return totals


def sum_by_word(facts: Iterable[Fact], executor: Executor, chunk_size: int) -> Counter[str]:
    totals: Counter[str] = Counter()
    for partial in executor.map(sum_partition, partition(facts, chunk_size)):
        totals.update(partial)
    return totals


def rank_words(
    facts: Sequence[Fact],
    n: int,
    book_title: str | None = None,
    executor: Executor | None = None,
    chunk_size: int | None = None,
) -> dict[str, int]:
    if book_title is not None:
        require_text(book_title, "book_title")
    if n <= 0:
        return {}

    scoped = facts if book_title is None else [f for f in facts if f.book == book_title]
    if not scoped:
        return {}

    totals = sum_by_word(scoped, executor or SequentialExecutor(), chunk_size or settings.chunk_size)
    return dict(top_n(totals.items(), n, key=by_count))
