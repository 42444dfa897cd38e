from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Protocol, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Executor(Protocol):
    name: str

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]: ...


class SequentialExecutor:
    name = "sequential"

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        return [fn(item) for item in items]


class ThreadedExecutor:
    name = "threaded"

    def __init__(self, max_workers: int = 4) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="wordcount") as pool:
            return list(pool.map(fn, items))


def build_executor(kind: str, max_workers: int = 4) -> Executor:
    key = kind.strip().lower()
    if key == SequentialExecutor.name:
        return SequentialExecutor()
    if key == ThreadedExecutor.name:
        return ThreadedExecutor(max_workers)
    raise ValueError(f"Unknown executor '{kind}'. Use sequential or threaded.")
