from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Fact:
    word: str
    book: str
    count: int


class CountStore:
    def __init__(self, facts: Iterable[Fact] = ()) -> None:
        self._lock = threading.Lock()
        self._facts: list[Fact] = list(facts)

    def append_batch(self, facts: Iterable[Fact]) -> None:
        batch = list(facts)
        if not batch:
            return
        with self._lock:
            self._facts.extend(batch)

    def snapshot(self) -> tuple[Fact, ...]:
        with self._lock:
            return tuple(self._facts)

    def replace(self, facts: Iterable[Fact]) -> None:
        new_facts = list(facts)
        with self._lock:
            self._facts = new_facts

    def books(self) -> list[str]:
        seen: dict[str, None] = {}
        for fact in self.snapshot():
            seen.setdefault(fact.book, None)
        return list(seen)

    def __len__(self) -> int:
        with self._lock:
            return len(self._facts)
