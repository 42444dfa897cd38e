from __future__ import annotations

from pathlib import Path

import pytest

from wordcount.counting.word_counter import WordCounter
from wordcount.execution.executors import SequentialExecutor
from wordcount.models.storage import CountStore

BOOK_ONE_TEXT = """\
Hello world! Hello, world. hello WORLD
"Hello" world; hello -- world... hello world
Hello world hello world hello world hello world.
The quick brown fox jumps over the lazy dog.
"""

BOOK_TWO_TEXT = """\
This is a test book. Hello world, again and again.
It's short: just enough words to fill a top ten list.
"""


@pytest.fixture
def store() -> CountStore:
    return CountStore()


@pytest.fixture
def counter(store: CountStore) -> WordCounter:
    return WordCounter(store, executor=SequentialExecutor(), chunk_size=2)


@pytest.fixture
def book_files(tmp_path: Path) -> dict[str, Path]:
    one = tmp_path / "TestBook1.txt"
    two = tmp_path / "TestBook2.txt"
    one.write_text(BOOK_ONE_TEXT, encoding="utf-8")
    two.write_text(BOOK_TWO_TEXT, encoding="utf-8")
    return {"Test Book 1": one, "Test Book 2": two}
