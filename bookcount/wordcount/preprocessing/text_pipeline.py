from __future__ import annotations

import re
from typing import Iterable, Iterator

EDGE_RE = re.compile(r"\A[^a-z]+|[^a-z]+\Z")


def normalize_token(token: str) -> str:
    """Lowercase a raw token and strip non-letters from both ends."""
    return EDGE_RE.sub("", token.lower())


def split_line(line: str) -> list[str]:
    return line.split()


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        for raw in split_line(line):
            word = normalize_token(raw)
            if word:
                yield word


def partition(items: Iterable, size: int) -> Iterator[list]:
    size = max(1, size)
    chunk: list = []
    for item in items:
        chunk.append(item)
        if len(chunk) >= size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk
