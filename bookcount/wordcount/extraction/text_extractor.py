from __future__ import annotations

from typing import Iterator


class UnsupportedFileTypeError(ValueError):
    pass


def read_book_lines(path: str) -> Iterator[str]:
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def extract_lines(filename: str, content: bytes) -> list[str]:
    if not filename.lower().endswith(".txt"):
        raise UnsupportedFileTypeError("Only plain-text .txt books are supported")
    return content.decode("utf-8", errors="replace").splitlines()
