from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

COUNTS_FORMAT = "wordcount.facts"
COUNTS_VERSION = 1


class FactRecord(BaseModel):
    word: str = Field(min_length=1)
    book: str = Field(min_length=1)
    count: int = Field(ge=1)


class CountsDocument(BaseModel):
    format: Literal["wordcount.facts"] = COUNTS_FORMAT
    version: Literal[1] = COUNTS_VERSION
    facts: list[FactRecord] = Field(default_factory=list)


class IngestResponse(BaseModel):
    book_title: str
    facts_added: int
    token_count: int


class BooksResponse(BaseModel):
    books: list[str]


class TopWordsResponse(BaseModel):
    book_title: str | None = None
    n: int
    words: dict[str, int]


class PersistRequest(BaseModel):
    path: str | None = None


class PersistResponse(BaseModel):
    path: str
    fact_count: int
