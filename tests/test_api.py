from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wordcount import main as service

BOOKS_ENDPOINT = "/books"
TOP_WORDS_ENDPOINT = "/top-words"


@pytest.fixture
def client() -> TestClient:
    service.store.replace([])
    return TestClient(service.app)


def upload(client: TestClient, title: str, text: str, filename: str = "book.txt"):
    return client.post(
        BOOKS_ENDPOINT,
        data={"title": title},
        files={"file": (filename, text.encode("utf-8"), "text/plain")},
    )


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_upload_and_query(client: TestClient) -> None:
    response = upload(client, "A", "Hello world. Hello!")
    assert response.status_code == 200
    assert response.json() == {"book_title": "A", "facts_added": 2, "token_count": 3}

    assert client.get(TOP_WORDS_ENDPOINT, params={"n": 1}).json() == {"book_title": None, "n": 1, "words": {"hello": 2}}
    body = client.get("/books/A/top-words").json()
    assert body == {"book_title": "A", "n": 10, "words": {"hello": 2, "world": 1}}
    assert client.get("/books/B/top-words").json()["words"] == {}
    assert client.get(BOOKS_ENDPOINT).json() == {"books": ["A"]}


def test_non_positive_n_gives_empty_words(client: TestClient) -> None:
    upload(client, "A", "hello")
    assert client.get(TOP_WORDS_ENDPOINT, params={"n": 0}).json()["words"] == {}


@pytest.mark.parametrize(
    "title, text, filename, status",
    [
        ("A", "", "book.txt", 400),
        ("A", "hello", "book.pdf", 400),
        ("   ", "hello", "book.txt", 400),
        ("", "hello", "book.txt", 400),
    ],
)
def test_upload_errors(client: TestClient, title: str, text: str, filename: str, status: int) -> None:
    assert upload(client, title, text, filename).status_code == status
    assert client.get(BOOKS_ENDPOINT).json() == {"books": []}


def test_blank_book_title_query_is_rejected(client: TestClient) -> None:
    assert client.get("/books/%20/top-words").status_code == 400


def test_save_and_load(client: TestClient, tmp_path: Path) -> None:
    path = str(tmp_path / "counts.json")
    upload(client, "A", "whale whale sea")

    saved = client.post("/counts/save", json={"path": path})
    assert saved.status_code == 200
    assert saved.json() == {"path": path, "fact_count": 2}

    upload(client, "B", "ship")
    loaded = client.post("/counts/load", json={"path": path})
    assert loaded.json() == {"path": path, "fact_count": 2}
    assert client.get(BOOKS_ENDPOINT).json() == {"books": ["A"]}


def test_load_failure_is_a_server_error(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/counts/load", json={"path": str(tmp_path / "missing.json")})
    assert response.status_code == 500
    assert client.post("/counts/save", json={"path": ""}).status_code == 400
