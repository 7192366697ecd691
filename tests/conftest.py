"""Shared pytest fixtures and helpers.

The database is a throw-away SQLite file under ``tmp_path`` built from the
same Core table the service queries.  The pool is injected into the app via
FastAPI's ``dependency_overrides`` mechanism, so tests that do not exercise
start-up never run the lifespan.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from book_manager.clients.books import BookStore, BookStoreError
from book_manager.clients.pool import create_pool
from book_manager.deps import get_book_store, get_pool, get_settings
from book_manager.main import app
from book_manager.schema import books, metadata

# ── Constants ─────────────────────────────────────────────────────────────────

SAMPLE_BOOKS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Rust Web Development",
        "author": "Bastian Gruber",
        "publisher": "Manning",
        "isbn": "9781617299001",
        "comment": "axum and warp",
        "created_at": datetime(2023, 4, 1, 9, 30, 0),
        "updated_at": datetime(2023, 4, 2, 18, 15, 45),
    },
    {
        "id": 2,
        "title": "Fluent Python",
        "author": "Luciano Ramalho",
        "publisher": "O'Reilly",
        "isbn": "9781492056355",
        "comment": "",
        "created_at": datetime(2022, 3, 31, 0, 0, 0),
        "updated_at": datetime(2022, 3, 31, 0, 0, 0),
    },
    {
        "id": 3,
        "title": "Designing Data-Intensive Applications",
        "author": "Martin Kleppmann",
        "publisher": "O'Reilly",
        "isbn": "9781449373320",
        "comment": "re-read chapter 7",
        "created_at": datetime(2021, 11, 5, 12, 0, 1),
        "updated_at": datetime(2024, 1, 20, 7, 45, 0),
    },
]

# ── DB helpers ────────────────────────────────────────────────────────────────


def sqlite_url_for(path: Path) -> str:
    return f"sqlite:///{path}"


def insert_books(pool: Engine, rows: list[dict[str, Any]]) -> None:
    with pool.begin() as conn:
        conn.execute(books.insert(), rows)


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _reset_app_state() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return sqlite_url_for(tmp_path / "books.db")


@pytest.fixture()
def pool(database_url: str) -> Iterator[Engine]:
    engine = create_pool(database_url)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def seeded_pool(pool: Engine) -> Engine:
    insert_books(pool, SAMPLE_BOOKS)
    return pool


@pytest.fixture()
def failing_store() -> BookStore:
    store: BookStore = MagicMock(spec=BookStore)
    store.list_books = MagicMock(  # type: ignore[method-assign]
        side_effect=BookStoreError("database unreachable")
    )
    return store


@pytest.fixture()
def test_client(pool: Engine) -> TestClient:
    app.dependency_overrides[get_pool] = lambda: pool
    return TestClient(app)


@pytest.fixture()
def failing_client(failing_store: BookStore) -> TestClient:
    app.dependency_overrides[get_book_store] = lambda: failing_store
    return TestClient(app)
