"""FastAPI dependency providers.

The connection pool is created once by the application lifespan and stored on
``app.state``; request handlers reach it through ``Depends``.
Tests override these functions via ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from book_manager.clients.books import BookStore
from book_manager.config import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def get_pool(request: Request) -> Engine:
    return request.app.state.pool  # type: ignore[no-any-return]


def get_book_store(pool: Engine = Depends(get_pool)) -> BookStore:
    return BookStore(pool)
