from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from book_manager.clients.pool import create_pool, dispose_pool
from book_manager.deps import get_settings
from book_manager.routers import books, health


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # DATABASE_URL is required, so settings are only read at startup.
    settings = get_settings()
    app.state.pool = create_pool(
        settings.database_url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=settings.pool_pre_ping,
    )
    try:
        yield
    finally:
        dispose_pool(app.state.pool)


app = FastAPI(
    title="Book Manager API",
    description="Lists the rows of the books table as JSON.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(books.router)
