"""Shared database connection pool.

The pool is a SQLAlchemy :class:`~sqlalchemy.engine.Engine`; its ``QueuePool``
is thread-safe, so a single engine is created at start-up and shared by every
request.  Connections are checked out with ``engine.connect()`` and returned to
the pool when the ``with`` block exits.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

logger = logging.getLogger(__name__)


class PoolError(Exception):
    """Raised when the connection pool cannot be established."""


def _engine_kwargs(
    backend: str,
    pool_size: int,
    max_overflow: int,
    pool_recycle: int,
    pool_pre_ping: bool,
) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"pool_pre_ping": pool_pre_ping}
    if backend == "sqlite":
        # Handlers run in the worker thread pool, not the thread that opened the file.
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=pool_recycle,
        )
    return kwargs


def create_pool(
    database_url: str,
    *,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_recycle: int = 1800,
    pool_pre_ping: bool = True,
) -> Engine:
    """Build the engine and check that one connection can be established.

    Args:
        database_url:  SQLAlchemy URL, e.g. ``mysql+pymysql://user:pw@host/db``.
        pool_size:     Connections kept open by the ``QueuePool``.
        max_overflow:  Extra connections allowed beyond *pool_size*.
        pool_recycle:  Seconds after which idle connections are replaced.
        pool_pre_ping: Test connections for liveness on checkout.

    Returns:
        The ready-to-use engine.

    Raises:
        PoolError: if the URL is invalid, the driver is missing, or the
            database cannot be reached.
    """
    try:
        url = make_url(database_url)
        engine = create_engine(
            url,
            **_engine_kwargs(
                url.get_backend_name(),
                pool_size,
                max_overflow,
                pool_recycle,
                pool_pre_ping,
            ),
        )
    except ArgumentError as exc:
        # NoSuchModuleError (unknown driver) is an ArgumentError too
        raise PoolError(f"Invalid DATABASE_URL: {exc}") from exc

    safe_url = engine.url.render_as_string(hide_password=True)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        engine.dispose()
        logger.error("Could not connect to %s: %s", safe_url, exc)
        raise PoolError(f"Database unreachable at {safe_url}: {exc}") from exc

    logger.info("Connection pool ready for %s", safe_url)
    return engine


def dispose_pool(engine: Engine) -> None:
    """Close every pooled connection."""
    engine.dispose()
    logger.info("Connection pool disposed.")
