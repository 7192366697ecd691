"""Read-only access to the ``books`` table.

One connection is checked out of the shared pool per call and released when
the call returns or fails.  There is no retry: a failed checkout or query is
reported straight away as :class:`BookStoreError`.
"""

from __future__ import annotations

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from book_manager.models import BOOK_COLUMNS, Book, BookList
from book_manager.schema import books


class BookStoreError(Exception):
    """Raised when the book listing cannot be produced."""


def _row_to_book(row: Row) -> Book:
    """Bind the fixed column list to a :class:`Book`, failing the row on any mismatch."""
    mapping = row._mapping
    try:
        values = {name: mapping[name] for name in BOOK_COLUMNS}
    except KeyError as exc:
        raise BookStoreError(f"Row is missing column {exc}") from exc
    try:
        return Book.model_validate(values, strict=True)
    except ValidationError as exc:
        raise BookStoreError(f"Row id={values['id']!r} does not match Book: {exc}") from exc


class BookStore:
    """Runs the fixed listing query against a connection pool."""

    def __init__(self, pool: Engine) -> None:
        self._pool = pool

    def list_books(self) -> BookList:
        """Return every row of ``books`` in storage order.

        Raises:
            BookStoreError: on connection checkout, query, or row-mapping failure.
        """
        try:
            with self._pool.connect() as conn:
                rows = conn.execute(select(books)).all()
        except SQLAlchemyError as exc:
            raise BookStoreError(f"Book query failed: {exc}") from exc

        return BookList([_row_to_book(row) for row in rows])
