"""GET /books – list every row of the ``books`` table.

A checkout failure and a query failure look the same to the caller: a bare
500 with no body.  The cause is only written to the service log.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from book_manager.clients.books import BookStore, BookStoreError
from book_manager.deps import get_book_store
from book_manager.models import BookList

logger = logging.getLogger(__name__)

router = APIRouter(tags=["books"])


@router.get(
    "/books",
    response_model=None,
    summary="List all books",
    responses={
        200: {"model": BookList, "description": "Every row of the books table"},
        500: {"description": "Database unavailable or query failed (empty body)"},
    },
)
def list_books(
    store: BookStore = Depends(get_book_store),
) -> BookList | Response:
    """Return all books in the order the database yields them."""
    try:
        book_list = store.list_books()
    except BookStoreError:
        logger.exception("Listing books failed")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.debug("Returning %d book(s)", len(book_list))
    return book_list
