"""Pydantic response models for the Book Manager API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, RootModel

# Column order of the ``books`` table, as returned by the listing query.
BOOK_COLUMNS: tuple[str, ...] = (
    "id",
    "title",
    "author",
    "publisher",
    "isbn",
    "comment",
    "created_at",
    "updated_at",
)


# ── Books ─────────────────────────────────────────────────────────────────────


class Book(BaseModel):
    """One row of the ``books`` table, copied verbatim."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int = Field(..., description="Primary key")
    title: str
    author: str
    publisher: str
    isbn: str = Field(..., description="ISBN; unique by convention, not enforced here")
    comment: str
    created_at: datetime = Field(..., description="Naive creation timestamp")
    updated_at: datetime = Field(..., description="Naive last-update timestamp")


class BookList(RootModel[list[Book]]):
    """Ordered rows as returned by the database; serialises as a bare JSON array."""

    def __len__(self) -> int:
        return len(self.root)
