"""Core table definition for the externally owned ``books`` table.

The service only reads from this table; it never creates or migrates it.
"""

from sqlalchemy import BigInteger, Column, DateTime, Integer, MetaData, String, Table, Text

metadata = MetaData()

books = Table(
    "books",
    metadata,
    # SQLite only autoincrements INTEGER PRIMARY KEY
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), nullable=False),
    Column("publisher", String(255), nullable=False),
    Column("isbn", String(255), nullable=False, unique=True),
    Column("comment", Text, nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)
