"""
Library API Backend — Book SQLAlchemy Model
============================================

What:  ORM model representing the `books` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by SQLAlchemyBookRepository for persistence.

Table Design:
    - Integer auto-increment primary key, assigned by the store on insert
    - title / author: required descriptive fields
    - isbn: optional, unique when present (duplicates are rejected as 400)
    - published_year: optional
    - available: loanable flag, defaults to true
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base

# Range of the `id` column (SQL INTEGER, signed 32-bit on PostgreSQL)
BOOK_ID_MIN = -(2**31)
BOOK_ID_MAX = 2**31 - 1


class Book(Base):
    """
    A library book record.

    Lifecycle:
        1. Created by the add operation (store assigns `id`)
        2. `available` toggled by the availability operation
        3. Removed by the delete operation

    `id` never changes once assigned; no other table references this one.
    """

    __tablename__ = "books"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    # ── Descriptive Fields ────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book title",
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name as printed",
    )

    isbn: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        unique=True,
        comment="ISBN-10 or ISBN-13, unique when present",
    )

    published_year: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication",
    )

    # ── Availability ──────────────────────────────────────────────────────
    available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
        comment="Whether the book can currently be loaned",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Book(id={self.id}, title='{self.title}', "
            f"available={self.available})>"
        )
