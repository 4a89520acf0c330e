"""
Library API Backend — SQLAlchemy Book Repository
=================================================

What:  BookRepository implementation over an async SQLAlchemy session.
How:   Uses the session's unit of work: add/delete + flush so the statement
       runs (and the id is assigned) inside the request transaction.
Who:   Built per request by the book service dependency.

Query plans:
    find_by_id: SELECT ... FROM books WHERE id = :id   (primary key lookup)
    find_all:   SELECT ... FROM books ORDER BY id
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.models.book import Book
from library_api.repositories.base import BookRepository

logger = logging.getLogger(__name__)


class SQLAlchemyBookRepository(BookRepository):
    """Relational storage adapter for books."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, book: Book) -> Book:
        self.session.add(book)
        await self.session.flush()
        # Load server-side defaults (id, available) onto the instance
        await self.session.refresh(book)
        logger.debug("Persisted %r", book)
        return book

    async def find_all(self) -> List[Book]:
        result = await self.session.execute(select(Book).order_by(Book.id))
        return list(result.scalars().all())

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        return await self.session.get(Book, book_id)

    async def delete(self, book: Book) -> None:
        await self.session.delete(book)
        await self.session.flush()
