"""
Library API Backend — Book Service
===================================

What:  Business logic for book records, independent of HTTP concerns.
How:   Wraps a BookRepository, turns "no such row" into NotFoundError and
       storage exceptions into ValidationError / DatabaseError.
Who:   Called by the /books route handlers; calls the repository.

Error Handling Strategy:
    Every operation either returns its result or raises one of:
    - NotFoundError    the id does not exist (404)
    - ValidationError  the store rejected the record, e.g. duplicate ISBN (400)
    - DatabaseError    any other storage failure (500)
    Failures are logged here, at the service boundary, and never retried.
    An empty shelf is an empty list, not an error.
"""

import logging
from typing import List

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.database import get_db_session
from library_api.exceptions import DatabaseError, NotFoundError, ValidationError
from library_api.models.book import BOOK_ID_MAX, BOOK_ID_MIN, Book
from library_api.repositories import BookRepository, SQLAlchemyBookRepository
from library_api.schemas.book import BookCreate, BookResponse

logger = logging.getLogger(__name__)


class BookService:
    """
    Book operations over a storage adapter.

    Responsibilities:
        - add_book(): persist a new record
        - get_all_books() / get_book_by_id(): reads with not-found handling
        - delete_book(): single lookup, then delete
        - update_availability(): toggle the loanable flag
    """

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def add_book(self, payload: BookCreate) -> BookResponse:
        """
        Persist a new book and return it with its assigned id.

        Raises:
            ValidationError: The store rejected the record (constraint violation)
            DatabaseError:   Any other storage failure
        """
        try:
            book = await self.repository.save(Book(**payload.model_dump()))
        except IntegrityError as e:
            logger.warning("Failed to add book '%s': %s", payload.title, e.orig)
            raise ValidationError(
                message="Book could not be added: it conflicts with an existing record.",
                field="isbn" if payload.isbn else None,
            )
        except Exception as e:
            logger.error("Failed to add book '%s': %s", payload.title, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not add the book. Please try again.",
                context={"operation": "add_book", "error_type": type(e).__name__},
            )

        logger.info("Book %d added: '%s' by %s", book.id, book.title, book.author)
        return BookResponse.model_validate(book)

    async def get_all_books(self) -> List[BookResponse]:
        """Return every book; an empty list when the shelf is empty."""
        try:
            books = await self.repository.find_all()
        except Exception as e:
            logger.error("Failed to retrieve books: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve books. Please try again.",
                context={"operation": "get_all_books", "error_type": type(e).__name__},
            )
        return [BookResponse.model_validate(book) for book in books]

    async def get_book_by_id(self, book_id: int) -> BookResponse:
        """
        Return a single book.

        Raises:
            NotFoundError: No book with this id
            DatabaseError: Lookup failed
        """
        book = await self._load(book_id, operation="get_book_by_id")
        if book is None:
            logger.info("Book with ID %d not found.", book_id)
            raise NotFoundError(resource="book", resource_id=book_id)
        return BookResponse.model_validate(book)

    async def delete_book(self, book_id: int) -> None:
        """
        Delete a book after a single existence lookup.

        Raises:
            NotFoundError: No book with this id (nothing is deleted)
            DatabaseError: Lookup or delete failed
        """
        book = await self._load(book_id, operation="delete_book")
        if book is None:
            logger.info("Cannot delete. Book with ID %d not found.", book_id)
            raise NotFoundError(resource="book", resource_id=book_id)

        try:
            await self.repository.delete(book)
        except Exception as e:
            logger.error("Failed to delete book with ID %d: %s", book_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the book. Please try again.",
                context={"operation": "delete_book", "book_id": book_id},
            )
        logger.info("Book with ID %d has been deleted.", book_id)

    async def update_availability(self, book_id: int, available: bool) -> BookResponse:
        """
        Set the `available` flag and persist it.

        Applying the same value twice leaves the record unchanged.

        Raises:
            NotFoundError: No book with this id
            DatabaseError: Lookup or save failed
        """
        book = await self._load(book_id, operation="update_availability")
        if book is None:
            logger.info("Cannot update availability. Book with ID %d not found.", book_id)
            raise NotFoundError(resource="book", resource_id=book_id)

        book.available = available
        try:
            book = await self.repository.save(book)
        except Exception as e:
            logger.error(
                "Failed to update availability for book ID %d: %s", book_id, str(e), exc_info=True
            )
            raise DatabaseError(
                message="Could not update the book. Please try again.",
                context={"operation": "update_availability", "book_id": book_id},
            )
        logger.info("Book %d availability set to %s", book_id, available)
        return BookResponse.model_validate(book)

    async def _load(self, book_id: int, operation: str) -> Book | None:
        """
        Primary-key lookup with storage errors wrapped in DatabaseError.

        An id the `books.id` column cannot hold matches no row, so it is
        answered as missing without a query (drivers raise on such values).
        """
        if not BOOK_ID_MIN <= book_id <= BOOK_ID_MAX:
            return None
        try:
            return await self.repository.find_by_id(book_id)
        except Exception as e:
            logger.error("Error fetching book by ID %d: %s", book_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the book. Please try again.",
                context={"operation": operation, "book_id": book_id},
            )


# ── Dependency ────────────────────────────────────────────────────────────
def get_book_service(db: AsyncSession = Depends(get_db_session)) -> BookService:
    """Builds a BookService bound to the request's database session."""
    return BookService(SQLAlchemyBookRepository(db))
