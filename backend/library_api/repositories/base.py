"""
Library API Backend — Abstract Book Repository
===============================================

What:  Abstract base class defining the storage contract for book records.
How:   Concrete implementations inherit from BookRepository and implement
       the four capabilities below against a specific backend.
Who:   Called by BookService; unit tests substitute an AsyncMock specced on
       this class.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from library_api.models.book import Book


class BookRepository(ABC):
    """
    Abstract interface for persisting and retrieving books by integer id.

    Contract:
        - save() inserts or updates and returns the record with `id` populated
        - find_by_id() returns None (never raises) for an unknown id
        - Backend errors propagate unchanged; translating them is the
          service's job
    """

    @abstractmethod
    async def save(self, book: Book) -> Book:
        """
        Insert a new book or persist changes to an existing one.

        Returns:
            The same instance, with the store-assigned `id` and any server
            defaults loaded.
        """
        ...

    @abstractmethod
    async def find_all(self) -> List[Book]:
        """Return every stored book ordered by id (empty list when none)."""
        ...

    @abstractmethod
    async def find_by_id(self, book_id: int) -> Optional[Book]:
        """Return the book with the given id, or None."""
        ...

    @abstractmethod
    async def delete(self, book: Book) -> None:
        """Remove a previously loaded book."""
        ...
