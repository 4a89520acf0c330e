# Repositories package init
"""
Library API Backend — Storage Adapter Layer
============================================

What:  Persistence boundary between the book service and the database.
How:   An abstract BookRepository declares the capability set
       (save / find_all / find_by_id / delete); SQLAlchemyBookRepository
       implements it over an AsyncSession.

Repository Inventory:
    - BookRepository (abstract): storage contract used by BookService
    - SQLAlchemyBookRepository: relational implementation (PostgreSQL, SQLite)

Repositories flush but never commit; the per-request session dependency
owns the transaction.
"""

from library_api.repositories.base import BookRepository
from library_api.repositories.book_repository import SQLAlchemyBookRepository

__all__ = ["BookRepository", "SQLAlchemyBookRepository"]
