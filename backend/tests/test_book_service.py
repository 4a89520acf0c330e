"""
Library API Backend — Book Service Unit Tests
==============================================

What:  Tests for BookService business logic.
How:   Uses a mock repository (no database).

What we test:
    ✅ add_book returns the stored record with its assigned id
    ✅ Constraint violations → ValidationError, other failures → DatabaseError
    ✅ get_all_books distinguishes an empty shelf from a storage failure
    ✅ Missing ids raise NotFoundError for get, delete and availability updates
    ✅ Ids outside the id column range are missing without touching the store
    ✅ delete_book uses a single lookup and only deletes existing books
    ✅ update_availability is idempotent
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from library_api.exceptions import DatabaseError, NotFoundError, ValidationError
from library_api.models.book import BOOK_ID_MAX, BOOK_ID_MIN, Book
from library_api.schemas.book import BookCreate
from library_api.services.book_service import BookService


def assign_id(book):
    """Stands in for the store: assigns the next id and returns the record."""
    book.id = 1
    return book


class TestAddBook:

    @pytest.mark.asyncio
    async def test_add_book_success(self, mock_repository):
        mock_repository.save.side_effect = assign_id
        service = BookService(mock_repository)

        result = await service.add_book(BookCreate(title="Dune", author="Herbert"))

        assert result.id == 1
        assert result.title == "Dune"
        assert result.author == "Herbert"
        assert result.available is True
        mock_repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_book_constraint_violation_raises_validation_error(self, mock_repository):
        mock_repository.save.side_effect = IntegrityError(
            "INSERT INTO books ...", {}, Exception("UNIQUE constraint failed: books.isbn")
        )
        service = BookService(mock_repository)

        with pytest.raises(ValidationError) as exc_info:
            await service.add_book(
                BookCreate(title="Dune", author="Herbert", isbn="9780441172719")
            )

        assert exc_info.value.field == "isbn"

    @pytest.mark.asyncio
    async def test_add_book_storage_failure_raises_database_error(self, mock_repository):
        mock_repository.save.side_effect = OperationalError(
            "INSERT INTO books ...", {}, Exception("connection refused")
        )
        service = BookService(mock_repository)

        with pytest.raises(DatabaseError) as exc_info:
            await service.add_book(BookCreate(title="Dune", author="Herbert"))

        assert exc_info.value.context["operation"] == "add_book"


class TestGetBooks:

    @pytest.mark.asyncio
    async def test_get_all_books_empty(self, mock_repository):
        mock_repository.find_all.return_value = []
        service = BookService(mock_repository)

        assert await service.get_all_books() == []

    @pytest.mark.asyncio
    async def test_get_all_books_returns_every_book(self, mock_repository, sample_book):
        other = Book(id=2, title="Emma", author="Jane Austen", available=True)
        mock_repository.find_all.return_value = [sample_book, other]
        service = BookService(mock_repository)

        result = await service.get_all_books()

        assert [b.id for b in result] == [1, 2]
        assert result[0].isbn == "9780441172719"

    @pytest.mark.asyncio
    async def test_get_all_books_failure_is_not_an_empty_list(self, mock_repository):
        mock_repository.find_all.side_effect = RuntimeError("pool exhausted")
        service = BookService(mock_repository)

        with pytest.raises(DatabaseError):
            await service.get_all_books()

    @pytest.mark.asyncio
    async def test_get_book_by_id_found(self, mock_repository, sample_book, sample_book_data):
        mock_repository.find_by_id.return_value = sample_book
        service = BookService(mock_repository)

        result = await service.get_book_by_id(1)

        assert result.model_dump() == sample_book_data
        mock_repository.find_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_get_book_by_id_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = BookService(mock_repository)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_book_by_id(42)

        assert exc_info.value.message == "Book with ID 42 not found."

    @pytest.mark.asyncio
    async def test_get_book_by_id_lookup_failure(self, mock_repository):
        mock_repository.find_by_id.side_effect = RuntimeError("connection reset")
        service = BookService(mock_repository)

        with pytest.raises(DatabaseError):
            await service.get_book_by_id(1)


    @pytest.mark.asyncio
    @pytest.mark.parametrize("book_id", [BOOK_ID_MAX + 1, BOOK_ID_MIN - 1, 2**70])
    async def test_out_of_range_id_is_not_found(self, mock_repository, book_id):
        service = BookService(mock_repository)

        with pytest.raises(NotFoundError):
            await service.get_book_by_id(book_id)
        with pytest.raises(NotFoundError):
            await service.delete_book(book_id)
        with pytest.raises(NotFoundError):
            await service.update_availability(book_id, True)

        mock_repository.find_by_id.assert_not_awaited()
        mock_repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_largest_column_id_is_looked_up(self, mock_repository, sample_book):
        mock_repository.find_by_id.return_value = sample_book
        service = BookService(mock_repository)

        await service.get_book_by_id(BOOK_ID_MAX)

        mock_repository.find_by_id.assert_awaited_once_with(BOOK_ID_MAX)


class TestDeleteBook:

    @pytest.mark.asyncio
    async def test_delete_existing_book(self, mock_repository, sample_book):
        mock_repository.find_by_id.return_value = sample_book
        service = BookService(mock_repository)

        await service.delete_book(1)

        mock_repository.find_by_id.assert_awaited_once_with(1)
        mock_repository.delete.assert_awaited_once_with(sample_book)

    @pytest.mark.asyncio
    async def test_delete_missing_book_raises_and_deletes_nothing(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = BookService(mock_repository)

        with pytest.raises(NotFoundError):
            await service.delete_book(7)

        mock_repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_failure_raises_database_error(self, mock_repository, sample_book):
        mock_repository.find_by_id.return_value = sample_book
        mock_repository.delete.side_effect = RuntimeError("deadlock detected")
        service = BookService(mock_repository)

        with pytest.raises(DatabaseError) as exc_info:
            await service.delete_book(1)

        assert exc_info.value.context == {"operation": "delete_book", "book_id": 1}


class TestUpdateAvailability:

    @pytest.mark.asyncio
    async def test_update_sets_flag_and_saves(self, mock_repository, sample_book):
        mock_repository.find_by_id.return_value = sample_book
        mock_repository.save.side_effect = lambda book: book
        service = BookService(mock_repository)

        result = await service.update_availability(1, True)

        assert result.available is True
        assert sample_book.available is True
        mock_repository.save.assert_awaited_once_with(sample_book)

    @pytest.mark.asyncio
    async def test_update_is_idempotent(self, mock_repository, sample_book):
        mock_repository.find_by_id.return_value = sample_book
        mock_repository.save.side_effect = lambda book: book
        service = BookService(mock_repository)

        first = await service.update_availability(1, True)
        second = await service.update_availability(1, True)

        assert first == second
        assert second.available is True

    @pytest.mark.asyncio
    async def test_update_missing_book(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = BookService(mock_repository)

        with pytest.raises(NotFoundError):
            await service.update_availability(99, False)

        mock_repository.save.assert_not_awaited()
