"""
Library API Backend — Book Route Handlers
==========================================

What:  HTTP surface for book records.
How:   Extracts path/query/body values, delegates to BookService and maps
       results to status codes. Exceptions raised by the service are turned
       into 400/404/500 responses by the global handlers in main.py.

Routes:
    POST   /books                                   → 200 created book
    GET    /books                                   → 200 list | 204 when empty
    GET    /books/{book_id}                         → 200 book
    DELETE /books/{book_id}                         → 200 confirmation string
    PATCH  /books/{book_id}/availability?available= → 200 updated book
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from library_api.schemas.book import BookCreate, BookResponse, ErrorResponse
from library_api.services.book_service import BookService, get_book_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/books", tags=["Books"])


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "The created book, with its assigned id", "model": BookResponse},
        400: {"description": "Invalid payload or conflicting record", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a book",
)
async def add_book(
    payload: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a book. `title` and `author` are required."""
    return await service.add_book(payload)


@router.get(
    "",
    response_model=List[BookResponse],
    responses={
        200: {"description": "All books", "model": List[BookResponse]},
        204: {"description": "No books stored"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all books",
)
async def get_all_books(
    service: BookService = Depends(get_book_service),
):
    """
    List every book.

    An empty shelf answers 204 No Content with an empty body rather than 200
    with an empty array.
    """
    books = await service.get_all_books()
    if not books:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return books


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={
        200: {"description": "The book", "model": BookResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a book by ID",
)
async def get_book_by_id(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return await service.get_book_by_id(book_id)


@router.delete(
    "/{book_id}",
    response_model=str,
    responses={
        200: {"description": "Confirmation message"},
        404: {"description": "Book not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a book",
)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> str:
    await service.delete_book(book_id)
    return f"Book with ID {book_id} deleted successfully."


@router.patch(
    "/{book_id}/availability",
    response_model=BookResponse,
    responses={
        200: {"description": "The updated book", "model": BookResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Set whether a book is available",
)
async def update_availability(
    book_id: int,
    available: bool = Query(..., description="New availability flag (true/false)"),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Idempotent: repeating the same value leaves the book unchanged."""
    return await service.update_availability(book_id, available)
