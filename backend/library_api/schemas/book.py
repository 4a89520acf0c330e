"""
Library API Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the HTTP contract for book records.
How:   FastAPI validates request bodies against BookCreate, serializes
       responses through BookResponse and builds the OpenAPI docs from both.

Schemas are separate from the SQLAlchemy model so the store-assigned `id`
can be exposed on responses without being accepted on input.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class BookCreate(BaseModel):
    """
    What:  Payload for POST /books.

    Only field presence is checked: title and author must be present and
    non-blank. Any `id` in the payload is ignored, the store assigns it.
    """
    title: str = Field(min_length=1, max_length=255, description="Book title")
    author: str = Field(min_length=1, max_length=255, description="Author name")
    isbn: Optional[str] = Field(
        default=None, max_length=20, description="ISBN-10 or ISBN-13"
    )
    published_year: Optional[int] = Field(
        default=None, ge=0, le=9999, description="Year of publication (0-9999)"
    )
    available: bool = Field(
        default=True, description="Whether the book can currently be loaned"
    )

    @field_validator("title", "author")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Rejects whitespace-only values, which count as missing."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class BookResponse(BaseModel):
    """
    What:  Full representation of a persisted book.
    Who:   Returned by every /books endpoint that yields a record.
    """
    id: int = Field(description="Store-assigned book identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    isbn: Optional[str] = Field(default=None, description="ISBN, if recorded")
    published_year: Optional[int] = Field(default=None, description="Year of publication")
    available: bool = Field(description="Whether the book can currently be loaned")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by all error responses.

    Example:
        {
            "error": "not_found",
            "message": "Book with ID 7 not found.",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container health checks and monitoring."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
