"""Create books table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `books` table holding library book records.
Rollback: downgrade() drops the table (all records are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the books table; column docs live in library_api/models/book.py."""
    op.create_table(
        "books",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned identifier",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Book title",
        ),
        sa.Column(
            "author",
            sa.String(255),
            nullable=False,
            comment="Author name as printed",
        ),
        sa.Column(
            "isbn",
            sa.String(20),
            nullable=True,
            comment="ISBN-10 or ISBN-13, unique when present",
        ),
        sa.Column(
            "published_year",
            sa.Integer(),
            nullable=True,
            comment="Year of publication",
        ),
        sa.Column(
            "available",
            sa.Boolean(),
            nullable=False,
            server_default=sa.true(),
            comment="Whether the book can currently be loaned",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("isbn"),
    )


def downgrade() -> None:
    op.drop_table("books")
