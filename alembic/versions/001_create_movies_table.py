"""create movies table

Revision ID: 001
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "movies",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("director", sa.String(255), nullable=False),
        sa.Column("release_year", sa.Integer(), nullable=False),
        sa.Column("create_time", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "display_name", "director", "release_year", name="uq_movies_name_director_year"
        ),
    )
    op.create_index("ix_movies_id", "movies", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_movies_id", table_name="movies")
    op.drop_table("movies")
