"""Add player characters and character rote assignments.

Revision ID: b1d2e3f4a5b6
Revises: a0c1d2e3f4a5
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "b1d2e3f4a5b6"
down_revision: Union[str, Sequence[str], None] = "a0c1d2e3f4a5"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "characters",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("faction", sa.String(128), nullable=False),
        sa.Column("concept", sa.String(255), nullable=True),
        sa.Column("arete", sa.Integer(), nullable=True),
        sa.Column("avatar", sa.String(128), nullable=True),
        sa.Column("essence", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_characters_user", "characters", ["user_id"])

    op.create_table(
        "character_rotes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("character_id", sa.Integer(), nullable=False),
        sa.Column("rote_id", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("specialty", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["character_id"], ["characters.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["rote_id"], ["rotes.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("character_id", "rote_id", name="uq_character_rote"),
    )


def downgrade() -> None:
    op.drop_table("character_rotes")
    op.drop_index("idx_characters_user", table_name="characters")
    op.drop_table("characters")
