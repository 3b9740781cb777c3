"""Create game_sessions table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_game_sessions_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "game_sessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("players", sa.JSON(), nullable=False),
        sa.Column("winner", sa.String(length=128), nullable=True),
        sa.Column("played_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_index("ix_game_sessions_played_at", "game_sessions", ["played_at"])


def downgrade() -> None:
    op.drop_index("ix_game_sessions_played_at", table_name="game_sessions")
    op.drop_table("game_sessions")
