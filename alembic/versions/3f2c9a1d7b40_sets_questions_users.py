"""sets, questions and users

Revision ID: 3f2c9a1d7b40
Revises:
Create Date: 2026-10-16
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f2c9a1d7b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sets",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_sets_name", "sets", ["name"], unique=True)
    op.create_index("ix_sets_is_active", "sets", ["is_active"])
    op.create_index("ix_sets_created_at", "sets", ["created_at"])

    # no foreign key on set_id: deleting a set keeps its questions
    op.create_table(
        "questions",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column("set_id", sa.String(24), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_questions_set_id", "questions", ["set_id"])
    op.create_index("ix_questions_created_at", "questions", ["created_at"])

    op.create_table(
        "users",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("joined_on", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_joined_on", "users", ["joined_on"])


def downgrade() -> None:
    op.drop_index("ix_users_joined_on", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_questions_created_at", table_name="questions")
    op.drop_index("ix_questions_set_id", table_name="questions")
    op.drop_table("questions")
    op.drop_index("ix_sets_created_at", table_name="sets")
    op.drop_index("ix_sets_is_active", table_name="sets")
    op.drop_index("ix_sets_name", table_name="sets")
    op.drop_table("sets")
