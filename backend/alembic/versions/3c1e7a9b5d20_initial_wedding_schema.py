"""initial wedding schema

Revision ID: 3c1e7a9b5d20
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1e7a9b5d20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owner_column() -> sa.Column:
    return sa.Column("user_id", sa.Integer(), nullable=False)


def _owner_fk() -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.String(length=26), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_username"), ["username"], unique=True)
        batch_op.create_index(batch_op.f("ix_users_email"), ["email"], unique=True)

    op.create_table(
        "wedding_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("partner1_name", sa.String(length=255), nullable=True),
        sa.Column("partner2_name", sa.String(length=255), nullable=True),
        sa.Column("wedding_date", sa.String(length=10), nullable=True),
        sa.Column("venue_name", sa.String(length=255), nullable=True),
        sa.Column("venue_address", sa.Text(), nullable=True),
        sa.Column("theme", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("profile_image_url", sa.String(length=500), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=True),
        sa.Column("due_date", sa.String(length=10), nullable=True),
        sa.Column("priority", sa.String(length=10), nullable=True),
        sa.Column("created_at", sa.String(length=26), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("tasks", schema=None) as batch_op:
        batch_op.create_index("ix_tasks_user_due", ["user_id", "due_date"], unique=False)

    op.create_table(
        "budget_categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("estimated_cost", sa.Float(), nullable=True),
        sa.Column("actual_cost", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("budget_categories", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_budget_categories_user_id"), ["user_id"], unique=False)

    op.create_table(
        "vendors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("contact_name", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("contract_link", sa.String(length=500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("vendors", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_vendors_user_id"), ["user_id"], unique=False)

    op.create_table(
        "guests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("rsvp_status", sa.String(length=20), nullable=True),
        sa.Column("meal_preference", sa.String(length=100), nullable=True),
        sa.Column("plus_one", sa.Boolean(), nullable=True),
        sa.Column("plus_one_name", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("guests", schema=None) as batch_op:
        batch_op.create_index("ix_guests_user_rsvp", ["user_id", "rsvp_status"], unique=False)

    op.create_table(
        "timeline_events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.String(length=10), nullable=True),
        sa.Column("months_before", sa.Integer(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("timeline_events", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_timeline_events_user_id"), ["user_id"], unique=False)

    op.create_table(
        "help_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _owner_column(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.String(length=26), nullable=True),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table("help_messages", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_help_messages_user_id"), ["user_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "help_messages",
        "timeline_events",
        "guests",
        "vendors",
        "budget_categories",
        "tasks",
        "wedding_settings",
    ):
        op.drop_table(table)

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_email"))
        batch_op.drop_index(batch_op.f("ix_users_username"))
    op.drop_table("users")
