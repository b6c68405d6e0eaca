"""Initial schema: users, events, registrations and feedbacks

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

user_roles = sa.Enum("volunteer", "organizer", name="userroles")
event_categories = sa.Enum(
    "Campus Life", "Education", "Environment", "Welfare", name="eventcategories"
)
event_status = sa.Enum("upcoming", "completed", name="eventstatus")
registration_status = sa.Enum(
    "pending", "confirmed", "rejected", name="registrationstatus"
)


def timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, primary_key=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=True),
        sa.Column("role", user_roles, nullable=False),
        sa.Column("avatar", sa.String(), nullable=True),
        sa.Column("bookmarks", sa.JSON(), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), autoincrement=True, primary_key=True),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("category", event_categories, nullable=False),
        sa.Column("max_volunteers", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("tasks", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("organizer_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("organizer_name", sa.String(100), nullable=False),
        sa.Column("current_volunteers", sa.Integer(), nullable=False),
        sa.Column("status", event_status, nullable=False),
        *timestamps(),
        sa.CheckConstraint("max_volunteers > 0", name="ck_events_max_volunteers"),
        sa.CheckConstraint(
            "current_volunteers >= 0", name="ck_events_current_volunteers"
        ),
    )
    op.create_index("ix_events_organizer_id", "events", ["organizer_id"])

    op.create_table(
        "event_registrations",
        sa.Column("id", sa.Integer(), autoincrement=True, primary_key=True),
        sa.Column("event_id", sa.Integer(), sa.ForeignKey("events.id"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("user_avatar", sa.String(), nullable=True),
        sa.Column("event_title", sa.String(150), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("event_status", event_status, nullable=False),
        sa.Column("requested_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", registration_status, nullable=False),
        *timestamps(),
        sa.UniqueConstraint("event_id", "user_id"),
    )
    op.create_index(
        "ix_event_registrations_event_id", "event_registrations", ["event_id"]
    )
    op.create_index("ix_event_registrations_user_id", "event_registrations", ["user_id"])
    op.create_index("ix_event_registrations_status", "event_registrations", ["status"])

    op.create_table(
        "event_feedbacks",
        sa.Column("id", sa.Integer(), autoincrement=True, primary_key=True),
        sa.Column("event_id", sa.Integer(), sa.ForeignKey("events.id"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        *timestamps(),
        sa.UniqueConstraint("event_id", "user_id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_event_feedbacks_rating"),
    )
    op.create_index("ix_event_feedbacks_event_id", "event_feedbacks", ["event_id"])
    op.create_index("ix_event_feedbacks_user_id", "event_feedbacks", ["user_id"])


def downgrade() -> None:
    op.drop_table("event_feedbacks")
    op.drop_table("event_registrations")
    op.drop_table("events")
    op.drop_table("users")
    registration_status.drop(op.get_bind(), checkfirst=True)
    event_status.drop(op.get_bind(), checkfirst=True)
    event_categories.drop(op.get_bind(), checkfirst=True)
    user_roles.drop(op.get_bind(), checkfirst=True)
