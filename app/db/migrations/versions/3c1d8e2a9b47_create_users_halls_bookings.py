"""Create users, event_halls and bookings

Revision ID: 3c1d8e2a9b47
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


revision = "3c1d8e2a9b47"
down_revision = None
branch_labels = None
depends_on = None


user_role_enum = sa.Enum("customer", "hallowner", "admin", name="userrole")
booking_status_enum = sa.Enum("pending", "confirmed", "cancelled", name="bookingstatus")


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", user_role_enum, nullable=False, server_default="customer"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "event_halls",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
    )
    op.create_index("ix_event_halls_id", "event_halls", ["id"])
    op.create_index("ix_event_halls_owner_id", "event_halls", ["owner_id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("hall_id", sa.Integer(), sa.ForeignKey("event_halls.id"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("status", booking_status_enum, nullable=False, server_default="pending"),
        sa.Column("plus_price", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("hall_id", "date", "start_time", "end_time", name="uq_booking_slot"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_hall_id", "bookings", ["hall_id"])
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])


def downgrade():
    op.drop_table("bookings")
    op.drop_table("event_halls")
    op.drop_table("users")

    # Enum types only exist as standalone objects on PostgreSQL
    bind = op.get_bind()
    booking_status_enum.drop(bind, checkfirst=True)
    user_role_enum.drop(bind, checkfirst=True)
