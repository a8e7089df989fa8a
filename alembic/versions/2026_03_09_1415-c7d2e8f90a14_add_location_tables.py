"""add contacts, location alerts and location tracking tables

Revision ID: c7d2e8f90a14
Revises: 8b4e6d21c5a3
Create Date: 2026-03-09 14:15:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "c7d2e8f90a14"
down_revision: Union[str, None] = "8b4e6d21c5a3"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ACTIVE_ALERT_PREDICATE = sa.text("alert_status = 'active'")


def upgrade() -> None:
    """Create user_contacts, location_alerts and location_tracking."""
    op.create_table(
        "user_contacts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "contact_user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "contact_user_id", name="uq_user_contacts_pair"),
    )
    op.create_index("ix_user_contacts_user_id", "user_contacts", ["user_id"])

    op.create_table(
        "location_alerts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "contact_user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("alert_status", sa.String(length=50), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_location_alerts_user_id", "location_alerts", ["user_id"])
    op.create_index(
        "ix_location_alerts_contact_status",
        "location_alerts",
        ["contact_user_id", "alert_status"],
    )
    # At most one active alert per (sender, receiver)
    op.create_index(
        "uq_location_alerts_active_pair",
        "location_alerts",
        ["user_id", "contact_user_id"],
        unique=True,
        postgresql_where=ACTIVE_ALERT_PREDICATE,
        sqlite_where=ACTIVE_ALERT_PREDICATE,
    )

    op.create_table(
        "location_tracking",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=False),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=False),
        sa.Column("accuracy", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("location_tracking")
    op.drop_index("uq_location_alerts_active_pair", table_name="location_alerts")
    op.drop_index("ix_location_alerts_contact_status", table_name="location_alerts")
    op.drop_index("ix_location_alerts_user_id", table_name="location_alerts")
    op.drop_table("location_alerts")
    op.drop_index("ix_user_contacts_user_id", table_name="user_contacts")
    op.drop_table("user_contacts")
