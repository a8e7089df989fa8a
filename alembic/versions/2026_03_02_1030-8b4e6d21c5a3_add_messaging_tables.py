"""add messaging tables

Revision ID: 8b4e6d21c5a3
Revises: 3f1a9c2b7d10
Create Date: 2026-03-02 10:30:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "8b4e6d21c5a3"
down_revision: Union[str, None] = "3f1a9c2b7d10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _user_fk(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=nullable,
    )


def upgrade() -> None:
    """Create invitations, conversations, soft-delete marks and messages."""
    op.create_table(
        "chat_invitations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("sender_id"),
        _user_fk("receiver_id"),
        sa.Column("status", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint(
            "sender_id", "receiver_id", name="uq_chat_invitations_sender_receiver"
        ),
        sa.CheckConstraint(
            "sender_id <> receiver_id", name="ck_chat_invitations_different_users"
        ),
    )
    op.create_index(
        "ix_chat_invitations_sender_id", "chat_invitations", ["sender_id"]
    )
    op.create_index(
        "ix_chat_invitations_receiver_id", "chat_invitations", ["receiver_id"]
    )

    op.create_table(
        "conversations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("user1_id"),
        _user_fk("user2_id"),
        *_timestamps(),
        sa.UniqueConstraint("user1_id", "user2_id", name="uq_conversations_pair"),
        sa.CheckConstraint("user1_id < user2_id", name="ck_conversations_ordered_pair"),
    )
    op.create_index("ix_conversations_user1_id", "conversations", ["user1_id"])
    op.create_index("ix_conversations_user2_id", "conversations", ["user2_id"])

    op.create_table(
        "conversation_deleted_by",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "conversation_id",
            sa.Integer(),
            sa.ForeignKey("conversations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _user_fk("user_id"),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "conversation_id", "user_id", name="uq_conversation_deleted_by_user"
        ),
    )
    op.create_index(
        "ix_conversation_deleted_by_user_id", "conversation_deleted_by", ["user_id"]
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "conversation_id",
            sa.Integer(),
            sa.ForeignKey("conversations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _user_fk("sender_id"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("message_type", sa.String(length=50), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_messages_conversation_id_created_at",
        "messages",
        ["conversation_id", "created_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_messages_conversation_id_created_at", table_name="messages")
    op.drop_table("messages")
    op.drop_index(
        "ix_conversation_deleted_by_user_id", table_name="conversation_deleted_by"
    )
    op.drop_table("conversation_deleted_by")
    op.drop_index("ix_conversations_user2_id", table_name="conversations")
    op.drop_index("ix_conversations_user1_id", table_name="conversations")
    op.drop_table("conversations")
    op.drop_index("ix_chat_invitations_receiver_id", table_name="chat_invitations")
    op.drop_index("ix_chat_invitations_sender_id", table_name="chat_invitations")
    op.drop_table("chat_invitations")
