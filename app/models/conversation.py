"""Conversation and per-user soft-delete mark models."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)

from app.db import Base
from app.models.mixins import TimestampMixin, utcnow


class Conversation(Base, TimestampMixin):
    """Two-party conversation stored once per unordered pair as (min id, max id).

    updated_at is bumped on every new message and drives list ordering.
    """

    __tablename__ = "conversations"
    __table_args__ = (
        UniqueConstraint("user1_id", "user2_id", name="uq_conversations_pair"),
        CheckConstraint("user1_id < user2_id", name="ck_conversations_ordered_pair"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user1_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user2_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def other_participant(self, user_id: int) -> int:
        return self.user2_id if self.user1_id == user_id else self.user1_id


class ConversationDeletedBy(Base):
    """Marks a conversation hidden for one participant as of deleted_at.

    Removed when the other participant sends a message.
    """

    __tablename__ = "conversation_deleted_by"
    __table_args__ = (
        UniqueConstraint(
            "conversation_id", "user_id", name="uq_conversation_deleted_by_user"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    conversation_id = Column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    deleted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
