"""Message model: one row per message posted in a conversation."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from app.constants.statuses import DEFAULT_MESSAGE_TYPE
from app.db import Base
from app.models.mixins import TimestampMixin


class Message(Base, TimestampMixin):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_conversation_id_created_at", "conversation_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    conversation_id = Column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    sender_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    content = Column(Text, nullable=False)
    message_type = Column(String(50), nullable=False, default=DEFAULT_MESSAGE_TYPE)
    is_read = Column(Boolean, nullable=False, default=False)

    sender = relationship("User")

    @property
    def sender_email(self) -> str | None:
        return self.sender.email if self.sender is not None else None
