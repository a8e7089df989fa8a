"""ChatInvitation model: one row per ordered (sender, receiver) pair."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.constants.statuses import InvitationStatus
from app.db import Base
from app.models.mixins import TimestampMixin


class ChatInvitation(Base, TimestampMixin):
    """Invitation to open a direct conversation.

    Re-sending to the same receiver reuses the row (upsert) and resets it to pending.
    """

    __tablename__ = "chat_invitations"
    __table_args__ = (
        UniqueConstraint(
            "sender_id", "receiver_id", name="uq_chat_invitations_sender_receiver"
        ),
        CheckConstraint(
            "sender_id <> receiver_id", name="ck_chat_invitations_different_users"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    receiver_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(
        String(50), nullable=False, default=InvitationStatus.PENDING.value
    )

    sender = relationship("User", foreign_keys=[sender_id])
    receiver = relationship("User", foreign_keys=[receiver_id])

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING

    @property
    def sender_email(self) -> str | None:
        return self.sender.email if self.sender is not None else None

    @property
    def receiver_email(self) -> str | None:
        return self.receiver.email if self.receiver is not None else None
