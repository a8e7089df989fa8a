"""ChatInvitation data access. Writes are flushed; commands own commit/rollback."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.constants.statuses import InvitationStatus
from app.models.invitation import ChatInvitation
from app.models.mixins import utcnow
from app.utils.db.upsert import upsert_insert


class InvitationService:
    """Reads and writes chat invitations."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_invitation(
        self, invitation_id: int, for_update: bool = False
    ) -> Optional[ChatInvitation]:
        """Fetch an invitation by id, optionally locking the row."""
        query = self.db.query(ChatInvitation).filter(ChatInvitation.id == invitation_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def upsert_pending(self, sender_id: int, receiver_id: int) -> ChatInvitation:
        """
        Insert a pending invitation for (sender, receiver) or reset the existing
        row to pending, whatever its current status.
        """
        now = utcnow()
        stmt = upsert_insert(self.db, ChatInvitation).values(
            sender_id=sender_id,
            receiver_id=receiver_id,
            status=InvitationStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["sender_id", "receiver_id"],
            set_={"status": InvitationStatus.PENDING.value, "updated_at": now},
        ).returning(ChatInvitation)
        return self.db.scalars(
            stmt, execution_options={"populate_existing": True}
        ).one()

    def set_status(
        self, invitation: ChatInvitation, status: InvitationStatus
    ) -> ChatInvitation:
        invitation.status = status.value
        invitation.updated_at = utcnow()
        self.db.flush()
        return invitation

    def get_pending_received(self, user_id: int) -> List[ChatInvitation]:
        """Pending invitations addressed to the user, newest first."""
        return (
            self.db.query(ChatInvitation)
            .options(joinedload(ChatInvitation.sender))
            .filter(
                ChatInvitation.receiver_id == user_id,
                ChatInvitation.status == InvitationStatus.PENDING.value,
            )
            .order_by(ChatInvitation.created_at.desc(), ChatInvitation.id.desc())
            .all()
        )

    def get_pending_sent(self, user_id: int) -> List[ChatInvitation]:
        """Pending invitations sent by the user, newest first."""
        return (
            self.db.query(ChatInvitation)
            .options(joinedload(ChatInvitation.receiver))
            .filter(
                ChatInvitation.sender_id == user_id,
                ChatInvitation.status == InvitationStatus.PENDING.value,
            )
            .order_by(ChatInvitation.created_at.desc(), ChatInvitation.id.desc())
            .all()
        )
