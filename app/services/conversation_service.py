"""Conversation identity, listing and per-user soft-delete marks."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import and_, case, exists, or_
from sqlalchemy.orm import Session

from app.models.conversation import Conversation, ConversationDeletedBy
from app.models.mixins import utcnow
from app.models.user import User
from app.utils.db.upsert import upsert_insert


def canonical_pair(user_a: int, user_b: int) -> Tuple[int, int]:
    """Order a pair of user ids as (min, max) so each pair has one row."""
    if user_a == user_b:
        raise ValueError("A conversation needs two different users")
    return min(user_a, user_b), max(user_a, user_b)


class ConversationService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_for_participant(
        self, conversation_id: int, user_id: int
    ) -> Optional[Conversation]:
        """Return the conversation only if user_id is one of its two participants."""
        return (
            self.db.query(Conversation)
            .filter(
                Conversation.id == conversation_id,
                or_(Conversation.user1_id == user_id, Conversation.user2_id == user_id),
            )
            .first()
        )

    def get_by_pair(self, user_a: int, user_b: int) -> Optional[Conversation]:
        user1_id, user2_id = canonical_pair(user_a, user_b)
        return (
            self.db.query(Conversation)
            .filter(
                Conversation.user1_id == user1_id,
                Conversation.user2_id == user2_id,
            )
            .first()
        )

    def get_or_create_for_pair(
        self, user_a: int, user_b: int
    ) -> Tuple[Conversation, bool]:
        """
        Get the canonical conversation for the pair or create it.

        Uses INSERT ... ON CONFLICT DO NOTHING so a concurrent creator never
        produces a second row or an error. Returns (conversation, created).
        """
        user1_id, user2_id = canonical_pair(user_a, user_b)
        now = utcnow()
        stmt = (
            upsert_insert(self.db, Conversation)
            .values(user1_id=user1_id, user2_id=user2_id, created_at=now, updated_at=now)
            .on_conflict_do_nothing(index_elements=["user1_id", "user2_id"])
            .returning(Conversation)
        )
        created = self.db.scalars(stmt).first()
        if created is not None:
            return created, True
        return self.get_by_pair(user1_id, user2_id), False

    def list_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        """
        Conversations the user participates in and has not soft-deleted,
        most recently active first, with the other participant's id and email.
        """
        other_user_id = case(
            (Conversation.user1_id == user_id, Conversation.user2_id),
            else_=Conversation.user1_id,
        )
        hidden = exists().where(
            and_(
                ConversationDeletedBy.conversation_id == Conversation.id,
                ConversationDeletedBy.user_id == user_id,
            )
        )
        rows = (
            self.db.query(
                Conversation.id,
                other_user_id.label("other_user_id"),
                User.email.label("other_user_email"),
                Conversation.created_at,
                Conversation.updated_at,
            )
            .join(User, User.id == other_user_id)
            .filter(
                or_(Conversation.user1_id == user_id, Conversation.user2_id == user_id),
                ~hidden,
            )
            .order_by(Conversation.updated_at.desc(), Conversation.id.desc())
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def touch(self, conversation: Conversation) -> None:
        """Bump updated_at so the conversation sorts as most recent."""
        conversation.updated_at = utcnow()
        self.db.flush()

    def get_deletion_mark(
        self, conversation_id: int, user_id: int
    ) -> Optional[ConversationDeletedBy]:
        return (
            self.db.query(ConversationDeletedBy)
            .filter(
                ConversationDeletedBy.conversation_id == conversation_id,
                ConversationDeletedBy.user_id == user_id,
            )
            .first()
        )

    def mark_deleted(self, conversation_id: int, user_id: int) -> bool:
        """
        Hide the conversation for user_id. An existing mark is left untouched so
        the first deletion timestamp wins. Returns True if a mark was created.
        """
        stmt = (
            upsert_insert(self.db, ConversationDeletedBy)
            .values(conversation_id=conversation_id, user_id=user_id, deleted_at=utcnow())
            .on_conflict_do_nothing(index_elements=["conversation_id", "user_id"])
            .returning(ConversationDeletedBy.id)
        )
        return self.db.execute(stmt).first() is not None

    def clear_deletion_mark(self, conversation_id: int, user_id: int) -> int:
        """Remove user_id's soft-delete mark, if any. Returns rows deleted."""
        return (
            self.db.query(ConversationDeletedBy)
            .filter(
                ConversationDeletedBy.conversation_id == conversation_id,
                ConversationDeletedBy.user_id == user_id,
            )
            .delete(synchronize_session=False)
        )
