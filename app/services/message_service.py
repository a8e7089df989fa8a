"""Message CRUD, visible-window paging and read tracking."""

from __future__ import annotations

from typing import List

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, joinedload

from app.constants.statuses import DEFAULT_MESSAGE_TYPE
from app.models.conversation import ConversationDeletedBy
from app.models.message import Message
from app.models.mixins import utcnow


class MessageService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create_message(
        self,
        conversation_id: int,
        sender_id: int,
        content: str,
        message_type: str = DEFAULT_MESSAGE_TYPE,
    ) -> Message:
        now = utcnow()
        msg = Message(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            message_type=message_type or DEFAULT_MESSAGE_TYPE,
            is_read=False,
            created_at=now,
            updated_at=now,
        )
        self.db.add(msg)
        self.db.flush()
        return msg

    def get_visible_messages(
        self,
        conversation_id: int,
        viewer_id: int,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Message]:
        """
        Page of messages visible to viewer_id, returned oldest first.

        limit/offset are applied to the newest-first ordering, then the page is
        reversed. If the viewer holds a soft-delete mark, only messages created
        strictly after the mark are visible.
        """
        mark = and_(
            ConversationDeletedBy.conversation_id == Message.conversation_id,
            ConversationDeletedBy.user_id == viewer_id,
        )
        page = (
            self.db.query(Message)
            .options(joinedload(Message.sender))
            .outerjoin(ConversationDeletedBy, mark)
            .filter(
                Message.conversation_id == conversation_id,
                or_(
                    ConversationDeletedBy.id.is_(None),
                    Message.created_at > ConversationDeletedBy.deleted_at,
                ),
            )
            .order_by(Message.created_at.desc(), Message.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        page.reverse()
        return page

    def mark_read_from_counterpart(self, conversation_id: int, reader_id: int) -> int:
        """Mark every unread message not sent by reader_id as read. Returns rows updated."""
        return (
            self.db.query(Message)
            .filter(
                Message.conversation_id == conversation_id,
                Message.sender_id != reader_id,
                Message.is_read.is_(False),
            )
            .update({Message.is_read: True}, synchronize_session=False)
        )
