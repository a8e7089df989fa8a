"""Directed contact edges (owner -> contact) that gate location alerts."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models.contact import UserContact
from app.models.mixins import utcnow
from app.utils.db.upsert import upsert_insert


class ContactService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_edge(
        self, owner_id: int, contact_user_id: int, for_update: bool = False
    ) -> Optional[UserContact]:
        """Return the owner -> contact edge. The reverse edge is not consulted."""
        query = self.db.query(UserContact).filter(
            UserContact.user_id == owner_id,
            UserContact.contact_user_id == contact_user_id,
        )
        if for_update:
            query = query.with_for_update()
        return query.first()

    def upsert_contact(self, owner_id: int, contact_user_id: int) -> UserContact:
        """Insert the edge; on conflict only updated_at is refreshed."""
        now = utcnow()
        stmt = upsert_insert(self.db, UserContact).values(
            user_id=owner_id,
            contact_user_id=contact_user_id,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "contact_user_id"],
            set_={"updated_at": now},
        ).returning(UserContact)
        return self.db.scalars(
            stmt, execution_options={"populate_existing": True}
        ).one()

    def list_contacts(self, owner_id: int) -> List[UserContact]:
        """Contacts added by owner_id, newest first."""
        return (
            self.db.query(UserContact)
            .options(joinedload(UserContact.contact_user))
            .filter(UserContact.user_id == owner_id)
            .order_by(UserContact.created_at.desc(), UserContact.id.desc())
            .all()
        )

    def delete_contact(self, contact_id: int, owner_id: int) -> bool:
        """Delete an edge owned by owner_id. Returns False if no such edge."""
        deleted = (
            self.db.query(UserContact)
            .filter(UserContact.id == contact_id, UserContact.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0
