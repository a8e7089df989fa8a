"""UserContact model: directed edge owner -> contact used to gate location alerts."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin


class UserContact(Base, TimestampMixin):
    __tablename__ = "user_contacts"
    __table_args__ = (
        UniqueConstraint("user_id", "contact_user_id", name="uq_user_contacts_pair"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    contact_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    contact_user = relationship("User", foreign_keys=[contact_user_id])

    @property
    def email(self) -> str | None:
        return self.contact_user.email if self.contact_user is not None else None

    @property
    def first_name(self) -> str | None:
        return self.contact_user.first_name if self.contact_user is not None else None

    @property
    def last_name(self) -> str | None:
        return self.contact_user.last_name if self.contact_user is not None else None
