"""Read access to users: existence checks and search."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from app.models.user import User

EMAIL_SEARCH_LIMIT = 10
NAME_SEARCH_LIMIT = 20


def _contains_pattern(term: str) -> str:
    """Build an ILIKE substring pattern with LIKE wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class UserService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def user_exists(self, user_id: int) -> bool:
        return (
            self.db.query(User.id).filter(User.id == user_id).first() is not None
        )

    def search_by_email(
        self, term: str, exclude_user_id: int, limit: int = EMAIL_SEARCH_LIMIT
    ) -> List[User]:
        """Case-insensitive substring match on email, excluding the caller."""
        return (
            self.db.query(User)
            .filter(
                User.email.ilike(_contains_pattern(term), escape="\\"),
                User.id != exclude_user_id,
            )
            .order_by(User.email)
            .limit(limit)
            .all()
        )

    def search_by_name(
        self,
        exclude_user_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        limit: int = NAME_SEARCH_LIMIT,
    ) -> List[User]:
        """
        Search users by name, excluding the caller.

        A single term matches either first or last name. When both terms are
        given, first_name must match the first name AND last_name the last name.
        """
        query = self.db.query(User).filter(User.id != exclude_user_id)
        if first_name and last_name:
            query = query.filter(
                and_(
                    User.first_name.ilike(_contains_pattern(first_name), escape="\\"),
                    User.last_name.ilike(_contains_pattern(last_name), escape="\\"),
                )
            )
        else:
            term = first_name or last_name
            pattern = _contains_pattern(term or "")
            query = query.filter(
                or_(
                    User.first_name.ilike(pattern, escape="\\"),
                    User.last_name.ilike(pattern, escape="\\"),
                )
            )
        return query.order_by(User.id).limit(limit).all()
