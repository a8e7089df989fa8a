"""User search API used to find people to invite or add as contacts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth.identity import CurrentUser, get_current_user
from app.db import get_db
from app.exceptions import ValidationError
from app.schemas.user import NameSearchRequest, UserListResponse, UserRead
from app.services.user_service import UserService

users_router = APIRouter(prefix="/users", tags=["User"])

MIN_EMAIL_QUERY_LENGTH = 2


@users_router.get("/search", response_model=UserListResponse)
def search_users(
    q: str = Query("", max_length=255),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserListResponse:
    """Case-insensitive email substring search, excluding the caller."""
    term = q.strip()
    if len(term) < MIN_EMAIL_QUERY_LENGTH:
        raise ValidationError("Search query must be at least 2 characters")
    users = UserService(db).search_by_email(term, exclude_user_id=current_user.id)
    return UserListResponse(users=[UserRead.model_validate(u) for u in users])


@users_router.post("/search-by-name", response_model=UserListResponse)
def search_users_by_name(
    data: NameSearchRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserListResponse:
    """Search by first and/or last name. One term matches either column."""
    first_name = (data.first_name or "").strip() or None
    last_name = (data.last_name or "").strip() or None
    if first_name is None and last_name is None:
        raise ValidationError("Name search is required")
    users = UserService(db).search_by_name(
        current_user.id, first_name=first_name, last_name=last_name
    )
    return UserListResponse(users=[UserRead.model_validate(u) for u in users])
