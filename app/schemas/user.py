"""Pydantic schemas for user lookup and search."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from app.schemas.common import Envelope


class UserRead(BaseModel):
    """Public identity of a user as returned by searches."""

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None

    model_config = {"from_attributes": True}


class NameSearchRequest(BaseModel):
    """Request body for searching users by first and/or last name."""

    first_name: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("firstName", "first_name"),
    )
    last_name: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("lastName", "last_name"),
    )

    model_config = {"extra": "forbid"}


class UserListResponse(Envelope):
    users: list[UserRead]
