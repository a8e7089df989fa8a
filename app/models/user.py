"""User model. Accounts are owned by the identity service; only the columns
this API reads are mapped.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from app.db import Base
from app.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
