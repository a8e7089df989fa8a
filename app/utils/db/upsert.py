"""Dialect-aware INSERT supporting ON CONFLICT clauses.

PostgreSQL and SQLite expose the same ``on_conflict_do_nothing`` /
``on_conflict_do_update`` API on their dialect-specific insert constructs.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_insert(db: Session, model: Any):
    """Return an insert construct for ``model`` that supports ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    try:
        return _INSERTS[dialect](model)
    except KeyError:
        raise NotImplementedError(
            f"ON CONFLICT upserts are not supported for dialect {dialect!r}"
        ) from None
