"""
Base for commands that own a database transaction.

A command runs every statement of one operation on the request session and
commits once. Any failure rolls the whole unit back; driver errors surface as
ConflictError (unresolved uniqueness violation) or StoreError.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import AppError, ConflictError, StoreError


class BaseCommand:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.logger = logging.getLogger(self.__class__.__module__)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on success, roll back and translate errors otherwise."""
        try:
            yield
            self.db.commit()
        except AppError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            self.logger.warning(
                "%s rejected by a store constraint: %s",
                self.__class__.__name__,
                e.orig,
            )
            raise ConflictError("Request conflicts with existing data") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.exception("%s failed on the store", self.__class__.__name__)
            raise StoreError() from e
        except Exception:
            self.db.rollback()
            raise
