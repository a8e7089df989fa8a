"""Database connectivity and overall health reporting."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


class HealthService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_connection_status(self) -> Dict[str, Any]:
        """Round-trip the database. Failures are reported, not raised."""
        bind = self.db.get_bind()
        try:
            self.db.execute(text("SELECT 1")).scalar()
        except SQLAlchemyError as e:
            logger.warning("Database connection check failed: %s", e)
            self.db.rollback()
            return {"connected": False, "error": str(e.__class__.__name__)}
        url = bind.url
        return {
            "connected": True,
            "database_driver": url.get_backend_name(),
            "database_name": url.database,
            "server_version": ".".join(
                str(part) for part in (bind.dialect.server_version_info or ())
            )
            or None,
            "current_time": datetime.now(timezone.utc).isoformat(),
        }

    def get_health_status(self) -> Dict[str, Any]:
        db_status = self.get_connection_status()
        return {
            "status": "healthy" if db_status["connected"] else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": db_status,
            "uptime": round(time.monotonic() - _STARTED_AT, 3),
        }
