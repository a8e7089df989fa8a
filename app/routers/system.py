from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.system import DatabaseStatus, HealthRead
from app.services.health_service import HealthService

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthRead)
def health(db: Session = Depends(get_db)):
    """Liveness plus database round-trip. 503 when the database is unreachable."""
    status = HealthService(db).get_health_status()
    body = HealthRead(**status)
    if status["status"] != "healthy":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body


@router.get("/db/status", response_model=DatabaseStatus)
def db_status(db: Session = Depends(get_db)):
    status = HealthService(db).get_connection_status()
    body = DatabaseStatus(**status)
    if not status["connected"]:
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
