"""Pydantic schemas for the unauthenticated health endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class DatabaseStatus(BaseModel):
    connected: bool
    database_driver: str | None = None
    database_name: str | None = None
    server_version: str | None = None
    current_time: str | None = None
    error: str | None = None


class HealthRead(BaseModel):
    status: str
    timestamp: str
    database: DatabaseStatus
    uptime: float
