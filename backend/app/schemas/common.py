"""Common/shared schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "OK"
    timestamp: datetime
    database: str
    uptime: float


class ErrorResponse(BaseModel):
    error: str
