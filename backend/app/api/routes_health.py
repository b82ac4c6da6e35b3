"""Health check endpoints."""
from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.core.db import ping
from app.schemas.common import HealthStatus

router = APIRouter(prefix="/api/health", tags=["health"])

# Process start, shared by every app built in this interpreter.
STARTED_AT = time.monotonic()


@router.get("", response_model=HealthStatus)
def health(request: Request) -> HealthStatus:
    connected = ping(request.app.state.engine)
    return HealthStatus(
        status="OK",
        timestamp=datetime.now(tz=timezone.utc),
        database="connected" if connected else "disconnected",
        uptime=time.monotonic() - STARTED_AT,
    )
