# services/info-producer-service/app/api/routers/health_routes.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.config import settings
from app.core.registry import JobRegistry, get_registry

router = APIRouter(tags=["meta"])


@router.get("/health", summary="Liveness probe")
def health(registry: JobRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """
    Liveness probe: process is up and app is constructed.
    """
    return {
        "status": "ok",
        "service": settings.service_name,
        "types": len(registry.supported_type_ids()),
        "jobs": registry.job_count(),
        "at": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/version", summary="Service version")
def version() -> Dict[str, Any]:
    return {
        "service": settings.service_name,
        "version": settings.service_version,
    }
