# services/info-producer-service/app/api/routers/callback_routes.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.errors import JobValidationError, TypeNotSupported
from app.core.registry import JobRegistry, get_registry
from app.models import JobInfo, StatusResponse

logger = logging.getLogger("app.api.callbacks")

router = APIRouter(tags=["callbacks"])

# ─────────────────────────────────────────────────────────────
# Supervision
# ─────────────────────────────────────────────────────────────
@router.get("/status", response_model=StatusResponse, summary="Producer supervision callback")
def producer_status() -> StatusResponse:
    return StatusResponse(status="All is well!")


# ─────────────────────────────────────────────────────────────
# Jobs
# ─────────────────────────────────────────────────────────────
@router.post("/jobs", summary="Job registration callback")
def add_job(body: JobInfo, registry: JobRegistry = Depends(get_registry)) -> Response:
    try:
        registry.add_job(body)
    except JobValidationError as e:
        logger.info("Rejected job %r: %s", body.info_job_identity, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/jobs/{info_job_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Job deletion callback")
def delete_job(info_job_id: str, registry: JobRegistry = Depends(get_registry)) -> Response:
    if not registry.remove_job(info_job_id):
        raise HTTPException(status_code=404, detail=f"job not found: {info_job_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/jobs/{info_type_id}", response_model=List[JobInfo])
def list_jobs(info_type_id: str, registry: JobRegistry = Depends(get_registry)) -> List[JobInfo]:
    try:
        jobs = registry.jobs_for_type(info_type_id)
    except TypeNotSupported as e:
        raise HTTPException(status_code=404, detail=str(e))
    return list(jobs.values())


@router.get("/types", response_model=List[str])
def list_types(registry: JobRegistry = Depends(get_registry)) -> List[str]:
    return registry.supported_type_ids()
