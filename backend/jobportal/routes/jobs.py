# jobportal/routes/jobs.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from jobportal.auth.claims import Claims
from jobportal.core.base import MAX_ID
from jobportal.dependencies.request_context import get_trace_id, require_claims
from jobportal.dependencies.services import get_service
from jobportal.schemas.job import JobOut, NewJob
from jobportal.services import PortalService, ServiceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["jobs"])


def _service_failed(trace_id: str, action: str, exc: ServiceError) -> HTTPException:
    logger.error("trace_id=%s %s failed: %s", trace_id, action, exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post("/add/{cid}", response_model=JobOut)
def create_job(
    payload: NewJob,
    cid: int = Path(..., le=MAX_ID),
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),
    service: PortalService = Depends(get_service),
):
    try:
        job = service.add_job(payload, cid)
    except ServiceError as exc:
        raise _service_failed(trace_id, "add job", exc)
    logger.info("trace_id=%s user=%s created job id=%s for company=%s", trace_id, claims.subject, job.id, cid)
    return job


@router.get("/view/all", response_model=list[JobOut])
def all_jobs(
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),  # noqa: ARG001
    service: PortalService = Depends(get_service),
):
    try:
        return service.view_all_jobs()
    except ServiceError as exc:
        raise _service_failed(trace_id, "view jobs", exc)


@router.get("/job/view", response_model=list[JobOut])
def jobs_for_company(
    cid: int = Query(..., le=MAX_ID),
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),  # noqa: ARG001
    service: PortalService = Depends(get_service),
):
    try:
        return service.view_jobs_by_company(cid)
    except ServiceError as exc:
        raise _service_failed(trace_id, "view company jobs", exc)


@router.get("/viewjob/{job_id}", response_model=JobOut)
def job_by_id(
    job_id: int = Path(..., le=MAX_ID),
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),  # noqa: ARG001
    service: PortalService = Depends(get_service),
):
    try:
        return service.view_job(job_id)
    except ServiceError as exc:
        raise _service_failed(trace_id, "view job", exc)
