# jobportal/routes/companies.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from jobportal.auth.claims import Claims
from jobportal.core.base import MAX_ID
from jobportal.dependencies.request_context import get_trace_id, require_claims
from jobportal.dependencies.services import get_service
from jobportal.schemas.company import CompanyOut, NewCompany
from jobportal.services import PortalService, ServiceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["companies"])


def _service_failed(trace_id: str, action: str, exc: ServiceError) -> HTTPException:
    logger.error("trace_id=%s %s failed: %s", trace_id, action, exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post("/add", response_model=CompanyOut)
def add_company(
    payload: NewCompany,
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),
    service: PortalService = Depends(get_service),
):
    try:
        company = service.add_company(payload)
    except ServiceError as exc:
        raise _service_failed(trace_id, "add company", exc)
    logger.info("trace_id=%s user=%s created company id=%s", trace_id, claims.subject, company.id)
    return company


@router.get("/view/allcomp", response_model=list[CompanyOut])
def view_all_companies(
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),  # noqa: ARG001
    service: PortalService = Depends(get_service),
):
    try:
        return service.view_all_companies()
    except ServiceError as exc:
        raise _service_failed(trace_id, "view companies", exc)


@router.get("/viewcompany/{company_id}", response_model=CompanyOut)
def view_company(
    company_id: int = Path(..., le=MAX_ID),
    trace_id: str = Depends(get_trace_id),
    claims: Claims = Depends(require_claims),  # noqa: ARG001
    service: PortalService = Depends(get_service),
):
    try:
        return service.view_company(company_id)
    except ServiceError as exc:
        raise _service_failed(trace_id, "view company", exc)
