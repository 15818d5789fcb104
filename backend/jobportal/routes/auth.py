# jobportal/routes/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from jobportal.dependencies.request_context import get_trace_id
from jobportal.dependencies.services import get_service
from jobportal.schemas.auth import LoginIn, NewUser, TokenOut, UserOut
from jobportal.services import PortalService, ServiceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=UserOut)
def signup(
    payload: NewUser,
    trace_id: str = Depends(get_trace_id),
    service: PortalService = Depends(get_service),
):
    try:
        user = service.signup(payload)
    except ServiceError as exc:
        logger.error("trace_id=%s signup failed: %s", trace_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.info("trace_id=%s registered user id=%s", trace_id, user.id)
    return user


@router.post("/signin", response_model=TokenOut)
def signin(
    payload: LoginIn,
    trace_id: str = Depends(get_trace_id),
    service: PortalService = Depends(get_service),
):
    try:
        token = service.login(payload)
    except ServiceError as exc:
        logger.error("trace_id=%s signin failed: %s", trace_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return {"access_token": token, "token_type": "bearer"}
