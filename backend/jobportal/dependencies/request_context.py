# jobportal/dependencies/request_context.py
from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobportal.auth.claims import Claims
from jobportal.core.errors import INTERNAL_SERVER_ERROR, UNAUTHORIZED
from jobportal.core.security import InvalidTokenError, TokenAuth, get_token_auth

logger = logging.getLogger(__name__)

# Attribute names on request.state
TRACE_ID_KEY = "trace_id"
CLAIMS_KEY = "claims"

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_trace_id(request: Request) -> str:
    """
    Every request must carry a trace id set by the trace middleware.
    A missing one means the app was assembled without it.
    """
    trace_id = getattr(request.state, TRACE_ID_KEY, None)
    if not trace_id:
        logger.error("Trace id missing from request context: %s %s", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_SERVER_ERROR,
        )
    return trace_id


def require_claims(
    request: Request,
    trace_id: str = Depends(get_trace_id),
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    token_auth: TokenAuth = Depends(get_token_auth),
) -> Claims:
    """
    Validates:
      - trace id present (via get_trace_id)
      - Authorization: Bearer <token>
      - token signature + exp + iss
    Returns:
      - Claims, also stored on request.state
    """
    claims = getattr(request.state, CLAIMS_KEY, None)
    if isinstance(claims, Claims):
        return claims

    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        logger.info("trace_id=%s rejected: missing bearer token", trace_id)
        raise _unauthorized()

    try:
        claims = token_auth.validate_token(creds.credentials)
    except InvalidTokenError as exc:
        logger.warning("trace_id=%s rejected token: %s", trace_id, exc)
        raise _unauthorized()

    setattr(request.state, CLAIMS_KEY, claims)
    return claims
