from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from jobportal.core.database import get_db
from jobportal.core.security import TokenAuth, get_token_auth
from jobportal.repository import SqlPortalRepository
from jobportal.services import PortalService


def get_service(
    db: Session = Depends(get_db),
    token_auth: TokenAuth = Depends(get_token_auth),
) -> PortalService:
    return PortalService(SqlPortalRepository(db), token_auth)
