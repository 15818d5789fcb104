# jobportal/services/portal.py
"""
Business logic for the job portal.

PortalService sits between the routes and the repository:
- rejects structurally invalid input before any store round trip
- hashes passwords on signup and mints access tokens on login
- re-raises repository failures as ServiceError with the same message
"""
from __future__ import annotations

import logging

from jobportal.core.base import MAX_ID
from jobportal.core.security import TokenAuth, hash_password, verify_password
from jobportal.models import Company, Job, User
from jobportal.repository import PortalRepository, RepositoryError
from jobportal.schemas.auth import LoginIn, NewUser
from jobportal.schemas.company import NewCompany
from jobportal.schemas.job import NewJob

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    pass


def _require(value: str | None, name: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ServiceError(f"{name} is required")
    return cleaned


def _require_id(value: int, name: str) -> int:
    if value is None or not 0 < int(value) <= MAX_ID:
        raise ServiceError(f"invalid {name}")
    return int(value)


class PortalService:
    def __init__(self, repository: PortalRepository, token_auth: TokenAuth) -> None:
        self.repository = repository
        self.token_auth = token_auth

    # -----------------------
    # Users
    # -----------------------
    def signup(self, new_user: NewUser) -> User:
        username = _require(new_user.username, "username")
        email = _require(new_user.email, "email").lower()
        password = _require(new_user.password, "password")

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
        )
        try:
            return self.repository.create_user(user)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def login(self, credentials: LoginIn) -> str:
        email = _require(credentials.email, "email").lower()
        password = _require(credentials.password, "password")

        try:
            user = self.repository.user_by_email(email)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

        if not verify_password(password, user.password_hash):
            logger.info("Password mismatch for user id=%s", user.id)
            raise ServiceError("invalid email or password")

        return self.token_auth.generate_token(user.id)

    # -----------------------
    # Companies
    # -----------------------
    def add_company(self, new_company: NewCompany) -> Company:
        company = Company(
            name=_require(new_company.name, "company name"),
            location=_require(new_company.location, "company location"),
            field=_require(new_company.field, "company field"),
        )
        try:
            return self.repository.create_company(company)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def view_all_companies(self) -> list[Company]:
        try:
            return self.repository.companies()
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def view_company(self, cid: int) -> Company:
        cid = _require_id(cid, "company id")
        try:
            return self.repository.company_by_id(cid)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    # -----------------------
    # Jobs
    # -----------------------
    def add_job(self, new_job: NewJob, cid: int) -> Job:
        cid = _require_id(cid, "company id")
        job = Job(
            name=_require(new_job.name, "job name"),
            salary=(new_job.salary or "").strip(),
            notice_period=(new_job.notice_period or "").strip(),
        )
        job.cid = cid
        try:
            return self.repository.create_job(job)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def view_all_jobs(self) -> list[Job]:
        try:
            return self.repository.jobs()
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def view_jobs_by_company(self, cid: int) -> list[Job]:
        cid = _require_id(cid, "company id")
        try:
            return self.repository.jobs_by_company(cid)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc

    def view_job(self, jid: int) -> Job:
        jid = _require_id(jid, "job id")
        try:
            return self.repository.job_by_id(jid)
        except RepositoryError as exc:
            raise ServiceError(str(exc)) from exc
