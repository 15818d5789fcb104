# jobportal/repository/sql.py
"""
SQLAlchemy implementation of the portal repository.

Responsibilities:
- Running one store operation per method against the request's session
- Rolling back failed writes
- Turning SQLAlchemy errors and missing rows into RepositoryError messages
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobportal.models import Company, Job, User
from jobportal.repository.interface import PortalRepository, RepositoryError

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError for ints it cannot bind; SQLAlchemy passes it through unwrapped.
STORE_ERRORS = (SQLAlchemyError, OverflowError)


class SqlPortalRepository(PortalRepository):
    def __init__(self, db: Session) -> None:
        self.db = db

    def _create(self, obj, failure: str):
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except STORE_ERRORS as exc:
            self.db.rollback()
            logger.info("%s: %s", failure, exc)
            raise RepositoryError(failure) from exc
        return obj

    def _query(self, fn, failure: str):
        try:
            return fn()
        except STORE_ERRORS as exc:
            logger.info("%s: %s", failure, exc)
            raise RepositoryError(failure) from exc

    # -----------------------
    # Users
    # -----------------------
    def create_user(self, user: User) -> User:
        return self._create(user, "could not create the user")

    def user_by_email(self, email: str) -> User:
        failure = "could not find the user"
        user = self._query(
            lambda: self.db.query(User).filter(User.email == email).first(),
            failure,
        )
        if user is None:
            logger.info("%s: no user with email=%s", failure, email)
            raise RepositoryError(failure)
        return user

    # -----------------------
    # Companies
    # -----------------------
    def create_company(self, company: Company) -> Company:
        return self._create(company, "could not create the company")

    def companies(self) -> list[Company]:
        return self._query(
            lambda: self.db.query(Company).order_by(Company.id).all(),
            "could not find the companies",
        )

    def company_by_id(self, cid: int) -> Company:
        failure = "could not find the company"
        company = self._query(lambda: self.db.get(Company, cid), failure)
        if company is None:
            logger.info("%s: no company with id=%s", failure, cid)
            raise RepositoryError(failure)
        return company

    # -----------------------
    # Jobs
    # -----------------------
    def create_job(self, job: Job) -> Job:
        return self._create(job, "could not create the job")

    def jobs(self) -> list[Job]:
        return self._query(
            lambda: self.db.query(Job).order_by(Job.id).all(),
            "could not find the jobs",
        )

    def jobs_by_company(self, cid: int) -> list[Job]:
        return self._query(
            lambda: self.db.query(Job).filter(Job.cid == cid).order_by(Job.id).all(),
            "could not find the jobs",
        )

    def job_by_id(self, jid: int) -> Job:
        failure = "could not find the job"
        job = self._query(lambda: self.db.get(Job, jid), failure)
        if job is None:
            logger.info("%s: no job with id=%s", failure, jid)
            raise RepositoryError(failure)
        return job
