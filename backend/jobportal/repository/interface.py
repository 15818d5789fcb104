"""
Repository interface for job portal persistence.

Services depend on this interface only, so tests can substitute an in-memory
fake for the SQL implementation.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from jobportal.models import Company, Job, User


class RepositoryError(Exception):
    """A storage failure, already phrased for the caller."""


class PortalRepository(ABC):
    """
    Abstract repository for users, companies and jobs.

    Every method raises RepositoryError on failure; lookups that find nothing
    are failures too.
    """

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Persist a new user and return it with its id populated."""

    @abstractmethod
    def user_by_email(self, email: str) -> User:
        """Fetch the user registered under ``email``."""

    @abstractmethod
    def create_company(self, company: Company) -> Company:
        """Persist a new company."""

    @abstractmethod
    def companies(self) -> list[Company]:
        """List every company."""

    @abstractmethod
    def company_by_id(self, cid: int) -> Company:
        """Fetch one company."""

    @abstractmethod
    def create_job(self, job: Job) -> Job:
        """Persist a new job. ``job.cid`` must reference an existing company."""

    @abstractmethod
    def jobs(self) -> list[Job]:
        """List every job."""

    @abstractmethod
    def jobs_by_company(self, cid: int) -> list[Job]:
        """List the jobs posted under one company."""

    @abstractmethod
    def job_by_id(self, jid: int) -> Job:
        """Fetch one job."""
