from jobportal.repository.interface import PortalRepository, RepositoryError
from jobportal.repository.sql import SqlPortalRepository

__all__ = ["PortalRepository", "RepositoryError", "SqlPortalRepository"]
