from jobportal.models.company import Company
from jobportal.models.job import Job
from jobportal.models.user import User

__all__ = ["Company", "Job", "User"]
