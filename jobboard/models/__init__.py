"""
Database models package.
"""

from jobboard.models.job import Job, JobType
from jobboard.models.user import User

__all__ = ["Job", "JobType", "User"]
