from dataclasses import dataclass, field
from typing import List, Optional

from .base import RowMixin


JOB_STATUSES = ("active", "closed", "draft")


@dataclass
class Job(RowMixin):
    TABLE = "jobs"

    id: str
    job_title: str = ""
    description: Optional[str] = None
    deadline: Optional[str] = None
    company: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    working_hours: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    max_applicants: Optional[int] = None
    apply_link: Optional[str] = None
    company_id: Optional[str] = None
    employer_id: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class JobWithApplications:
    """A job row together with the applications submitted to it."""

    job: Job
    applications: List = field(default_factory=list)

    @property
    def id(self):
        return self.job.id

    @property
    def status(self):
        return self.job.status
