from dataclasses import dataclass
from typing import List, Optional

from .base import RowMixin


APPLICATION_STATUSES = ("pending", "in-review", "shortlisted", "rejected", "hired")

# select clause used wherever an application is shown with its job and applicant
APPLICATION_SELECT = (
    "*,jobs(id,job_title,company,company_id),"
    "freelancers(id,email,professional_title)"
)


@dataclass
class Application(RowMixin):
    TABLE = "applications"
    # the store spells these two columns this way
    COLUMN_MAP = {"cover_later": "cover_letter", "protfolio_links": "portfolio_links"}

    id: str
    applicant_id: Optional[str] = None
    job_id: Optional[str] = None
    job_title: str = "Unknown Job"
    company: Optional[str] = None
    company_id: Optional[str] = None
    applicant_name: str = "Unknown Applicant"
    applicant_email: Optional[str] = None
    status: str = "pending"
    cover_letter: Optional[str] = None
    portfolio_links: Optional[List[str]] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        app = super().from_row(row)
        app.status = row.get("status") or "pending"

        job = row.get("jobs") or {}
        app.job_title = job.get("job_title") or "Unknown Job"
        app.company = job.get("company")
        app.company_id = job.get("company_id")

        applicant = row.get("freelancers") or {}
        app.applicant_name = (
            applicant.get("professional_title") or applicant.get("email") or "Unknown Applicant"
        )
        app.applicant_email = applicant.get("email")
        return app
