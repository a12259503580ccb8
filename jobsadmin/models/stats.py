from dataclasses import dataclass, field
from typing import List


@dataclass
class MonthlyCount:
    month: str
    count: int


@dataclass
class DashboardStats:
    total_companies: int = 0
    verified_companies: int = 0
    pending_verifications: int = 0
    total_jobs: int = 0
    active_jobs: int = 0
    total_applications: int = 0
    pending_applications: int = 0
    total_freelancers: int = 0
    freelancer_growth: int = 0
    company_growth: int = 0
    jobs_posted_by_month: List[MonthlyCount] = field(default_factory=list)
