"""Company hiring-rate recalculation.

Runs after an application has been moved to ``hired``. The rate is a
point-in-time recomputation over every application to every job of the
company, not a counter: re-running it for the same state yields the same
value. Nothing here is transactional; two concurrent runs for one company
race and the last write wins.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from flask import current_app

from ..extensions import backend, rq
from ..models.application import Application
from ..models.company import Company
from ..models.job import Job


HIRED = "hired"


@dataclass
class HiringRateSnapshot:
    company_id: str
    hired: int
    total: int

    @property
    def rate(self) -> int:
        return compute_hiring_rate(self.hired, self.total)


def compute_hiring_rate(hired: int, total: int) -> int:
    """Percentage of hired over total, rounded half up to an integer.

    Integer arithmetic keeps exact .5 cases from drifting (1/8 -> 13).
    """
    if total <= 0:
        return 0
    return (200 * hired + total) // (2 * total)


class HiringRateRecalculator:
    def __init__(self, client):
        self.client = client

    def resolve_company_id(self, job_id) -> Optional[str]:
        if not job_id:
            return None
        job = self.client.get(Job.TABLE, job_id, columns="id,company_id")
        if not job:
            return None
        return job.get("company_id") or None

    def snapshot(self, company_id) -> Optional[HiringRateSnapshot]:
        jobs = self.client.select(Job.TABLE, columns="id", filters=[("company_id", "eq", company_id)])
        job_ids = [j["id"] for j in jobs]
        if not job_ids:
            # a company with no jobs keeps whatever rate it had
            return None

        # counts, not row reads: row responses are capped by the server's max-rows
        in_jobs = ("job_id", "in", job_ids)
        total = self.client.count(Application.TABLE, [in_jobs])
        hired = self.client.count(Application.TABLE, [in_jobs, ("status", "eq", HIRED)])
        return HiringRateSnapshot(company_id=company_id, hired=hired, total=total)

    def persist(self, snap: HiringRateSnapshot) -> int:
        rate = snap.rate
        self.client.update(Company.TABLE, snap.company_id, {
            "hiring_rate": rate,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        })
        return rate

    def recalculate_company(self, company_id) -> Optional[int]:
        snap = self.snapshot(company_id)
        if snap is None:
            current_app.logger.info('hiring rate: company %s has no jobs, skipped', company_id)
            return None
        rate = self.persist(snap)
        current_app.logger.info(
            'hiring rate: company %s -> %s%% (%s/%s)', company_id, rate, snap.hired, snap.total
        )
        return rate

    def recalculate(self, job_id, company_id=None) -> Optional[int]:
        """Best-effort recalculation for the company owning ``job_id``.

        Returns the persisted rate, or None when skipped or failed. Never raises.
        """
        try:
            if not company_id:
                company_id = self.resolve_company_id(job_id)
            if not company_id:
                current_app.logger.info('hiring rate: job %s has no company, skipped', job_id)
                return None
            return self.recalculate_company(company_id)
        except Exception:
            current_app.logger.exception('hiring rate recalculation failed for job %s', job_id)
            return None


def recalculate_hiring_rate(job_id, company_id=None):
    """Queue entry point; expects an app context (request or worker)."""
    return HiringRateRecalculator(backend.client).recalculate(job_id, company_id=company_id)


def schedule_hiring_rate(job_id, company_id=None):
    if current_app.config.get("HIRING_RATE_ASYNC", True):
        return rq.enqueue(recalculate_hiring_rate, job_id, company_id=company_id)
    return recalculate_hiring_rate(job_id, company_id=company_id)
