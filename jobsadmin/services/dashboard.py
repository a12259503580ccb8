"""Aggregate counts shown on the dashboard home page."""

from datetime import date, datetime, timezone

from ..models.application import Application
from ..models.company import Company
from ..models.freelancer import Freelancer
from ..models.job import Job
from ..models.stats import DashboardStats, MonthlyCount


def calculate_growth(current: int, previous: int) -> int:
    """Growth of ``current`` over ``previous`` in whole percent (half up)."""
    if previous == 0:
        return 100 if current > 0 else 0
    diff = current - previous
    # round half up on an integer ratio, also for negative growth
    return (200 * diff + previous) // (2 * previous)


def _shift_month(d: date, months: int) -> date:
    idx = d.year * 12 + (d.month - 1) + months
    return date(idx // 12, idx % 12 + 1, 1)


def last_six_months(today: date):
    """First day of each of the last six months, oldest first."""
    return [_shift_month(today, -i) for i in range(5, -1, -1)]


def month_label(d: date) -> str:
    return d.strftime("%b %Y")


def jobs_posted_by_month(created_at_values, today: date):
    months = last_six_months(today)
    counts = {m: 0 for m in months}
    for value in created_at_values:
        if not value:
            continue
        try:
            posted = datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
        except ValueError:
            continue
        key = date(posted.year, posted.month, 1)
        if key in counts:
            counts[key] += 1
    return [MonthlyCount(month=month_label(m), count=counts[m]) for m in months]


def fetch_dashboard_stats(client, today=None) -> DashboardStats:
    today = today or datetime.now(timezone.utc).date()
    one_month_ago = _shift_month(today, -1).isoformat()
    six_months_ago = _shift_month(today, -5).isoformat()

    total_companies = client.count(Company.TABLE)
    verified_companies = client.count(Company.TABLE, [("is_verified", "eq", True)])
    total_freelancers = client.count(Freelancer.TABLE)
    freelancers_before = client.count(Freelancer.TABLE, [("created_at", "lt", one_month_ago)])
    companies_before = client.count(Company.TABLE, [("created_at", "lt", one_month_ago)])

    recent_jobs = client.select(
        Job.TABLE,
        columns="created_at",
        filters=[("created_at", "gte", six_months_ago)],
        order="created_at",
        ascending=True,
    )

    return DashboardStats(
        total_companies=total_companies,
        verified_companies=verified_companies,
        pending_verifications=total_companies - verified_companies,
        total_jobs=client.count(Job.TABLE),
        active_jobs=client.count(Job.TABLE, [("status", "eq", "active")]),
        total_applications=client.count(Application.TABLE),
        pending_applications=client.count(Application.TABLE, [("status", "eq", "pending")]),
        total_freelancers=total_freelancers,
        freelancer_growth=calculate_growth(total_freelancers, freelancers_before),
        company_growth=calculate_growth(total_companies, companies_before),
        jobs_posted_by_month=jobs_posted_by_month([r.get("created_at") for r in recent_jobs], today),
    )
