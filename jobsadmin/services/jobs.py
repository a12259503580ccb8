from datetime import datetime, timezone

from ..models.job import Job, JobWithApplications, JOB_STATUSES


def fetch_all_jobs(client):
    rows = client.select(Job.TABLE, order="created_at")
    return [Job.from_row(r) for r in rows]


def get_job(client, job_id):
    row = client.get(Job.TABLE, job_id)
    return Job.from_row(row) if row else None


def update_job_status(client, job_id, status):
    if status not in JOB_STATUSES:
        raise ValueError(f"invalid job status: {status}")
    row = client.update(Job.TABLE, job_id, {
        "status": status,
        "updated_at": datetime.now(timezone.utc).isoformat(),
    })
    return Job.from_row(row)


def merge_jobs_with_applications(jobs, applications):
    by_job = {}
    for app in applications:
        by_job.setdefault(app.job_id, []).append(app)
    return [JobWithApplications(job=j, applications=by_job.get(j.id, [])) for j in jobs]


def filter_jobs_by_status(items, status="all"):
    if not status or status == "all":
        return list(items)
    return [i for i in items if i.status == status]


def job_status_counts(jobs):
    counts = {"all": len(jobs)}
    for s in JOB_STATUSES:
        counts[s] = sum(1 for j in jobs if j.status == s)
    return counts
