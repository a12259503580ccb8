from flask import current_app

from ..jobs.hiring_rate import HIRED, schedule_hiring_rate
from ..models.application import Application, APPLICATION_SELECT, APPLICATION_STATUSES


def fetch_all_applications(client):
    rows = client.select(Application.TABLE, columns=APPLICATION_SELECT, order="created_at")
    return [Application.from_row(r) for r in rows]


def fetch_applications_for_job(client, job_id):
    rows = client.select(
        Application.TABLE,
        columns=APPLICATION_SELECT,
        filters=[("job_id", "eq", job_id)],
        order="created_at",
    )
    return [Application.from_row(r) for r in rows]


def application_status_counts(applications):
    return {s: sum(1 for a in applications if a.status == s) for s in APPLICATION_STATUSES}


def update_application_status(client, application_id, status):
    """Set an application's status and return the updated row.

    Moving an application to ``hired`` also schedules the owning company's
    hiring-rate recalculation. That follow-up is best effort: whatever it
    does, the status change has already been stored and is reported as such.
    """
    if status not in APPLICATION_STATUSES:
        raise ValueError(f"invalid application status: {status}")

    row = client.update(Application.TABLE, application_id, {"status": status}, columns=APPLICATION_SELECT)
    app = Application.from_row(row)

    if app.status == HIRED:
        try:
            schedule_hiring_rate(app.job_id, company_id=app.company_id)
        except Exception:
            current_app.logger.exception('could not schedule hiring rate for application %s', app.id)
    return app
