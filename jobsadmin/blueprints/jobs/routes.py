from flask import abort, current_app, render_template, request, redirect, url_for, flash
from flask_login import login_required
from . import bp
from .forms import ApplicationStatusForm, JobStatusForm
from ...extensions import backend
from ...models.job import JOB_STATUSES
from ...services import applications as app_svc
from ...services import jobs as job_svc
from ...services.backend import BackendError
from ...utils.decorators import handles_backend_errors


@bp.get("")
@login_required
def list_jobs():
    status = request.args.get("status", "all")
    if status not in JOB_STATUSES:
        status = "all"

    try:
        jobs = job_svc.fetch_all_jobs(backend.client)
        applications = app_svc.fetch_all_applications(backend.client)
    except BackendError:
        current_app.logger.exception('loading jobs failed')
        flash("Failed to load jobs", "danger")
        jobs, applications = [], []

    merged = job_svc.merge_jobs_with_applications(jobs, applications)
    return render_template(
        "jobs/list.html",
        items=job_svc.filter_jobs_by_status(merged, status),
        counts=job_svc.job_status_counts(jobs),
        status=status,
        statuses=JOB_STATUSES,
    )


@bp.get("/<job_id>")
@login_required
@handles_backend_errors("Failed to load job", "jobs.list_jobs")
def detail(job_id):
    job = job_svc.get_job(backend.client, job_id)
    if job is None:
        abort(404)
    applications = app_svc.fetch_applications_for_job(backend.client, job_id)
    return render_template(
        "jobs/detail.html",
        job=job,
        applications=applications,
        app_counts=app_svc.application_status_counts(applications),
        job_form=JobStatusForm(status=job.status),
        app_form=ApplicationStatusForm(),
    )


@bp.post("/<job_id>/status")
@login_required
@handles_backend_errors("Failed to update job status", "jobs.detail", job_id="job_id")
def update_status(job_id):
    form = JobStatusForm()
    if not form.validate_on_submit():
        flash("Failed to update job status", "danger")
        return redirect(url_for("jobs.detail", job_id=job_id))
    job_svc.update_job_status(backend.client, job_id, form.status.data)
    flash("Job status updated successfully!", "success")
    return redirect(url_for("jobs.detail", job_id=job_id))


@bp.post("/applications/<application_id>/status")
@login_required
@handles_backend_errors("Failed to update application status", "jobs.list_jobs")
def update_application_status(application_id):
    form = ApplicationStatusForm()
    back = request.form.get("job_id")
    target = url_for("jobs.detail", job_id=back) if back else url_for("jobs.list_jobs")
    if not form.validate_on_submit():
        flash("Failed to update application status", "danger")
        return redirect(target)
    app_svc.update_application_status(backend.client, application_id, form.status.data)
    flash("Application status updated successfully!", "success")
    return redirect(target)
