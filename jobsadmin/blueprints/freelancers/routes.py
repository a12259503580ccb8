from flask import abort, current_app, render_template, request, flash
from flask_login import login_required
from . import bp
from .forms import FreelancerFilterForm
from ...extensions import backend
from ...services import freelancers as svc
from ...services.backend import BackendError
from ...utils.decorators import handles_backend_errors


@bp.get("")
@login_required
def list_freelancers():
    try:
        freelancers = svc.fetch_all_freelancers(backend.client)
    except BackendError:
        current_app.logger.exception('loading freelancers failed')
        flash("Failed to load freelancers", "danger")
        freelancers = []

    form = FreelancerFilterForm(request.args)
    locations = svc.unique_locations(freelancers)
    form.location.choices = [("all", "All locations")] + [(loc, loc) for loc in locations]

    completion = form.completion.data if form.completion.data in svc.COMPLETION_BUCKETS else "all"
    location = form.location.data or "all"
    shown = svc.filter_freelancers(freelancers, query=form.q.data, completion=completion, location=location)
    return render_template(
        "freelancers/list.html",
        form=form,
        freelancers=shown,
        total=len(freelancers),
    )


@bp.get("/<freelancer_id>")
@login_required
@handles_backend_errors("Failed to load freelancer", "freelancers.list_freelancers")
def detail(freelancer_id):
    freelancer = svc.get_freelancer(backend.client, freelancer_id)
    if freelancer is None:
        abort(404)
    return render_template("freelancers/detail.html", f=freelancer)
