from urllib.parse import urlsplit

from flask import abort, current_app, render_template, request, redirect, url_for, flash
from flask_login import login_required
from . import bp
from ...extensions import backend
from ...services import companies as svc
from ...services.backend import BackendError
from ...utils.decorators import handles_backend_errors


def _back():
    # only same-site paths from the Referer
    ref = request.referrer
    if ref:
        parts = urlsplit(ref)
        local = parts.path.startswith("/") and not parts.path.startswith(("//", "/\\"))
        if parts.netloc in ("", request.host) and local:
            return parts.path + (f"?{parts.query}" if parts.query else "")
    return url_for("companies.list_companies")


@bp.get("")
@login_required
def list_companies():
    tab = request.args.get("tab", "all")
    if tab not in svc.COMPANY_TABS and tab != "unverified":
        tab = "all"

    try:
        companies = svc.fetch_all_companies(backend.client)
        if tab == "unverified":
            shown = svc.fetch_unverified_companies(backend.client)
        else:
            shown = svc.filter_companies(companies, tab)
    except BackendError:
        current_app.logger.exception('loading companies failed')
        flash("Failed to load companies", "danger")
        companies, shown = [], []

    # badges always count the full list
    counts = svc.tab_counts(companies)
    shown = svc.sort_companies(shown)
    return render_template("companies/list.html", companies=shown, counts=counts, tab=tab)


@bp.get("/<company_id>")
@login_required
@handles_backend_errors("Failed to load company", "companies.list_companies")
def detail(company_id):
    company = svc.get_company(backend.client, company_id)
    if company is None:
        abort(404)
    return render_template("companies/detail.html", company=company)


@bp.post("/<company_id>/verify")
@login_required
@handles_backend_errors("Failed to verify company", "companies.list_companies")
def verify(company_id):
    company = svc.verify_company(backend.client, company_id)
    flash(f"{company.company_name or 'Company'} verified successfully!", "success")
    return redirect(_back())


@bp.post("/<company_id>/reject")
@login_required
@handles_backend_errors("Failed to reject company", "companies.list_companies")
def reject(company_id):
    company = svc.reject_company(backend.client, company_id)
    flash(f"{company.company_name or 'Company'} verification rejected", "success")
    return redirect(_back())
