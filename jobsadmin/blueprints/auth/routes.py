from flask import current_app, jsonify, render_template, redirect, request, session, url_for, flash
from flask_login import login_user, logout_user, login_required, current_user
from . import bp
from .forms import LoginForm
from ...extensions import backend
from ...models.user import AdminUser
from ...services.backend import AuthError, BackendError

SESSION_USER = "admin_user"
SESSION_TOKEN = "access_token"


def _safe_next(target):
    # only allow local paths
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("index")


def _clear_session():
    session.pop(SESSION_USER, None)
    session.pop(SESSION_TOKEN, None)
    logout_user()


@bp.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("index"))
    form = LoginForm()
    if form.validate_on_submit():
        try:
            data = backend.client.sign_in_with_password(form.email.data, form.password.data)
        except AuthError:
            flash("Invalid credentials", "danger")
        except BackendError:
            current_app.logger.exception('sign in failed')
            flash("Sign in is unavailable right now. Please try again.", "danger")
        else:
            user = AdminUser.from_auth_user(data["user"])
            session[SESSION_USER] = user.to_session()
            session[SESSION_TOKEN] = data["access_token"]
            login_user(user)
            current_app.logger.info('admin %s signed in', user.email)
            return redirect(_safe_next(request.args.get("next")))
    return render_template("login.html", form=form)


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    token = session.get(SESSION_TOKEN)
    if token:
        try:
            backend.client.sign_out(token)
        except BackendError:
            current_app.logger.exception('remote sign out failed')
    _clear_session()
    flash("Signed out", "info")
    return redirect(url_for("auth.login"))


@bp.get("/me")
@login_required
def me():
    """Re-check the stored session against the backend."""
    token = session.get(SESSION_TOKEN)
    try:
        if not token:
            raise AuthError("No session")
        user = AdminUser.from_auth_user(backend.client.get_user(token))
    except AuthError:
        _clear_session()
        return jsonify({"error": "unauthenticated"}), 401
    except BackendError as e:
        current_app.logger.exception('fetching current user failed')
        return jsonify({"error": e.message}), 502
    session[SESSION_USER] = user.to_session()
    return jsonify(user.to_session())
