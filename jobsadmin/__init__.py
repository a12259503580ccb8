from flask import Flask, current_app, flash, render_template, session
from flask_login import login_required

from .extensions import backend, csrf, login_manager, rq


def create_app(config_overrides=None):
    """App factory. ``config_overrides`` is applied on top of ``config.Config``."""
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if config_overrides:
        app.config.update(config_overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    backend.init_app(app)
    csrf.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'warning'
    rq.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import AdminUser
        data = session.get('admin_user')
        if not data or data.get('id') != user_id:
            return None
        return AdminUser.from_session(data)

    from .blueprints.auth import bp as auth_bp
    from .blueprints.companies import bp as companies_bp
    from .blueprints.jobs import bp as jobs_bp
    from .blueprints.freelancers import bp as freelancers_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(companies_bp, url_prefix="/companies")
    app.register_blueprint(jobs_bp, url_prefix="/jobs")
    app.register_blueprint(freelancers_bp, url_prefix="/freelancers")

    @app.get('/')
    @login_required
    def index():
        from .services.backend import BackendError
        from .services.dashboard import fetch_dashboard_stats

        stats = None
        try:
            stats = fetch_dashboard_stats(backend.client)
        except BackendError:
            current_app.logger.exception('loading dashboard stats failed')
            flash('Failed to load dashboard statistics', 'danger')

        series = {'labels': [], 'jobs': []}
        if stats:
            series['labels'] = [m.month for m in stats.jobs_posted_by_month]
            series['jobs'] = [m.count for m in stats.jobs_posted_by_month]
        return render_template('home.html', stats=stats, series=series)

    return app
