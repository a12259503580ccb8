from functools import wraps
from flask import current_app, flash, redirect, request, url_for

from ..services.backend import AuthError, BackendError, NotFound


def handles_backend_errors(failure_message, endpoint, **endpoint_kwargs):
    """Turn a failed backend action into a flash message and a redirect.

    ``endpoint`` is where the user lands on failure; ``endpoint_kwargs`` may
    name view arguments to forward (``{"company_id": "company_id"}``).
    Expired sessions are sent back to the login page instead.
    """
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except AuthError:
                current_app.logger.warning('backend rejected session during %s', request.path)
                flash("Your session has expired. Please sign in again.", "warning")
                return redirect(url_for("auth.login", next=request.path))
            except (BackendError, ValueError) as e:
                if isinstance(e, NotFound):
                    current_app.logger.warning('%s: %s', failure_message, e)
                else:
                    current_app.logger.exception(failure_message)
                flash(failure_message, "danger")
                target = {k: kwargs.get(v) for k, v in endpoint_kwargs.items()}
                return redirect(url_for(endpoint, **target))
        return wrapped
    return decorator
