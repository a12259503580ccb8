from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
from redis import Redis
from rq import Queue
from flask import current_app

from .services.backend import BackendClient


RQ_KEYS = {'job_timeout', 'timeout', 'at_front', 'depends_on', 'result_ttl', 'ttl', 'meta', 'description'}


def _run_inline(args, kwargs):
    func = args[0] if args else None
    func_args = args[1:] if len(args) > 1 else ()
    # strip common RQ kwargs that are not valid for the function call
    safe_kwargs = {k: v for k, v in kwargs.items() if k not in RQ_KEYS}
    try:
        if func:
            return func(*func_args, **safe_kwargs)
    except Exception:
        current_app.logger.exception('Synchronous fallback execution failed')
    return None


class RQWrapper:
    def __init__(self):
        self.redis = None
        self.queue = None

    def init_app(self, app):
        self.redis = None
        self.queue = None
        url = app.config.get("REDIS_URL")
        if not url:
            return
        try:
            self.redis = Redis.from_url(url)
            self.queue = Queue("default", connection=self.redis)
        except Exception:
            # bad URL: leave queue as None and run jobs synchronously
            app.logger.exception('Redis/RQ init failed, falling back to sync execution')
            self.redis = None
            self.queue = None

    def enqueue(self, *args, **kwargs):
        # Prefer enqueueing to RQ if available, but fall back to calling
        # the function synchronously if Redis/RQ is not reachable.
        if not self.queue:
            return _run_inline(args, kwargs)
        try:
            return self.queue.enqueue(*args, **kwargs)
        except Exception:
            current_app.logger.exception('RQ enqueue failed, falling back to sync execution')
            return _run_inline(args, kwargs)


class Backend:
    """Holds the per-app backend client in ``app.extensions``."""

    def init_app(self, app):
        app.extensions['backend'] = BackendClient(
            app.config.get("BACKEND_URL"),
            app.config.get("BACKEND_KEY"),
            timeout=app.config.get("BACKEND_TIMEOUT", 15),
        )

    @property
    def client(self):
        return current_app.extensions['backend']


login_manager = LoginManager()
csrf = CSRFProtect()
rq = RQWrapper()
backend = Backend()
