from flask import Blueprint

bp = Blueprint("freelancers", __name__)

from . import routes  # noqa: E402,F401
