from flask import Blueprint

pull_requests_bp = Blueprint(
    "pull_requests",
    __name__,
    url_prefix="/pullRequest",
)

from . import routes
