from flask import jsonify
from . import pull_requests_bp
from .assignment import create_pull_request, merge_pull_request, reassign_reviewer
from ..utils.payload import json_body, require_str


# POST /pullRequest/create -> 201 {pr} | 404 NOT_FOUND (author) | 409 PR_EXISTS
@pull_requests_bp.route("/create", methods=["POST"])
def create():
    data = json_body()
    pr_id = require_str(data, "pull_request_id")
    name = require_str(data, "pull_request_name")
    author_id = require_str(data, "author_id")

    pr = create_pull_request(pr_id, name, author_id)
    return jsonify({"pr": pr.to_dict()}), 201


# POST /pullRequest/merge -> 200 {pr} | 404 NOT_FOUND; idempotent
@pull_requests_bp.route("/merge", methods=["POST"])
def merge():
    data = json_body()
    pr = merge_pull_request(require_str(data, "pull_request_id"))
    return jsonify({"pr": pr.to_dict()})


# POST /pullRequest/reassign {pull_request_id, old_user_id}
# -> 200 {pr, replaced_by} | 404 NOT_FOUND | 409 PR_MERGED, NOT_ASSIGNED, NO_CANDIDATE
@pull_requests_bp.route("/reassign", methods=["POST"])
def reassign():
    data = json_body()
    pr_id = require_str(data, "pull_request_id")
    old_user_id = require_str(data, "old_user_id")

    pr, replaced_by = reassign_reviewer(pr_id, old_user_id)
    return jsonify({"pr": pr.to_dict(), "replaced_by": replaced_by})
