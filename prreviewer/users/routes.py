from flask import jsonify
from . import users_bp
from .utils import get_user_reviews, set_user_active
from ..utils.payload import json_body, require_arg, require_bool, require_str


# POST /users/setIsActive -> 200 {user} | 404
@users_bp.route("/setIsActive", methods=["POST"])
def set_is_active():
    data = json_body()
    user_id = require_str(data, "user_id")
    is_active = require_bool(data, "is_active")

    user = set_user_active(user_id, is_active)
    return jsonify({"user": user.to_dict()})


# GET /users/getReview?user_id=... -> 200 {user_id, pull_requests}
@users_bp.route("/getReview")
def get_review():
    user_id = require_arg("user_id")
    prs = get_user_reviews(user_id)
    return jsonify({
        "user_id": user_id,
        "pull_requests": [pr.to_short_dict() for pr in prs],
    })
