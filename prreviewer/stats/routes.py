from flask import jsonify
from . import stats_bp
from .utils import assignment_stats


# GET /stats/assignments-by-user -> 200 {items: [{user_id, count}]}
@stats_bp.route("/assignments-by-user")
def assignments_by_user():
    items = [{"user_id": user_id, "count": n} for user_id, n in assignment_stats()]
    return jsonify({"items": items})
