from flask import jsonify
from . import teams_bp
from .utils import create_team, get_team
from ..errors import ValidationError
from ..utils.payload import json_body, require_arg, require_bool, require_str


def _parse_members(raw):
    """Validate the members list; a repeated user_id keeps its last entry."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError("members must be a list")
    members = {}
    for item in raw:
        if not isinstance(item, dict):
            raise ValidationError("each member must be an object")
        user_id = require_str(item, "user_id")
        members.pop(user_id, None)
        members[user_id] = {
            "user_id": user_id,
            "username": require_str(item, "username"),
            "is_active": require_bool(item, "is_active"),
        }
    return list(members.values())


# POST /team/add -> 201 {team} | 400 TEAM_EXISTS
@teams_bp.route("/add", methods=["POST"])
def add():
    data = json_body()
    team_name = require_str(data, "team_name")
    members = _parse_members(data.get("members"))

    team = create_team(team_name, members)
    return jsonify({"team": team.to_dict()}), 201


# GET /team/get?team_name=... -> 200 Team | 404
@teams_bp.route("/get")
def get():
    team = get_team(require_arg("team_name"))
    return jsonify(team.to_dict())
