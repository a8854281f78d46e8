from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, TEAM_EXISTS
from ..models import User
from ..utils.transaction import atomic
from .models import Team


def create_team(team_name, members):
    """Create a team and upsert its members (keyed on user_id).

    Existing users are moved into the new team with the given username and
    is_active. Team insert and member upserts commit together.
    """
    with atomic() as session:
        if session.get(Team, team_name) is not None:
            raise ConflictError(TEAM_EXISTS, "team_name already exists")

        team = Team(team_name=team_name)
        session.add(team)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(TEAM_EXISTS, "team_name already exists") from e

        for m in members:
            user = session.get(User, m["user_id"])
            if user is None:
                user = User(user_id=m["user_id"])
                session.add(user)
            user.username = m["username"]
            user.is_active = m["is_active"]
            user.team_name = team_name
        session.flush()
        session.refresh(team)

        current_app.logger.info(f"Team {team_name} created with {len(team.members)} member(s)")
    return team


def get_team(team_name):
    with atomic() as session:
        team = session.get(Team, team_name)
        if team is None:
            raise NotFoundError("team not found")
        # members are read here, inside the transaction, not lazily by the caller
        members = team.members
        current_app.logger.debug(f"Team {team_name}: {len(members)} member(s)")
    return team
