from ..extensions import db
from ..models import User

class Team(db.Model):
    __tablename__ = "teams"

    team_name = db.Column(db.String(255), primary_key=True)

    members = db.relationship("User", backref="team", order_by=User.user_id)

    def to_dict(self):
        return {
            "team_name": self.team_name,
            "members": [m.to_member_dict() for m in self.members],
        }
