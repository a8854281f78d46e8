from .extensions import db


class User(db.Model):
    __tablename__ = "users"
    __table_args__ = (
        # candidate lookups filter on both columns
        db.Index("ix_users_team_active", "team_name", "is_active"),
    )

    user_id = db.Column(db.String(255), primary_key=True)
    username = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    team_name = db.Column(
        db.String(255),
        db.ForeignKey("teams.team_name", name="fk_users_team_name"),
        nullable=False,
    )

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "username": self.username,
            "team_name": self.team_name,
            "is_active": self.is_active,
        }

    def to_member_dict(self):
        return {
            "user_id": self.user_id,
            "username": self.username,
            "is_active": self.is_active,
        }
