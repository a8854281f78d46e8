from ..extensions import db
from ..utils.datetime_tools import utcnow, isoformat_utc

STATUS_OPEN = "OPEN"
STATUS_MERGED = "MERGED"

# Slots per PR; positions are 1..MAX_REVIEWERS
MAX_REVIEWERS = 2


class PullRequest(db.Model):
    __tablename__ = "pull_requests"
    __table_args__ = (
        db.CheckConstraint("status IN ('OPEN', 'MERGED')", name="ck_pull_requests_status"),
    )

    pull_request_id = db.Column(db.String(255), primary_key=True)
    pull_request_name = db.Column(db.String(500), nullable=False)
    author_id = db.Column(
        db.String(255),
        db.ForeignKey("users.user_id", name="fk_pull_requests_author_id"),
        nullable=False,
        index=True,
    )
    status = db.Column(db.String(20), nullable=False, default=STATUS_OPEN)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    merged_at = db.Column(db.DateTime, nullable=True)  # set once, on the first merge

    slots = db.relationship(
        "ReviewSlot",
        backref="pull_request",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ReviewSlot.position",
    )

    @property
    def assigned_reviewers(self):
        return [s.reviewer_id for s in self.slots]

    @property
    def is_merged(self):
        return self.status == STATUS_MERGED

    def to_short_dict(self):
        return {
            "pull_request_id": self.pull_request_id,
            "pull_request_name": self.pull_request_name,
            "author_id": self.author_id,
            "status": self.status,
        }

    def to_dict(self):
        data = self.to_short_dict()
        data["assigned_reviewers"] = self.assigned_reviewers
        data["createdAt"] = isoformat_utc(self.created_at)
        data["mergedAt"] = isoformat_utc(self.merged_at)
        return data


class ReviewSlot(db.Model):
    """A reviewer position on a PR.

    (pr_id, position) never changes once created; reassignment rewrites
    reviewer_id in place.
    """

    __tablename__ = "pr_reviewers"
    __table_args__ = (
        db.CheckConstraint(f"position BETWEEN 1 AND {MAX_REVIEWERS}", name="ck_pr_reviewers_position"),
        db.UniqueConstraint("pr_id", "reviewer_id", name="uq_pr_reviewers_pr_reviewer"),
        db.Index("ix_pr_reviewers_reviewer_id", "reviewer_id"),
    )

    pr_id = db.Column(
        db.String(255),
        db.ForeignKey("pull_requests.pull_request_id", name="fk_pr_reviewers_pr_id", ondelete="CASCADE"),
        primary_key=True,
    )
    position = db.Column(db.SmallInteger, primary_key=True, autoincrement=False)
    reviewer_id = db.Column(
        db.String(255),
        db.ForeignKey("users.user_id", name="fk_pr_reviewers_reviewer_id"),
        nullable=False,
    )
