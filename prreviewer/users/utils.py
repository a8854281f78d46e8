from flask import current_app

from ..errors import NotFoundError
from ..models import User
from ..pull_requests.models import PullRequest, ReviewSlot
from ..utils.transaction import atomic


def set_user_active(user_id, is_active):
    with atomic() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFoundError("user not found")
        # Existing review slots are left alone; only an explicit reassign moves them
        user.is_active = is_active
        current_app.logger.info(f"User {user_id} is_active={is_active}")
    return user


def get_user_reviews(user_id):
    """PRs where user_id currently holds a review slot, newest first."""
    with atomic():
        prs = (
            PullRequest.query
            .join(ReviewSlot, ReviewSlot.pr_id == PullRequest.pull_request_id)
            .filter(ReviewSlot.reviewer_id == user_id)
            .order_by(PullRequest.created_at.desc(), PullRequest.pull_request_id.desc())
            .all()
        )
    return prs
