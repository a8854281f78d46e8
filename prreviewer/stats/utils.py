from sqlalchemy import func

from ..extensions import db
from ..pull_requests.models import ReviewSlot
from ..utils.transaction import atomic


def assignment_stats():
    """(user_id, count) of current review slots per user, busiest first."""
    count = func.count(ReviewSlot.pr_id)
    with atomic():
        rows = (
            db.session.query(ReviewSlot.reviewer_id, count)
            .group_by(ReviewSlot.reviewer_id)
            .order_by(count.desc(), ReviewSlot.reviewer_id)
            .all()
        )
    return [(user_id, int(n)) for user_id, n in rows]
