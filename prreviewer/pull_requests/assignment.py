"""Reviewer assignment engine.

Picks reviewers when a pull request is created and replaces one reviewer on
request. Every flow runs inside a single ``atomic()`` transaction so the
checks it makes still hold when its write is committed:

- create: insert the PR, then fill up to ``MAX_REVIEWERS`` slots with active
  members of the author's team (never the author).
- merge: OPEN -> MERGED once; repeating it returns the stored state.
- reassign: rewrite the reviewer of one existing slot with an active member
  of the replaced reviewer's current team, excluding the replaced reviewer,
  the author and whoever holds the other slot.

Candidates are drawn uniformly at random without replacement. The random
source is pluggable (any ``random.Random``) so tests can seed it.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..errors import (
    ConflictError,
    NotFoundError,
    NO_CANDIDATE,
    NOT_ASSIGNED,
    PR_EXISTS,
    PR_MERGED,
)
from ..models import User
from ..utils.datetime_tools import utcnow
from ..utils.transaction import atomic
from .models import (
    MAX_REVIEWERS,
    STATUS_MERGED,
    STATUS_OPEN,
    PullRequest,
    ReviewSlot,
)

_rng = random.SystemRandom()


def select_candidates(
    session,
    team_name: str,
    exclude: Iterable[str],
    max_count: int,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Pick up to ``max_count`` active members of ``team_name``.

    Args:
        session: Session of the caller's transaction.
        team_name: Team the candidates must currently belong to.
        exclude: User ids that may not be picked.
        max_count: Upper bound on the number of ids returned (>= 1).
        rng: Random source; system entropy when None.

    Returns:
        Distinct user ids in random order. Fewer than ``max_count`` (possibly
        none) when the eligible set is smaller; that is not an error.
    """
    if max_count < 1:
        raise ValueError("max_count must be at least 1")

    query = session.query(User.user_id).filter(
        User.team_name == team_name,
        User.is_active == True,  # noqa: E712
    )
    excluded = set(exclude)
    if excluded:
        query = query.filter(User.user_id.notin_(sorted(excluded)))

    # Sorted so the outcome depends only on the random source, not on row order
    eligible = sorted(row.user_id for row in query)
    rng = rng or _rng
    return rng.sample(eligible, min(max_count, len(eligible)))


def create_pull_request(
    pull_request_id: str,
    name: str,
    author_id: str,
    rng: Optional[random.Random] = None,
) -> PullRequest:
    """Create an OPEN pull request and auto-assign up to two reviewers.

    Raises:
        NotFoundError: the author does not exist.
        ConflictError: PR_EXISTS, including when a concurrent create with the
            same id wins the insert.
    """
    with atomic() as session:
        author = session.get(User, author_id)
        if author is None:
            raise NotFoundError("author not found")
        if session.get(PullRequest, pull_request_id) is not None:
            raise ConflictError(PR_EXISTS, "PR id already exists")

        pr = PullRequest(
            pull_request_id=pull_request_id,
            pull_request_name=name,
            author_id=author_id,
            status=STATUS_OPEN,
        )
        session.add(pr)
        try:
            session.flush()
        except IntegrityError as e:
            # lost the race between the existence check and the insert
            raise ConflictError(PR_EXISTS, "PR id already exists") from e

        reviewers = select_candidates(
            session, author.team_name, {author_id}, MAX_REVIEWERS, rng=rng
        )
        for position, reviewer_id in enumerate(reviewers, start=1):
            pr.slots.append(ReviewSlot(position=position, reviewer_id=reviewer_id))
        session.flush()

        current_app.logger.info(
            f"PR {pull_request_id} created by {author_id}; reviewers: {pr.assigned_reviewers}"
        )
    return pr


def merge_pull_request(pull_request_id: str) -> PullRequest:
    """Mark a pull request MERGED. Idempotent: a merged PR is returned as is."""
    with atomic() as session:
        pr = session.get(PullRequest, pull_request_id)
        if pr is None:
            raise NotFoundError("PR not found")

        if not pr.is_merged:
            # Only a row that is still OPEN is touched, so a concurrent merge
            # can never overwrite merged_at.
            updated = (
                PullRequest.query
                .filter_by(pull_request_id=pull_request_id, status=STATUS_OPEN)
                .update(
                    {PullRequest.status: STATUS_MERGED, PullRequest.merged_at: utcnow()},
                    synchronize_session=False,
                )
            )
            session.refresh(pr)
            if updated:
                current_app.logger.info(f"PR {pull_request_id} merged at {pr.merged_at}")
            else:
                current_app.logger.info(f"PR {pull_request_id} was merged concurrently")

        current_app.logger.debug(
            f"PR {pull_request_id}: status={pr.status} reviewers={pr.assigned_reviewers}"
        )
    return pr


def reassign_reviewer(
    pull_request_id: str,
    old_user_id: str,
    rng: Optional[random.Random] = None,
) -> tuple[PullRequest, str]:
    """Replace ``old_user_id`` on a pull request with another reviewer.

    The replacement comes from the replaced reviewer's current team and takes
    over the same slot position.

    Returns:
        The updated pull request and the id of the new reviewer.

    Raises:
        NotFoundError: unknown PR (or an unknown old reviewer).
        ConflictError: PR_MERGED, NOT_ASSIGNED or NO_CANDIDATE.
    """
    with atomic() as session:
        # Row locks serialize concurrent reassigns/merges of the same PR
        pr = (
            PullRequest.query
            .filter_by(pull_request_id=pull_request_id)
            .with_for_update()
            .first()
        )
        if pr is None:
            raise NotFoundError("PR not found")
        if pr.is_merged:
            raise ConflictError(PR_MERGED, "cannot reassign on merged PR")

        slots = (
            ReviewSlot.query
            .filter_by(pr_id=pull_request_id)
            .order_by(ReviewSlot.position)
            .with_for_update()
            .all()
        )
        slot = next((s for s in slots if s.reviewer_id == old_user_id), None)
        if slot is None:
            raise ConflictError(NOT_ASSIGNED, "reviewer is not assigned to this PR")

        old_user = session.get(User, old_user_id)
        if old_user is None:
            raise NotFoundError("user not found")

        other_reviewers = {s.reviewer_id for s in slots if s.position != slot.position}
        exclude = {old_user_id, pr.author_id} | other_reviewers
        picked = select_candidates(session, old_user.team_name, exclude, 1, rng=rng)
        if not picked:
            raise ConflictError(NO_CANDIDATE, "no active replacement candidate in team")

        new_reviewer_id = picked[0]
        slot.reviewer_id = new_reviewer_id
        session.flush()
        session.refresh(pr)

        current_app.logger.info(
            f"PR {pull_request_id} slot {slot.position}: {old_user_id} -> {new_reviewer_id}; "
            f"reviewers: {pr.assigned_reviewers}"
        )
    return pr, new_reviewer_id
