"""Concurrent operations against a file-backed SQLite database."""

import random
import threading
import time

import pytest

from config import TestConfig
from prreviewer import create_app
from prreviewer.errors import ServiceError
from prreviewer.extensions import db
from prreviewer.pull_requests import assignment
from prreviewer.pull_requests.assignment import create_pull_request, reassign_reviewer
from prreviewer.pull_requests.models import ReviewSlot
from prreviewer.teams.utils import create_team


@pytest.fixture
def file_app(tmp_path):
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'reviews.db'}"

    app = create_app(FileConfig)
    yield app
    with app.app_context():
        db.engine.dispose()


# =====================================================================
# Reassignment races
# =====================================================================


class TestConcurrentReassign:
    def test_same_slot_only_one_succeeds(self, file_app, monkeypatch) -> None:
        with file_app.app_context():
            create_team("backend", [
                {"user_id": f"u{n}", "username": f"user-u{n}", "is_active": True}
                for n in range(1, 6)
            ])
            pr = create_pull_request("pr-1", "Fix", "u1", rng=random.Random(3))
            old, other = pr.assigned_reviewers

        # hold the first reassign open after it has read the slots
        in_transaction = threading.Event()
        real_select = assignment.select_candidates

        def slow_select(*args, **kwargs):
            picked = real_select(*args, **kwargs)
            in_transaction.set()
            time.sleep(0.3)
            return picked

        monkeypatch.setattr(assignment, "select_candidates", slow_select)

        results = []

        def reassign():
            with file_app.app_context():
                try:
                    _, new = reassign_reviewer("pr-1", old)
                except ServiceError as e:
                    results.append(("error", e.code))
                else:
                    results.append(("ok", new))

        first = threading.Thread(target=reassign)
        first.start()
        assert in_transaction.wait(timeout=5)
        second = threading.Thread(target=reassign)
        second.start()
        first.join(timeout=10)
        second.join(timeout=10)

        # the second reassign waits for the first, then finds old already replaced
        assert len(results) == 2
        (failed, code), (status, new) = sorted(results)
        assert (failed, code) == ("error", "NOT_ASSIGNED")
        assert status == "ok"
        assert new not in {old, other, "u1"}

        with file_app.app_context():
            rows = ReviewSlot.query.filter_by(pr_id="pr-1").order_by(ReviewSlot.position).all()
            assert [(s.position, s.reviewer_id) for s in rows] == [(1, new), (2, other)]
