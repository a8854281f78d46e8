import pytest

from prreviewer import create_app
from prreviewer.extensions import db
from prreviewer.teams.utils import create_team


@pytest.fixture
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_team(app):
    """Create a team from (user_id, is_active) pairs; usernames are derived."""

    def _make(name, *members):
        return create_team(name, [
            {"user_id": uid, "username": f"user-{uid}", "is_active": active}
            for uid, active in members
        ])

    return _make


@pytest.fixture
def backend(make_team):
    """u1 (author) plus three active reviewers."""
    return make_team("backend", ("u1", True), ("u2", True), ("u3", True), ("u4", True))
