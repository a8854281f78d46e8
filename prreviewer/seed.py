import click
from faker import Faker
from flask.cli import with_appcontext

from .extensions import db
from .teams.utils import create_team


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    click.echo("✅ Tables created")


@click.command("seed")
@click.option("--team", "team_name", default="backend", show_default=True)
@click.option("--members", default=4, show_default=True, type=click.IntRange(min=1))
@with_appcontext
def seed_command(team_name, members):
    """Wipe DB, recreate tables, and seed one active team u1..uN."""
    fake = Faker()

    click.echo("➡️ Dropping database...")
    db.session.remove()
    db.drop_all()

    click.echo("➡️ Recreating tables...")
    db.create_all()

    create_team(team_name, [
        {"user_id": f"u{i}", "username": fake.user_name(), "is_active": True}
        for i in range(1, members + 1)
    ])
    click.echo(f"✅ Team {team_name} seeded with {members} member(s)")
