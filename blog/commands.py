"""
CLI Commands

    flask --app app init-db
    flask --app app hash-password <password>
"""

import click
from flask.cli import with_appcontext
from werkzeug.security import generate_password_hash

from blog.extensions import db


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the articles table if it does not exist."""
    from blog import models  # noqa: F401
    db.create_all()
    click.echo('Initialized the database.')


@click.command('hash-password')
@click.argument('password')
def hash_password_command(password):
    """Print a hash to use as ADMIN_PASSWORD_HASH."""
    click.echo(generate_password_hash(password, method='pbkdf2:sha256'))


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(hash_password_command)
