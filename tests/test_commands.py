from sqlalchemy import inspect
from werkzeug.security import check_password_hash

from blog.extensions import db


def test_hash_password(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['hash-password', 'hunter2'])
    assert result.exit_code == 0
    assert check_password_hash(result.output.strip(), 'hunter2')


def test_init_db(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'Initialized' in result.output
    with app.app_context():
        columns = {c['name'] for c in inspect(db.engine).get_columns('articles')}
    assert {'id', 'title', 'tags', 'readTime', 'createdAt'} <= columns
