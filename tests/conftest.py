import pytest

from blog import create_app
from blog.config import TestConfig
from blog.models import Article


@pytest.fixture()
def app():
    # No app context is held here: each client request must get its own
    return create_app(TestConfig)


@pytest.fixture()
def app_ctx(app):
    """For tests that call services directly, without the test client."""
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def article_count(app):
    def _count():
        with app.app_context():
            return Article.query.count()
    return _count


@pytest.fixture()
def token(client):
    r = client.post('/login', json={'username': 'admin', 'password': 'letmein'})
    assert r.status_code == 200
    return r.get_json()['token']


@pytest.fixture()
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def make_article(client, auth_headers):
    """Create an article through the API and return its JSON."""
    def _make(**overrides):
        body = {
            'title': 'Pointers in C',
            'category': 'Basics',
            'description': 'A short tour of pointers',
            'tags': ['c', 'pointers'],
            'content': 'A pointer holds an address.',
            'readTime': '5 min read',
            'createdAt': '2024-01-01',
        }
        body.update(overrides)
        r = client.post('/api/articles', json=body, headers=auth_headers)
        assert r.status_code == 201, r.get_json()
        return r.get_json()
    return _make
