"""
Authentication Services

Credential check for the single admin identity and the per-request
bearer-token gate used by Flask-Login.
"""

import hmac
import logging

from flask import current_app
from werkzeug.security import check_password_hash

from blog.auth.tokens import issue_token, verify_token
from blog.errors import InvalidCredentials, MissingToken
from blog.models import AdminUser

logger = logging.getLogger(__name__)


def _same(supplied, expected):
    if expected is None:
        return False
    return hmac.compare_digest(supplied.encode('utf-8'), expected.encode('utf-8'))


def authenticate(username, password):
    """Return a session token when ``username``/``password`` are the admin's.

    Both fields are always compared so a wrong username and a wrong
    password fail identically.
    """
    if not isinstance(username, str) or not isinstance(password, str):
        raise InvalidCredentials()

    config = current_app.config
    user_ok = _same(username, config['ADMIN_USERNAME'])
    password_hash = config.get('ADMIN_PASSWORD_HASH')
    if password_hash:
        password_ok = check_password_hash(password_hash, password)
    else:
        password_ok = _same(password, config['ADMIN_PASSWORD'])

    if not (user_ok and password_ok):
        logger.info('Failed admin login for %r', username)
        raise InvalidCredentials()

    logger.info('Admin %s logged in', username)
    return issue_token(username)


def bearer_token(request):
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def load_admin_from_request(request):
    """Flask-Login request loader.

    Raises MissingToken when no bearer token is sent and InvalidToken when
    it does not verify; otherwise returns the admin identity.
    """
    token = bearer_token(request)
    if token is None:
        raise MissingToken()
    payload = verify_token(token)
    return AdminUser(payload['username'])
