"""
Admin Session Tokens

Signed, time-limited bearer tokens carrying the admin username. Tokens
cannot be revoked; a session ends when the client discards its token or
the embedded expiry passes.
"""

import logging
import math
import time

from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from blog.errors import InvalidToken

logger = logging.getLogger(__name__)

TOKEN_SALT = 'admin-session'


def _serializer(secret=None):
    return URLSafeTimedSerializer(secret or current_app.config['JWT_SECRET'], salt=TOKEN_SALT)


def issue_token(username, now=None, secret=None, max_age=None):
    """Return a signed token for ``username`` that expires ``max_age`` seconds from now."""
    if max_age is None:
        max_age = current_app.config['TOKEN_MAX_AGE']
    issued = time.time() if now is None else now
    payload = {'username': username, 'exp': math.ceil(issued + max_age)}
    return _serializer(secret).dumps(payload)


def verify_token(token, now=None, secret=None, max_age=None):
    """Check a token and return its payload.

    Raises InvalidToken when the signature does not match, the payload is
    malformed, or the expiry has passed.
    """
    if max_age is None:
        max_age = current_app.config['TOKEN_MAX_AGE']
    try:
        payload = _serializer(secret).loads(token, max_age=max_age)
    except SignatureExpired:
        logger.debug('Rejected expired token')
        raise InvalidToken()
    except BadSignature:
        logger.debug('Rejected token with bad signature')
        raise InvalidToken()

    if not isinstance(payload, dict):
        raise InvalidToken()
    username = payload.get('username')
    exp = payload.get('exp')
    if not isinstance(username, str) or not isinstance(exp, int):
        raise InvalidToken()

    current = time.time() if now is None else now
    if current >= exp:
        logger.debug('Rejected token for %s: expired at %s', username, exp)
        raise InvalidToken()
    return {'username': username, 'exp': exp}
