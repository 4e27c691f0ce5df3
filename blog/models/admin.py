"""
Admin Identity
"""

from flask_login import UserMixin


class AdminUser(UserMixin):
    """The single admin identity, rebuilt from a verified token per request."""

    def __init__(self, username):
        self.username = username

    def get_id(self):
        return self.username

    def __repr__(self):
        return f'<AdminUser {self.username}>'
