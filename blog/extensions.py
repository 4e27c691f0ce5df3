"""
Flask Extensions

The admin is authenticated per request from a bearer token; Flask-Login
only carries the resulting identity as ``current_user``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for bearer-token admin authentication
login_manager = LoginManager()
