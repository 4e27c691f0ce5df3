"""
Configuration settings for the blog content backend
"""
import os


def _database_uri():
    uri = os.environ.get('DATABASE_URL')
    if uri and uri.startswith('postgres://'):
        uri = uri.replace('postgres://', 'postgresql://', 1)
    return uri


class Config:
    """Flask application configuration"""

    # Flask secret key (also signs admin tokens unless JWT_SECRET is set)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    JWT_SECRET = os.environ.get('JWT_SECRET') or SECRET_KEY

    # Database configuration; None means "blog.db in the instance folder"
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ---------------------------------------------------------------------
    # Admin Credentials
    # There is exactly one admin identity. ADMIN_PASSWORD_HASH (a werkzeug
    # hash, see `flask hash-password`) wins over the plaintext password.
    # ---------------------------------------------------------------------
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')

    # Admin session tokens expire 8 hours after issuance
    TOKEN_MAX_AGE = 8 * 60 * 60

    # Article listing
    DEFAULT_PAGE_LIMIT = 6
    MAX_PAGE_LIMIT = 1000

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET = 'test-jwt-secret'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'letmein'
    ADMIN_PASSWORD_HASH = None
