"""
Articles Blueprint

Public read API and token-protected admin API for articles.
"""

from flask import Blueprint

articles_bp = Blueprint('articles', __name__)

from blog.articles import routes  # noqa: E402, F401
