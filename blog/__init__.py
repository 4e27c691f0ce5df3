"""
Blog Content Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from blog.config import Config
from blog.extensions import db, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)

    os.makedirs(app.instance_path, exist_ok=True)
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///' + os.path.join(app.instance_path, 'blog.db')

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    from blog.auth.services import load_admin_from_request
    from blog.errors import MissingToken, register_error_handlers

    # Admin identity comes only from the bearer token on each request
    login_manager.request_loader(load_admin_from_request)

    @login_manager.unauthorized_handler
    def unauthorized():
        raise MissingToken()

    register_error_handlers(app)

    # Register blueprints
    from blog.auth import auth_bp
    from blog.articles import articles_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(articles_bp)

    from blog.commands import register_commands
    register_commands(app)

    # Create database tables
    with app.app_context():
        from blog import models  # noqa: F401
        db.create_all()

    return app
