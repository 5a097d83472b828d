"""
StealthUnit CMS - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import Config
from app.extensions import UnavailableSessionInterface, db, login_manager, server_session

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Public assets are served straight from the site root
    app = Flask(__name__, static_folder=config_class.PUBLIC_FOLDER, static_url_path='')
    app.config.from_object(config_class)
    app.config['SESSION_SQLALCHEMY'] = db

    os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    try:
        server_session.init_app(app)
    except SQLAlchemyError as e:
        logger.error('❌ Session store unavailable: %s', e)
        app.session_interface = UnavailableSessionInterface()

    # Register blueprints
    from app.pages import pages_bp
    from app.admin import admin_bp
    from app.api import api_bp
    from app.errors import register_error_handlers

    app.register_blueprint(pages_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_admin(admin_id):
        from app.services.admins import get_admin
        return get_admin(int(admin_id))

    # Create database tables and the default administrator
    with app.app_context():
        if _ensure_store():
            _ensure_default_admin(app)

    return app


def _ensure_store():
    """Create tables and check the connection. Failure is logged, not raised."""
    try:
        db.create_all()
        db.session.execute(text('SELECT 1'))
        logger.info('✅ Connected to database')
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('❌ Database error: %s', e)
        return False


def _ensure_default_admin(app):
    """Seed the default administrator once."""
    from app.services.admins import seed_default_admin

    try:
        seed_default_admin(app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD'])
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not create default admin: %s', e)
