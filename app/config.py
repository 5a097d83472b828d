"""
Configuration settings for the StealthUnit CMS backend
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _database_url(basedir):
    url = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'stealthunit.db')
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    """Flask application configuration"""

    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    ENV = os.environ.get('FLASK_ENV') or os.environ.get('ENV') or 'development'
    IS_PRODUCTION = ENV == 'production'
    PORT = int(os.environ.get('PORT', 3000))

    # Session secret
    SECRET_KEY = os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY') or \
        'dev-secret-key-change-in-production-12345'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = _database_url(basedir)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions, stored next to the content tables
    SESSION_TYPE = 'sqlalchemy'
    SESSION_SQLALCHEMY_TABLE = 'sessions'
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    # Expiry counts from login, not from the last request
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = IS_PRODUCTION

    # Static site and uploads
    PUBLIC_FOLDER = os.path.join(basedir, 'public')
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(PUBLIC_FOLDER, 'uploads')
    UPLOAD_URL_PREFIX = '/uploads/'
    ALLOWED_IMAGE_EXTENSIONS = {'jpeg', 'jpg', 'png', 'gif'}
    ALLOWED_IMAGE_MIMETYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif'}

    # Content defaults
    ORGANIZATION_NAME = 'StealthUnit'

    # Seeded administrator
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'StealthUnitGG!2025'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_COOKIE_SECURE = False
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'StealthUnitGG!2025'
