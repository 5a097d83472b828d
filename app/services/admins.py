"""
Administrator Service

Lookup, credential checks and first-boot seeding for admin accounts.
"""

import logging

from app.extensions import db
from app.models import Admin

logger = logging.getLogger(__name__)


def get_admin(admin_id):
    return db.session.get(Admin, admin_id)


def get_admin_by_username(username):
    return Admin.query.filter_by(username=username).first()


def authenticate(username, password):
    """Return the Admin for valid credentials, else None."""
    if not username or not password:
        return None
    admin = get_admin_by_username(username)
    if admin and admin.check_password(password):
        return admin
    return None


def seed_default_admin(username, password, role='admin'):
    """Create the default administrator unless it already exists.

    Returns the new Admin, or None when nothing was created.
    """
    if get_admin_by_username(username):
        return None

    admin = Admin(username=username, role=role)
    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()
    # Only time the plaintext password is ever emitted
    logger.warning('Admin created: %s / %s', username, password)
    logger.warning('Change the admin password after first login!')
    return admin
