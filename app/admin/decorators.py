"""
Admin Decorator

Gate for every admin page and admin API route. Browser oriented: an
unauthenticated request is always redirected to the login page.
"""

from functools import wraps

from flask import g, session, redirect, url_for
from flask_login import current_user


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    On success the admin's username is exposed as ``g.admin_username``.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated or not session.get('admin_id'):
            return redirect(url_for('admin.admin_login'))
        g.admin_username = session.get('username') or current_user.username
        return f(*args, **kwargs)
    return wrapper
