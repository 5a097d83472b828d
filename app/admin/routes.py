"""
Admin Routes

Login state machine: anonymous -> authenticated on a successful credential
check, back to anonymous on logout (the server-side session is deleted).
"""

import logging

from flask import jsonify, redirect, request, session, url_for
from flask_login import current_user, login_user, logout_user

from app.admin import admin_bp
from app.admin.decorators import admin_required
from app.pages.helpers import send_page
from app.services import admins

logger = logging.getLogger(__name__)


def _credentials():
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
    else:
        payload = request.form
    username = payload.get('username')
    password = payload.get('password')
    username = username.strip() if isinstance(username, str) else ''
    password = password if isinstance(password, str) else ''
    return username, password


@admin_bp.route('/adminp/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login page; JSON clients get JSON answers instead of redirects."""
    if request.method == 'GET':
        if current_user.is_authenticated and session.get('admin_id'):
            return redirect(url_for('admin.admin_dashboard'))
        return send_page('admin/login.html')

    username, password = _credentials()
    admin = admins.authenticate(username, password)

    if admin is None:
        logger.info('Failed admin login for %r', username)
        if request.is_json:
            return jsonify({'error': 'Invalid credentials'}), 401
        return redirect(url_for('admin.admin_login'))

    session.clear()
    login_user(admin)
    session['admin_id'] = admin.id
    session['username'] = admin.username
    session['role'] = admin.role
    logger.info('Admin %s logged in', admin.username)

    dashboard = url_for('admin.admin_dashboard')
    if request.is_json:
        return jsonify({'message': 'Logged in', 'redirect': dashboard})
    return redirect(dashboard)


@admin_bp.route('/adminp/logout')
def admin_logout():
    """Destroy the session record. Always ends on the login page."""
    try:
        logout_user()
        session.clear()
    except Exception:
        logger.exception('Could not destroy admin session')
    return redirect(url_for('admin.admin_login'))


@admin_bp.route('/adminp/dashboard')
@admin_required
def admin_dashboard():
    return send_page('admin/dashboard.html')


@admin_bp.route('/admin/adminnews')
@admin_required
def admin_news_page():
    return send_page('admin/adminnews.html')
